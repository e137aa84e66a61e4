from pydantic import BaseModel, EmailStr, Field, field_validator

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str | None = Field(default=None, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        # bcrypt only looks at the first 72 bytes
        if len(v.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return v

class TokenUser(BaseModel):
    id: int
    email: str
    name: str | None = None

class TokenOut(BaseModel):
    access_token: str
    user: TokenUser
