from datetime import datetime
from pydantic import BaseModel

class UserOut(BaseModel):
    id: int
    email: str
    name: str | None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
