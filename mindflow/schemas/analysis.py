from pydantic import BaseModel, Field

class AnalyzeMoodIn(BaseModel):
    analysisType: str = Field(..., description="facial | journal | chat")
    imageBase64: str | None = None
    userInput: str | None = Field(default=None, max_length=10000)
