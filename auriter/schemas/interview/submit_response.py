"""
Description: 
Schemas for submitting a single interview answer.

Dependencies:
- pydantic: For data validation and settings management.

"""
from pydantic import BaseModel, Field

class SubmitResponseRequest(BaseModel):
    question: str = Field(..., min_length=1)
    response: str = Field(default="")

class SubmitResponseResponse(BaseModel):
    success: bool = True
    message: str = "Response submitted successfully!"
