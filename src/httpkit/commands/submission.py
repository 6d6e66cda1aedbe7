from pydantic import BaseModel, Field


class SubmissionCommand(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1) # link to the submitted work
