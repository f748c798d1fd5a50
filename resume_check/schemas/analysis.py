from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    analysis: str


class MessageResponse(BaseModel):
    message: str
