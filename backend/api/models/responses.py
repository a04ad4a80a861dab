"""
Pydantic response models for API endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field


class ChatResponse(BaseModel):
    """Response model for the regulations chatbot."""
    model_config = ConfigDict(populate_by_name=True)

    answer: str = Field(..., alias="respuesta")


class ProblemDetail(BaseModel):
    """RFC 7807 error body."""
    type: str = "about:blank"
    title: str
    status: int
    detail: str
