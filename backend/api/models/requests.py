"""
Pydantic request models for API endpoints.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request model for student login."""
    model_config = ConfigDict(populate_by_name=True)

    student_code: str = Field(
        ...,
        validation_alias=AliasChoices("codigoEstudiante", "CodigoEstudiante"),
        serialization_alias="codigoEstudiante",
        description="Student code",
    )
    password: str = Field(
        ...,
        validation_alias=AliasChoices("password", "Password"),
        description="Password value, compared verbatim",
    )


class ChatRequest(BaseModel):
    """Request model for the regulations chatbot."""
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(
        ...,
        validation_alias=AliasChoices("Pregunta", "pregunta"),
        serialization_alias="Pregunta",
        description="User question",
    )
