"""
Data models for students and general documents as stored in MongoDB.
"""
from typing import Any, List, Optional

from bson import Decimal128, ObjectId
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _stringify_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


class Advisor(BaseModel):
    """Advisor embedded in a student record."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="nombre")
    email: Optional[str] = Field(default=None, alias="correo")


class Course(BaseModel):
    """Course embedded in a student's enrolled list."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="nombre")
    code: Optional[str] = Field(default=None, alias="codigo")


class Student(BaseModel):
    """
    Student record, served as stored. Fields absent from the document are
    served as null.

    The password field is included in responses; it is compared verbatim
    on login and never hashed by this service.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="id",
    )
    student_code: str = Field(alias="codigo_estudiante")
    password_hash: Optional[str] = Field(default=None, alias="password_hash")
    full_name: Optional[str] = Field(default=None, alias="nombre_completo")
    program: Optional[str] = Field(default=None, alias="carrera")
    weighted_average: Optional[float] = Field(default=None, alias="promedio_ponderado")
    advisor: Optional[Advisor] = Field(default=None, alias="asesor")
    enrolled_courses: Optional[List[Course]] = Field(default=None, alias="cursos_inscritos")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        return _stringify_id(value)

    @field_validator("weighted_average", mode="before")
    @classmethod
    def decimal_to_float(cls, value: Any) -> Any:
        # Averages saved from other drivers may come back as Decimal128
        if isinstance(value, Decimal128):
            return float(value.to_decimal())
        return value


class GeneralDocument(BaseModel):
    """General-purpose document (e.g. the academic regulations)."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="id",
    )
    doc_type: str = Field(alias="tipo")
    content: str = Field(alias="contenido")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        return _stringify_id(value)

    def to_document(self) -> dict:
        """Mongo document for insertion (the store assigns _id)."""
        return {"tipo": self.doc_type, "contenido": self.content}
