"""
Student login lookup.

Credentials are matched with a plain equality query on the stored
``password_hash`` field. Whatever the client sends is compared verbatim,
so the field only holds a hash if the client hashed it first.
"""
import logging

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from core.database import Database
from models.student_models import Student
from services.portal.results import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Código de estudiante o contraseña inválidos."


async def login(database: Database, student_code: str, password: str) -> Result:
    """
    Look up the student matching both code and password.

    Unknown codes and wrong passwords produce the same error.
    """
    try:
        document = await database.find_student(student_code, password)
    except PyMongoError as e:
        logger.exception("Student lookup failed")
        return Err(ErrorKind.STORE_UNAVAILABLE, f"Error al conectar con MongoDB: {e}")

    if document is None:
        logger.info(f"Rejected login for student code {student_code!r}")
        return Err(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)

    try:
        student = Student.model_validate(document)
    except ValidationError as e:
        logger.exception(f"Stored record for student code {student_code!r} does not match the Student model")
        return Err(ErrorKind.INVALID_STORED_RECORD, f"Registro de estudiante inválido: {e}")

    return Ok(student)
