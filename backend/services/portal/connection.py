"""
Database connectivity check.
"""
import logging

from core.database import Database
from services.portal.results import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


async def check_connection(database: Database) -> Result:
    """Count the students collection to prove the store answers."""
    try:
        count = await database.count_students()
    except Exception as e:
        logger.exception("MongoDB connectivity check failed")
        return Err(ErrorKind.STORE_UNAVAILABLE, f"Error al conectar con MongoDB: {e}")

    return Ok(f"¡Conexión exitosa! La colección 'estudiantes' tiene {count} documentos.")
