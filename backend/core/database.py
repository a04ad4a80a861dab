"""
MongoDB connection and collection handles.
"""
import logging
from typing import Any, Dict, Optional

from pymongo import AsyncMongoClient

from core.config import UniversityDatabaseSettings
from core.logging_config import log_latency

logger = logging.getLogger(__name__)


class Database:
    """Owns the Mongo client for the lifetime of the application."""

    def __init__(self, settings: UniversityDatabaseSettings, client: Optional[AsyncMongoClient] = None):
        self.settings = settings
        self.client = client if client is not None else AsyncMongoClient(settings.connection_string)
        self.db = self.client[settings.database_name]

    @property
    def students(self):
        return self.db[self.settings.students_collection_name]

    @property
    def general_documents(self):
        return self.db[self.settings.general_documents_collection_name]

    # Configured but not read by any endpoint yet
    @property
    def forms(self):
        return self.db[self.settings.forms_collection_name]

    @property
    def chat_messages(self):
        return self.db[self.settings.chat_messages_collection_name]

    @log_latency("mongo.count_students")
    async def count_students(self) -> int:
        """Count every document in the students collection."""
        return await self.students.count_documents({})

    @log_latency("mongo.find_student")
    async def find_student(self, student_code: str, password: str) -> Optional[Dict[str, Any]]:
        """First student whose code and stored password both match exactly."""
        return await self.students.find_one({
            "codigo_estudiante": student_code,
            "password_hash": password,
        })

    @log_latency("mongo.find_general_document")
    async def find_general_document(self, doc_type: str) -> Optional[Dict[str, Any]]:
        return await self.general_documents.find_one({"tipo": doc_type})

    @log_latency("mongo.insert_general_document")
    async def insert_general_document(self, document: Dict[str, Any]) -> Any:
        """Insert a general document and return the store-assigned id."""
        result = await self.general_documents.insert_one(document)
        return result.inserted_id

    async def close(self):
        await self.client.close()
        logger.info("MongoDB client closed")
