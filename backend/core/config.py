"""
Configuration management for the student portal backend.
Loads configuration from environment variables and .env file.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
# Look for .env file in the project root or the backend directory
BACKEND_DIR = Path(__file__).parent.parent
PROJECT_ROOT = BACKEND_DIR.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
else:
    backend_env = BACKEND_DIR / ".env"
    if backend_env.exists():
        load_dotenv(backend_env)

PROMPTS_DIR = BACKEND_DIR / "prompts"


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""
    pass


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


# MongoDB configuration
MONGODB_CONNECTION_STRING = os.getenv("MONGODB_CONNECTION_STRING", "mongodb://localhost:27017")
MONGODB_DATABASE_NAME = os.getenv("MONGODB_DATABASE_NAME", "universidad")
STUDENTS_COLLECTION_NAME = os.getenv("STUDENTS_COLLECTION_NAME", "estudiantes")
FORMS_COLLECTION_NAME = os.getenv("FORMS_COLLECTION_NAME", "formularios")
CHAT_MESSAGES_COLLECTION_NAME = os.getenv("CHAT_MESSAGES_COLLECTION_NAME", "mensajes_chat")
GENERAL_DOCUMENTS_COLLECTION_NAME = os.getenv("GENERAL_DOCUMENTS_COLLECTION_NAME", "documentos_generales")

# Ollama configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "tinyllama")
OLLAMA_TIMEOUT = _env_float("OLLAMA_TIMEOUT", "300")  # LLM generation can be slow

# API configuration
# CORS origins can be comma-separated list in env var
CORS_ORIGINS_STR = os.getenv("CORS_ORIGINS", "http://localhost:8080,http://localhost:9000")
CORS_ORIGINS = [origin.strip() for origin in CORS_ORIGINS_STR.split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VALIDATE_ON_STARTUP = os.getenv("VALIDATE_ON_STARTUP", "true").lower() == "true"


@dataclass(frozen=True)
class UniversityDatabaseSettings:
    """Connection details and collection names for the university database."""
    connection_string: str
    database_name: str
    students_collection_name: str
    forms_collection_name: str
    chat_messages_collection_name: str
    general_documents_collection_name: str


@dataclass(frozen=True)
class OllamaSettings:
    """Where and how to reach the local Ollama server."""
    base_url: str
    model: str
    timeout: float


@dataclass(frozen=True)
class Settings:
    """Everything the application reads at startup."""
    database: UniversityDatabaseSettings
    ollama: OllamaSettings
    cors_origins: List[str]
    log_level: str = "INFO"
    validate_on_startup: bool = True


def load_settings() -> Settings:
    """Build the settings record from the module-level configuration."""
    return Settings(
        database=UniversityDatabaseSettings(
            connection_string=MONGODB_CONNECTION_STRING,
            database_name=MONGODB_DATABASE_NAME,
            students_collection_name=STUDENTS_COLLECTION_NAME,
            forms_collection_name=FORMS_COLLECTION_NAME,
            chat_messages_collection_name=CHAT_MESSAGES_COLLECTION_NAME,
            general_documents_collection_name=GENERAL_DOCUMENTS_COLLECTION_NAME,
        ),
        ollama=OllamaSettings(
            base_url=OLLAMA_BASE_URL.rstrip("/"),
            model=OLLAMA_MODEL,
            timeout=OLLAMA_TIMEOUT,
        ),
        cors_origins=list(CORS_ORIGINS),
        log_level=LOG_LEVEL,
        validate_on_startup=VALIDATE_ON_STARTUP,
    )
