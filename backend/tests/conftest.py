"""
Shared fixtures for the portal tests.
"""
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_database, get_ollama_client, get_prompt_manager
from api.main import create_app
from core.config import OllamaSettings, Settings, UniversityDatabaseSettings
from core.prompt_manager import PromptManager
from tests.fakes import STUDENT_C1, InMemoryDatabase, RecordingOllama


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database=UniversityDatabaseSettings(
            connection_string="mongodb://localhost:27017",
            database_name="universidad_test",
            students_collection_name="estudiantes",
            forms_collection_name="formularios",
            chat_messages_collection_name="mensajes_chat",
            general_documents_collection_name="documentos_generales",
        ),
        ollama=OllamaSettings(base_url="http://ollama.test:11434", model="tinyllama", timeout=5.0),
        cors_origins=["http://localhost:8080", "http://localhost:9000"],
        validate_on_startup=False,
    )


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase(students=[STUDENT_C1])


@pytest.fixture
def ollama() -> RecordingOllama:
    return RecordingOllama()


@pytest.fixture
def prompts(tmp_path) -> PromptManager:
    # Empty directory so only the built-in template is used
    return PromptManager(prompts_dir=tmp_path)


@pytest.fixture
def client(settings, database, ollama, prompts) -> TestClient:
    app = create_app(settings)
    ollama_client = ollama.client(settings.ollama)
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_ollama_client] = lambda: ollama_client
    app.dependency_overrides[get_prompt_manager] = lambda: prompts
    return TestClient(app)
