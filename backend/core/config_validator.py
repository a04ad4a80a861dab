"""
Configuration validation for the student portal backend.
Validates settings and the Ollama service on startup.
"""
import requests
from typing import List, Dict, Any

from core.config import Settings


class ConfigValidator:
    """Validates system configuration before serving requests."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_all(self) -> Dict[str, Any]:
        """
        Run all validation checks.

        Returns:
            {
                "valid": bool,
                "errors": List[str],
                "warnings": List[str]
            }
        """
        self.errors = []
        self.warnings = []

        self._validate_database_settings()
        self._validate_config_values()
        self._validate_ollama_connection()

        return {
            "valid": len(self.errors) == 0,
            "errors": self.errors,
            "warnings": self.warnings
        }

    def _validate_database_settings(self):
        """Check that every database setting is present and well formed."""
        db_settings = self.settings.database

        if not db_settings.connection_string.startswith(("mongodb://", "mongodb+srv://")):
            self.errors.append(
                f"MONGODB_CONNECTION_STRING must start with mongodb:// or mongodb+srv://, "
                f"got {db_settings.connection_string!r}"
            )

        required = {
            "MONGODB_DATABASE_NAME": db_settings.database_name,
            "STUDENTS_COLLECTION_NAME": db_settings.students_collection_name,
            "FORMS_COLLECTION_NAME": db_settings.forms_collection_name,
            "CHAT_MESSAGES_COLLECTION_NAME": db_settings.chat_messages_collection_name,
            "GENERAL_DOCUMENTS_COLLECTION_NAME": db_settings.general_documents_collection_name,
        }
        for name, value in required.items():
            if not value or not value.strip():
                self.errors.append(f"{name} must not be empty")

    def _validate_config_values(self):
        """Validate value ranges for the Ollama and CORS settings."""
        ollama = self.settings.ollama

        if not ollama.model:
            self.errors.append("OLLAMA_MODEL must not be empty")

        if ollama.timeout <= 0:
            self.errors.append(f"OLLAMA_TIMEOUT ({ollama.timeout}) must be > 0")

        if not self.settings.cors_origins:
            self.warnings.append("CORS_ORIGINS is empty; browsers will be blocked from every origin")

    def _validate_ollama_connection(self):
        """Check that Ollama is reachable and the chat model is pulled."""
        base_url = self.settings.ollama.base_url
        model = self.settings.ollama.model

        # The chat endpoint reports Ollama outages itself, so these are only warnings
        try:
            response = requests.get(f"{base_url}/api/tags", timeout=5)
            response.raise_for_status()
        except requests.exceptions.ConnectionError:
            self.warnings.append(
                f"Cannot connect to Ollama at {base_url}. "
                "Ensure Ollama is running: `ollama serve`"
            )
            return
        except requests.exceptions.Timeout:
            self.warnings.append(
                f"Ollama connection timeout at {base_url}. "
                "Check network or Ollama performance."
            )
            return
        except requests.exceptions.RequestException as e:
            self.warnings.append(f"Ollama connection error: {e}")
            return

        try:
            available_models = [m["name"] for m in response.json().get("models", [])]
        except (ValueError, KeyError, TypeError) as e:
            self.warnings.append(f"Unexpected /api/tags response from Ollama: {e}")
            return

        # Ollama lists untagged models as "<name>:latest"
        if model not in available_models and f"{model}:latest" not in available_models:
            self.warnings.append(
                f"Chat model not found: {model}. "
                f"Pull it with: `ollama pull {model}`"
            )
