"""
FastAPI main application.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, load_settings
from core.config_validator import ConfigValidator
from core.database import Database
from core.logging_config import setup_logging
from core.ollama_client import OllamaClient
from core.prompt_manager import PromptManager
from api.routes import auth, chat, connection

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def validate_configuration(settings: Settings):
    """Validate configuration; abort startup on errors."""
    logger.info("Validating configuration...")

    validation_result = ConfigValidator(settings).validate_all()

    for warning in validation_result["warnings"]:
        logger.warning(warning)

    if not validation_result["valid"]:
        for error in validation_result["errors"]:
            logger.error(error)
        logger.critical("Application startup aborted due to configuration errors.")
        raise SystemExit(1)

    logger.info("Configuration validated successfully")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.validate_on_startup:
            validate_configuration(settings)

        app.state.database = Database(settings.database)
        app.state.ollama = OllamaClient(settings.ollama)
        app.state.prompts = PromptManager()
        logger.info(
            f"Serving database '{settings.database.database_name}' "
            f"with Ollama model '{settings.ollama.model}' at {settings.ollama.base_url}"
        )
        yield
        await app.state.ollama.aclose()
        await app.state.database.close()

    app = FastAPI(
        title="Student Portal API",
        description="University student portal: login and regulations chatbot",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(connection.router, tags=["database"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(chat.router, prefix="/api/chat", tags=["chat"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Student Portal API", "version": API_VERSION}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
