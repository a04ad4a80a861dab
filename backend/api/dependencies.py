"""
FastAPI dependencies handing out the clients owned by the app lifespan.
"""
from fastapi import Request

from core.database import Database
from core.ollama_client import OllamaClient
from core.prompt_manager import PromptManager


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_ollama_client(request: Request) -> OllamaClient:
    return request.app.state.ollama


def get_prompt_manager(request: Request) -> PromptManager:
    return request.app.state.prompts
