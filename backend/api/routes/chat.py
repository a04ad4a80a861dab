"""
Chatbot API routes.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_database, get_ollama_client, get_prompt_manager
from api.errors import PROBLEM_RESPONSES, problem_response
from api.models.requests import ChatRequest
from api.models.responses import ChatResponse
from core.database import Database
from core.ollama_client import OllamaClient
from core.prompt_manager import PromptManager
from services.portal.chat import answer_question
from services.portal.results import Err

router = APIRouter()


@router.post("", response_model=ChatResponse, responses={500: PROBLEM_RESPONSES[500]})
async def chat(
    request: ChatRequest,
    database: Database = Depends(get_database),
    ollama: OllamaClient = Depends(get_ollama_client),
    prompts: PromptManager = Depends(get_prompt_manager),
):
    """
    Answer a question using the stored academic regulations as context.
    """
    result = await answer_question(database, ollama, prompts, request.question)
    if isinstance(result, Err):
        return problem_response(result)
    return ChatResponse(answer=result.value)
