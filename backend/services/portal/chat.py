"""
Retrieval-augmented chat over the academic regulations document.
"""
import logging

from core.database import Database
from core.ollama_client import OllamaClient, OllamaError
from core.prompt_manager import PromptManager
from models.student_models import GeneralDocument
from services.portal.results import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

REGULATIONS_TYPE = "reglamento"

DEFAULT_REGULATIONS_CONTENT = (
    "Capítulo 4: Procesos Académicos. Artículo 45: Retiro de Curso. "
    "El proceso para el retiro es: "
    "1. Llenar el formulario F-02, disponible en la sección de trámites. "
    "2. Pagar la tasa de 50 soles en tesorería. "
    "3. El plazo máximo es hasta la semana 8 del ciclo académico."
)

MODEL_CALL_FAILED_MESSAGE = "Error llamando a la API de Ollama."


async def get_regulations_document(database: Database) -> GeneralDocument:
    """
    Return the stored regulations, inserting the default text if none exist.

    Two concurrent first requests can both insert; nothing deduplicates them.
    """
    stored = await database.find_general_document(REGULATIONS_TYPE)
    if stored is not None:
        return GeneralDocument.model_validate(stored)

    document = GeneralDocument(doc_type=REGULATIONS_TYPE, content=DEFAULT_REGULATIONS_CONTENT)
    inserted_id = await database.insert_general_document(document.to_document())
    logger.info(f"Inserted default '{REGULATIONS_TYPE}' document {inserted_id}")
    return document.model_copy(update={"id": str(inserted_id)})


async def answer_question(
    database: Database,
    ollama: OllamaClient,
    prompts: PromptManager,
    question: str,
) -> Result:
    """Fetch context, build the prompt, ask the model, relay its answer."""
    try:
        document = await get_regulations_document(database)
        prompt = prompts.format_chat_prompt(document.content, question)
        answer = await ollama.generate(prompt)
    except OllamaError:
        logger.exception("Ollama rejected the chat request")
        return Err(ErrorKind.MODEL_CALL_FAILED, MODEL_CALL_FAILED_MESSAGE)
    except Exception as e:
        logger.exception("Chat request failed")
        return Err(
            ErrorKind.CHAT_FAILED,
            f"Error procesando el chat: {e}. Asegúrate de que Ollama esté corriendo.",
        )

    return Ok(answer)
