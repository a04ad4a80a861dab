"""
Prompt template loading with a built-in fallback.
"""
import logging
from pathlib import Path
from typing import Dict, Optional

from core.config import PROMPTS_DIR

logger = logging.getLogger(__name__)

CHAT_RAG_TEMPLATE = """
**Instrucción:** Eres un asistente estudiantil amigable. Responde la pregunta del usuario basándote *únicamente* en el siguiente contexto.
**Contexto (Reglamento):**
{context}
**Pregunta del Usuario:**
{question}
**Respuesta:**
"""


class PromptManager:
    """Manages prompt file loading with consistent fallback behavior."""

    def __init__(self, prompts_dir: Optional[Path] = None):
        self.prompts_dir = prompts_dir or PROMPTS_DIR
        self.loaded_prompts: Dict[str, str] = {}

        self.fallback_templates = {
            "chat_rag": CHAT_RAG_TEMPLATE,
        }

    def get_prompt(self, prompt_name: str) -> str:
        """
        Load prompt by name with fallback.

        Args:
            prompt_name: Name of prompt file (without .txt extension)

        Returns:
            Prompt template string
        """
        if prompt_name in self.loaded_prompts:
            return self.loaded_prompts[prompt_name]

        prompt_file = self.prompts_dir / f"{prompt_name}.txt"

        if prompt_file.exists():
            try:
                template = prompt_file.read_text(encoding="utf-8")
                if not template.strip():
                    raise ValueError(f"Prompt file is empty: {prompt_file}")

                self.loaded_prompts[prompt_name] = template
                return template

            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load prompt file {prompt_file}: {e}")

        if prompt_name in self.fallback_templates:
            logger.debug(f"Using built-in template for: {prompt_name}")
            template = self.fallback_templates[prompt_name]
            self.loaded_prompts[prompt_name] = template
            return template

        raise KeyError(f"Unknown prompt: {prompt_name}")

    def format_chat_prompt(self, context: str, question: str) -> str:
        """Fill the RAG template: instruction, then context, then question."""
        template = self.get_prompt("chat_rag")
        return template.format(context=context, question=question)
