"""
Ollama API client wrapper.
"""
import logging
from typing import Optional

import httpx

from core.config import OllamaSettings
from core.logging_config import log_latency

logger = logging.getLogger(__name__)


class OllamaError(Exception):
    """Raised when Ollama answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class OllamaClient:
    """Client for Ollama's generate endpoint."""

    def __init__(self, settings: OllamaSettings, client: Optional[httpx.AsyncClient] = None):
        self.base_url = settings.base_url
        self.model = settings.model
        self.client = client if client is not None else httpx.AsyncClient(timeout=settings.timeout)

    @log_latency("ollama.generate")
    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Send a single non-streamed prompt and return the answer text.

        Raises:
            OllamaError: Ollama replied with a non-2xx status
            httpx.HTTPError: transport failure (connection refused, timeout)
            ValueError: the body is not JSON or 'response' is not text
        """
        url = f"{self.base_url}/api/generate"
        payload = {
            "model": model or self.model,
            "prompt": prompt,
            "stream": False,
        }

        response = await self.client.post(url, json=payload)
        if not response.is_success:
            logger.warning(f"Ollama returned HTTP {response.status_code} for model {payload['model']}")
            raise OllamaError(
                f"Ollama API error: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        result = response.json()
        if not isinstance(result, dict):
            raise ValueError(f"Unexpected Ollama reply: expected a JSON object, got {type(result).__name__}")

        answer = result.get("response")
        if answer is None:
            return ""
        if not isinstance(answer, str):
            raise ValueError(f"Unexpected Ollama reply: 'response' is {type(answer).__name__}, not text")
        return answer

    async def aclose(self):
        await self.client.aclose()
