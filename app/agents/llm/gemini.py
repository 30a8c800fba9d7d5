import logging

import httpx
from pydantic import BaseModel

from app.agents.errors import ConfigurationError, EmptyResponseError, TransportError
from app.agents.llm.base import LLMClient

logger = logging.getLogger(__name__)


class GeminiConfig(BaseModel):
    api_key: str | None = None
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.0-flash"
    timeout: float = 30.0


def _extract_text(data) -> str | None:
    # candidates[0].content.parts[0].text, any level may be missing
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None


class GeminiClient(LLMClient):
    def __init__(self, config: GeminiConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        if not config.api_key:
            raise ConfigurationError("Gemini API key is not configured (GEMINI_API_KEY)")
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.model = config.model
        self._transport = transport

    async def generate_text(self, prompt: str) -> str:
        # POST {base_url}/models/{model}:generateContent?key=...
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"Content-Type": "application/json"}

        logger.info("Calling Gemini model=%s prompt_chars=%d", self.model, len(prompt))

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
                r = await client.post(url, params={"key": self.config.api_key}, json=payload, headers=headers)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text
            logger.error("Gemini returned HTTP %s: %s", e.response.status_code, body[:500])
            raise TransportError(
                f"Gemini returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                detail=body,
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Gemini request timed out after %ss", self.config.timeout)
            raise TransportError(f"Gemini request timed out after {self.config.timeout}s", detail=str(e)) from e
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s: %s", type(e).__name__, e)
            raise TransportError(f"Gemini request failed: {type(e).__name__}", detail=str(e)) from e

        try:
            data = r.json()
        except ValueError as e:
            raise EmptyResponseError("Gemini response was not JSON", status_code=r.status_code) from e

        text = _extract_text(data)
        if not isinstance(text, str) or not text.strip():
            logger.error("Empty response structure from Gemini: %s", str(data)[:500])
            raise EmptyResponseError("Received empty content from Gemini API", status_code=r.status_code)

        return text
