from app.settings import settings
from app.agents.llm.base import LLMClient
from app.agents.llm.gemini import GeminiClient, GeminiConfig


def get_llm_client() -> LLMClient:
    return GeminiClient(
        GeminiConfig(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
            timeout=settings.generation_timeout_seconds,
        )
    )
