# app/agents/workflow.py
import logging

from app.agents.errors import EmptyResponseError
from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client
from app.agents.prompts import build_roadmap_prompt

logger = logging.getLogger(__name__)


async def request_roadmap(topic: str, detailed: bool, *, llm: LLMClient | None = None) -> str:
    """
    Generate roadmap text for ``topic``.

    One call, no retries. Raises a GenerationError subclass on failure; the
    caller decides what to show and whether to try again.
    """
    llm = llm or get_llm_client()
    prompt = build_roadmap_prompt(topic, detailed)

    logger.info("Requesting %s roadmap for topic=%r", "detailed" if detailed else "concise", topic)
    text = await llm.generate_text(prompt)

    # Guard against clients that hand back whitespace
    if not text or not text.strip():
        raise EmptyResponseError("Received empty roadmap text")

    logger.info("Roadmap for topic=%r received (%d chars)", topic, len(text))
    return text
