## Shared FastAPI dependencies
from typing import Iterator

from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_llm() -> LLMClient:
    return get_llm_client()
