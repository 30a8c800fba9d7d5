"""Shared fixtures: in-memory database, fake LLM, signed-in test client."""

import os

# Must be set before app.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.agents.llm.base import LLMClient
from app.db.base import Base
from app.db.models import roadmap, session_token, user  # noqa: F401
from app.deps import get_db, get_llm
from app.main import app

SAMPLE_ROADMAP = """\
# Data Engineer Roadmap

## Stage 1: Foundation Building

Week 1: SQL basics
Week 2: Python for data

- [SQL Tutorial](https://www.youtube.com/watch?v=HXV3zeQKqGY&t=5) - full course
- [Mode SQL](https://mode.com/sql-tutorial) - interactive lessons
- Practice joins every day

## Final Stage: Portfolio Development

1. Build an ETL pipeline
"""


class FakeLLM(LLMClient):
    def __init__(self, text: str = SAMPLE_ROADMAP, error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


# =============================================================================
# Web client
# =============================================================================


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def client(session_factory, fake_llm):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm] = lambda: fake_llm
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client: TestClient, email: str = "ada@example.com", password: str = "s3cret-pass") -> None:
    client.post("/register", data={"email": email, "password": password}, follow_redirects=False)
    resp = client.post("/login", data={"email": email, "password": password}, follow_redirects=False)
    assert resp.status_code == 303


@pytest.fixture
def signed_in(client) -> TestClient:
    register_and_login(client)
    return client
