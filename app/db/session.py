## Engine + session factory
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.settings import settings
from app.db.base import Base

# SQLite connections are shared with the threadpool that runs sync routes
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db() -> None:
    # Import models so they register on Base.metadata
    from app.db.models import roadmap, session_token, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
