## Saved roadmap queries
import logging
import uuid
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models.roadmap import Roadmap

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    pass


def save_roadmap(db: Session, *, user_id: uuid.UUID, topic: str, raw_text: str,
detailed: bool) -> Roadmap:
    rm = Roadmap(
        user_id=user_id,
        topic=topic.strip(),
        roadmap=raw_text.strip(),
        is_premium=detailed,
    )
    try:
        db.add(rm)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Saving roadmap for user %s failed", user_id)
        raise PersistenceError(f"Could not save roadmap: {type(e).__name__}") from e

    db.refresh(rm)
    return rm


def list_roadmaps(db: Session, user_id: uuid.UUID) -> List[Roadmap]:
    try:
        return (
            db.query(Roadmap)
            .filter(Roadmap.user_id == user_id)
            .order_by(Roadmap.created_at.desc(), Roadmap.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Loading roadmap history for user %s failed", user_id)
        raise PersistenceError(f"Could not load roadmaps: {type(e).__name__}") from e


def get_roadmap(db: Session, user_id: uuid.UUID, roadmap_id: uuid.UUID) -> Roadmap | None:
    try:
        return (
            db.query(Roadmap)
            .filter(Roadmap.id == roadmap_id, Roadmap.user_id == user_id)
            .first()
        )
    except SQLAlchemyError as e:
        logger.exception("Loading roadmap %s failed", roadmap_id)
        raise PersistenceError(f"Could not load roadmap: {type(e).__name__}") from e
