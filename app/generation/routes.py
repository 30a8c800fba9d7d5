# app/generation/routes.py
import logging

from fastapi import APIRouter, Depends, Form
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.deps import get_db, get_llm
from app.auth.deps import get_current_user
from app.db.models.user import User
from app.agents.errors import GenerationError
from app.agents.llm.base import LLMClient
from app.agents.workflow import request_roadmap
from app.roadmaps.repository import PersistenceError, save_roadmap
from app.roadmaps.routes import home_url, to_uuid

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/roadmaps/generate")
async def generate_roadmap(
    topic: str = Form(""),
    detailed: str | None = Form(None),  # checkbox sends "1" when ticked
    current: str = Form(""),  # roadmap on screen when the form was submitted
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    llm: LLMClient = Depends(get_llm),
):
    # Failures send the user back to whatever they were looking at
    previous = to_uuid(current)

    if not topic.strip():
        return RedirectResponse(url=home_url(previous, error="topic_required"), status_code=303)

    try:
        raw_text = await request_roadmap(topic, bool(detailed), llm=llm)
    except GenerationError as e:
        logger.error(
            "Roadmap generation failed for user=%s topic=%r: %s: %s (status=%s)",
            user.id, topic, type(e).__name__, e, e.status_code,
        )
        return RedirectResponse(url=home_url(previous, error="generation_failed"), status_code=303)

    # Only a complete, non-empty response gets this far
    try:
        rm = await run_in_threadpool(
            save_roadmap, db, user_id=user.id, topic=topic, raw_text=raw_text, detailed=bool(detailed)
        )
    except PersistenceError:
        return RedirectResponse(url=home_url(previous, error="save_failed"), status_code=303)

    return RedirectResponse(url=home_url(rm.id), status_code=303)
