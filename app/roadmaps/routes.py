# Roadmap pages + JSON API
import logging
import uuid
from typing import List
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import Session

from app.deps import get_db
from app.auth.deps import get_current_user
from app.db.models.user import User
from app.roadmaps.parser import parse_roadmap
from app.roadmaps.repository import PersistenceError, get_roadmap, list_roadmaps
from app.roadmaps.schemas import RoadmapDocument, RoadmapSummary
from app.roadmaps.view import ExpansionState, parse_collapsed
from app.templating import templates

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_MESSAGES = {
    "topic_required": "Please enter a topic before generating.",
    "generation_failed": "Failed to generate roadmap. Please try again.",
    "save_failed": "Roadmap generated but could not be saved. Please try again.",
    "not_configured": "Roadmap generation is not configured.",
    "not_found": "That roadmap could not be found.",
    "history_failed": "Saved roadmaps could not be loaded.",
}


def to_uuid(v: str | uuid.UUID | None) -> uuid.UUID | None:
    if v is None or v == "":
        return None
    if isinstance(v, uuid.UUID):
        return v
    try:
        return uuid.UUID(str(v))
    except ValueError:
        return None


def home_url(roadmap_id: uuid.UUID | None = None, *, collapsed: str = "", error: str | None = None) -> str:
    params = {}
    if roadmap_id is not None:
        params["roadmap"] = str(roadmap_id)
    if collapsed:
        params["collapsed"] = collapsed
    if error:
        params["error"] = error
    return "/home" + (f"?{urlencode(params)}" if params else "")


@router.get("/home", response_class=HTMLResponse)
def home(
    request: Request,
    roadmap: str | None = None,
    collapsed: str | None = None,
    error: str | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    try:
        history = list_roadmaps(db, user.id)
    except PersistenceError:
        history = []
        error = error or "history_failed"

    selected = None
    roadmap_id = to_uuid(roadmap)
    if roadmap:
        try:
            selected = get_roadmap(db, user.id, roadmap_id) if roadmap_id else None
        except PersistenceError:
            selected = None
        if selected is None:
            error = error or "not_found"

    sections = parse_roadmap(selected.roadmap) if selected else []
    state = ExpansionState.from_collapsed(len(sections), parse_collapsed(collapsed))

    section_views = [
        {
            "index": i,
            "section": section,
            "expanded": state.is_expanded(i),
            "toggle_url": home_url(selected.id, collapsed=state.toggle(i).to_query()),
        }
        for i, section in enumerate(sections)
    ]

    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "user": user,
            "history": history,
            "selected": selected,
            "sections": section_views,
            "all_expanded": state.all_expanded,
            "toggle_all_url": home_url(selected.id, collapsed=state.toggle_all().to_query()) if selected else None,
            "error_message": ERROR_MESSAGES.get(error) if error else None,
        },
    )


@router.get("/api/roadmaps", response_model=List[RoadmapSummary])
def api_list_roadmaps(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return list_roadmaps(db, user.id)


@router.get("/api/roadmaps/{roadmap_id}", response_model=RoadmapDocument)
def api_get_roadmap(roadmap_id: uuid.UUID, db: Session = Depends(get_db),
user: User = Depends(get_current_user)):
    rm = get_roadmap(db, user.id, roadmap_id)
    if not rm:
        return JSONResponse({"error": "not_found"}, status_code=404)

    return RoadmapDocument(
        id=rm.id,
        topic=rm.topic,
        is_premium=rm.is_premium,
        created_at=rm.created_at,
        roadmap=rm.roadmap,
        sections=parse_roadmap(rm.roadmap),
    )
