## Routes for the application
import asyncio
import json

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, RedirectResponse, StreamingResponse

from app.db.models.user import User
from app.auth.deps import get_current_user, get_optional_user
from app.auth.events import SessionEvent, session_bus
from app.templating import templates

router = APIRouter()

KEEPALIVE_SECONDS = 15

@router.get("/", response_class=HTMLResponse)
def landing(request: Request, user: User | None = Depends(get_optional_user)):
    if user is not None:
        return RedirectResponse(url="/home", status_code=303)
    return templates.TemplateResponse(request, "landing.html", {})

@router.get("/session/events")
async def session_events(request: Request, user: User = Depends(get_current_user)):
    """Server-sent events for this user's sign-in/sign-out changes."""
    user_id = user.id
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[SessionEvent] = asyncio.Queue()

    def on_event(event: SessionEvent) -> None:
        if event.user_id == user_id:
            # publish() runs on the threadpool for sync routes
            loop.call_soon_threadsafe(queue.put_nowait, event)

    async def stream():
        # Released on disconnect, error or generator close
        with session_bus.subscribe(on_event):
            while not await request.is_disconnected():
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=KEEPALIVE_SECONDS)
                except asyncio.TimeoutError:
                    yield ": keepalive\n\n"
                    continue
                data = json.dumps({"user_id": str(event.user_id)})
                yield f"event: {event.kind}\ndata: {data}\n\n"
                if event.kind == "SIGNED_OUT":
                    break

    return StreamingResponse(stream(), media_type="text/event-stream")
