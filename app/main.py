## Main application entry point
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.settings import settings
from app.db.session import init_db
from app.agents.errors import ConfigurationError
from app.auth.deps import NotAuthenticated
from app.auth.routes import router as auth_router
from app.routes import router as app_router
from app.roadmaps.repository import PersistenceError
from app.roadmaps.routes import router as roadmaps_router
from app.generation.routes import router as generation_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    init_db()
    logger.info("Roadmap app started (env=%s)", settings.env)
    yield


app = FastAPI(lifespan=lifespan)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    # Preserve where the user was going
    next_url = request.url.path
    return RedirectResponse(url=f"/login?next={next_url}", status_code=303)

@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Generation is not configured: %s", exc)
    return RedirectResponse(url="/home?error=not_configured", status_code=303)

@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse({"error": "storage_unavailable"}, status_code=503)

app.include_router(auth_router)
app.include_router(app_router)
app.include_router(roadmaps_router)
app.include_router(generation_router)
