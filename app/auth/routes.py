# Authentication routes (register/login/logout)
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse, HTMLResponse
from sqlalchemy.orm import Session

from app.deps import get_db
from app.db.models.user import User
from app.db.models.session_token import SessionToken
from app.auth.events import SessionEvent, session_bus
from app.auth.hashing import hash_password, verify_password
from app.auth.sessions import SESSION_COOKIE_NAME, new_raw_token, hash_token, absolute_expiry
from app.templating import templates

from app.settings import settings

logger = logging.getLogger(__name__)
router = APIRouter()

def _safe_next(next_url: str | None) -> str:
    # Only same-site paths; anything else goes home
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return "/home"

@router.get("/register", response_class=HTMLResponse)
def register_page(request: Request):
    return templates.TemplateResponse(request, "register.html", {"error": request.query_params.get("error")})

@router.post("/register")
def register(email: str = Form(...), password: str = Form(...), db: Session = Depends(get_db)):
    email_norm = email.strip().lower()
    if not email_norm or not password:
        return RedirectResponse(url="/register?error=missing", status_code=303)

    exists = db.query(User).filter(User.email == email_norm).first()
    if exists:
        return RedirectResponse(url="/register?error=exists", status_code=303)

    user = User(email=email_norm, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    logger.info("Registered user %s", user.id)
    return RedirectResponse(url="/login?registered=1", status_code=303)

@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "error": request.query_params.get("error"),
            "registered": request.query_params.get("registered"),
            "logged_out": request.query_params.get("logged_out"),
            "next": request.query_params.get("next", ""),
        },
    )

@router.post("/login")
def login(email: str = Form(...), password: str = Form(...), next: str = Form(""),
db: Session = Depends(get_db)):
    email_norm = email.strip().lower()
    user = db.query(User).filter(User.email == email_norm).first()
    if not user or not user.is_active or not verify_password(password, user.password_hash):
        return RedirectResponse(url="/login?error=bad_credentials",
        status_code=303)

    raw = new_raw_token()
    tok = SessionToken(
        user_id=user.id,
        token_hash=hash_token(raw),
        expires_at=absolute_expiry(),
        last_seen_at=datetime.now(timezone.utc),
    )
    db.add(tok)
    db.commit()
    session_bus.publish(SessionEvent("SIGNED_IN", user.id))

    resp = RedirectResponse(url=_safe_next(next), status_code=303)
    # Cookie security flags: httpOnly always; secure=True in prod over HTTPS
    resp.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=raw,
        httponly=True,
        secure=(settings.env == "prod"),
        samesite="lax",
        max_age=60 * 60 * 24 * settings.session_absolute_days,
        path="/",
    )
    return resp

@router.post("/logout")
def logout(request: Request, db: Session = Depends(get_db)):
    raw = request.cookies.get(SESSION_COOKIE_NAME)
    if raw:
        h = hash_token(raw)
        tok = db.query(SessionToken).filter(SessionToken.token_hash == h,
        SessionToken.revoked_at.is_(None)).first()
        if tok:
            tok.revoked_at = datetime.now(timezone.utc)
            db.commit()
            session_bus.publish(SessionEvent("SIGNED_OUT", tok.user_id))

    resp = RedirectResponse(url="/login?logged_out=1", status_code=303)
    resp.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return resp
