## Current user dependencies
from datetime import datetime, timezone, timedelta
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.deps import get_db
from app.db.models.session_token import SessionToken
from app.db.models.user import User
from app.auth.sessions import SESSION_COOKIE_NAME, as_utc, hash_token
from app.settings import settings

class NotAuthenticated(Exception):
    pass

def _resolve_user(raw: str | None, db: Session) -> User | None:
    if not raw:
        return None

    tok = (
        db.query(SessionToken)
        .filter(SessionToken.token_hash == hash_token(raw),
        SessionToken.revoked_at.is_(None))
        .first()
    )
    if not tok:
        return None

    now = datetime.now(timezone.utc)
    # Absolute expiry
    if as_utc(tok.expires_at) <= now:
        return None

    # Idle timeout (server-side)
    idle_deadline = as_utc(tok.last_seen_at) + timedelta(minutes=settings.session_idle_minutes)
    if idle_deadline <= now:
        # Revoke server-side so the token can't be reused
        tok.revoked_at = now
        db.commit()
        return None

    # Update activity
    tok.last_seen_at = now
    db.commit()

    user = db.query(User).filter(User.id == tok.user_id).first()
    if not user or not user.is_active:
        return None
    return user

def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    user = _resolve_user(request.cookies.get(SESSION_COOKIE_NAME), db)
    if user is None:
        raise NotAuthenticated()
    return user

def get_optional_user(request: Request, db: Session = Depends(get_db)) -> User | None:
    return _resolve_user(request.cookies.get(SESSION_COOKIE_NAME), db)
