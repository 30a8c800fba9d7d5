## Session management utilities

import hashlib
import secrets
from datetime import datetime, timedelta, timezone

from app.settings import settings

SESSION_COOKIE_NAME = "rm_session"

def new_raw_token() -> str:
    return secrets.token_urlsafe(32)

def hash_token(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()

def absolute_expiry(now: datetime | None = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(days=settings.session_absolute_days)

def as_utc(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
