from datetime import timedelta
from typing import Callable
import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.utils import utcnow
from app.db.models.security import UserSession, new_session_id
from app.db.store import DocumentStore

logger = logging.getLogger(__name__)

def create_session(
    db: Session,
    user_id: int,
    email: str,
    ip_address: str = None,
    user_agent: str = None,
    now: Callable = utcnow,
) -> UserSession:
    """Creates a server-side session. The expiry is fixed here and never extended."""
    issued = now()
    session = DocumentStore(db).insert_one("sessions", {
        "id": new_session_id(),
        "user_id": user_id,
        "email": email,
        "ip_address": ip_address,
        "user_agent": user_agent,
        "created_at": issued,
        "expires_at": issued + timedelta(hours=settings.SESSION_MAX_AGE_HOURS),
    })
    logger.info(f"SESSION CREATED: User={user_id} IP={ip_address}")
    return session

def get_active_session(db: Session, session_id: str, now: Callable = utcnow) -> UserSession | None:
    if not session_id:
        return None
    return DocumentStore(db).find_one(
        "sessions",
        {"id": session_id, "expires_at": {"$gt": now()}, "user_id": {"$ne": None}},
    )

def destroy_session(db: Session, session_id: str) -> bool:
    if not session_id:
        return False
    deleted = DocumentStore(db).delete_one("sessions", {"id": session_id})
    if deleted:
        logger.info(f"SESSION DESTROYED: {session_id[:8]}...")
    return bool(deleted)

def purge_expired_sessions(db: Session, now: Callable = utcnow) -> int:
    return DocumentStore(db).delete_many("sessions", {"expires_at": {"$lt": now()}})
