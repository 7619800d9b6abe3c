from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.errors import AuthRequired
from app.db.session import get_db
from app.db.store import DocumentStore
from app.services.notifications import get_email_sender
from app.services.otp_service import OTPManager
from app.services.security_service import get_active_session

SESSION_KEY = "sid"


@dataclass(frozen=True)
class AuthContext:
    user_id: int
    email: str
    session_id: str


def get_auth_context(request: Request, db: Session = Depends(get_db)) -> Optional[AuthContext]:
    """
    Resolves the signed session cookie against the sessions collection.
    Returns None for anonymous requests; an expired or destroyed session
    counts as anonymous.
    """
    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        return None

    record = get_active_session(db, session_id)
    if record is None:
        request.session.pop(SESSION_KEY, None)
        return None

    request.state.user_id = record.user_id
    return AuthContext(user_id=record.user_id, email=record.email, session_id=record.id)


def require_auth(auth: Optional[AuthContext] = Depends(get_auth_context)) -> AuthContext:
    if auth is None:
        raise AuthRequired()
    return auth


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)


def get_otp_manager(
    store: DocumentStore = Depends(get_store),
    sender=Depends(get_email_sender),
) -> OTPManager:
    return OTPManager(store, sender)
