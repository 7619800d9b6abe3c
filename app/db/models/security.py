import secrets
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from app.core.utils import utcnow
from app.db.base_class import Base


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class UserSession(Base):
    __tablename__ = "sessions"

    id = Column(String, primary_key=True, default=new_session_id)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    email = Column(String, nullable=False)
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    expires_at = Column(DateTime, nullable=False, index=True) # fixed at issuance, never extended
