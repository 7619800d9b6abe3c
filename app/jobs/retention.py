from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from app.core.utils import utcnow
from app.db.store import DocumentStore
from app.services.otp_service import OTPManager
from app.services.security_service import purge_expired_sessions

logger = logging.getLogger(__name__)

def sweep_expired_otps(db: Session, now=utcnow) -> int:
    """Deletes unused OTPs past their expiry. Returns the number deleted."""
    try:
        return OTPManager(DocumentStore(db), sender=None, now=now).sweep_expired()
    except SQLAlchemyError as e:
        logger.error(f"OTP sweep failed: {e}")
        return 0

def sweep_expired_sessions(db: Session, now=utcnow) -> int:
    try:
        deleted_count = purge_expired_sessions(db, now=now)
        if deleted_count:
            logger.info(f"Session cleanup: {deleted_count} expired sessions purged.")
        return deleted_count
    except SQLAlchemyError as e:
        logger.error(f"Session cleanup failed: {e}")
        return 0

def run_retention(db: Session, now=utcnow) -> dict:
    return {
        "otps": sweep_expired_otps(db, now=now),
        "sessions": sweep_expired_sessions(db, now=now),
    }
