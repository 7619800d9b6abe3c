"""
One-time password lifecycle: issue, rate limit, verify once, sweep.

Codes are kept per email address rather than per user so a code can be
requested before the account has been verified.
"""
import logging
import secrets
from datetime import timedelta
from typing import Callable, Optional

from app.core.config import settings
from app.core.errors import InvalidOrExpired, RateLimited
from app.core.utils import utcnow
from app.db.models.otp import OTP
from app.db.store import DocumentStore

logger = logging.getLogger(__name__)


def generate_otp_code() -> str:
    # Uniform over 100000..999999
    return str(secrets.randbelow(900000) + 100000)


class OTPManager:
    def __init__(
        self,
        store: DocumentStore,
        sender,
        now: Callable = utcnow,
        expiry_minutes: Optional[int] = None,
        max_requests: Optional[int] = None,
        window_minutes: Optional[int] = None,
        single_active_code: Optional[bool] = None,
    ):
        self.store = store
        self.sender = sender
        self.now = now
        if expiry_minutes is None:
            expiry_minutes = settings.OTP_EXPIRY_MINUTES
        if max_requests is None:
            max_requests = settings.OTP_MAX_REQUESTS
        if window_minutes is None:
            window_minutes = settings.OTP_WINDOW_MINUTES
        self.expiry_minutes = expiry_minutes
        self.max_requests = max_requests
        self.window_minutes = window_minutes
        if single_active_code is None:
            single_active_code = settings.OTP_SINGLE_ACTIVE_CODE
        self.single_active_code = single_active_code

    def is_rate_limited(self, email: str) -> bool:
        window_start = self.now() - timedelta(minutes=self.window_minutes)
        recent = self.store.count("otps", {"email": email, "created_at": {"$gte": window_start}})
        return recent >= self.max_requests

    def check_rate_limit(self, email: str):
        if self.is_rate_limited(email):
            logger.warning(f"OTP rate limit hit for {email}")
            raise RateLimited(
                f"Too many OTP requests. Please try again after {self.window_minutes} minutes."
            )

    async def request_code(self, email: str) -> OTP:
        """
        Issues a new code for `email` and hands it to the sender.
        Raises RateLimited when the window already holds max_requests codes.
        """
        self.check_rate_limit(email)

        now = self.now()
        if self.single_active_code:
            self.store.update_many("otps", {"email": email, "is_used": False}, {"is_used": True})

        record = self.store.insert_one("otps", {
            "email": email,
            "otp_code": generate_otp_code(),
            "expires_at": now + timedelta(minutes=self.expiry_minutes),
            "is_used": False,
            "created_at": now,
        })
        logger.info(f"OTP issued for {email}, expires at {record.expires_at}")

        await self.sender.send_otp(email, record.otp_code, self.expiry_minutes)
        return record

    def verify_code(self, email: str, code: str) -> OTP:
        now = self.now()
        record = self.store.find_one(
            "otps",
            {"email": email, "otp_code": str(code), "is_used": False, "expires_at": {"$gt": now}},
            sort=[("created_at", -1)],
        )
        if record is None:
            raise InvalidOrExpired()

        # Conditional on is_used so two concurrent verifications cannot both win
        used = self.store.update_one("otps", {"id": record.id, "is_used": False}, {"is_used": True})
        if used is None:
            raise InvalidOrExpired()

        logger.info(f"OTP verified for {email}")
        return used

    def latest_code(self, email: str) -> OTP | None:
        return self.store.find_one("otps", {"email": email}, sort=[("created_at", -1), ("id", -1)])

    def sweep_expired(self) -> int:
        deleted = self.store.delete_many("otps", {"expires_at": {"$lt": self.now()}, "is_used": False})
        if deleted:
            logger.info(f"Swept {deleted} expired OTPs")
        return deleted
