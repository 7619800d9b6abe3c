import re
from datetime import datetime, timezone
from fastapi import Request

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def get_client_ip(request: Request) -> str:
    """
    Extracts the client's real IP address, trusting X-Forwarded-For if present.
    Essential for applications running behind proxies (Railway, Heroku, Nginx).
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # The first IP in the list is the client's original IP
        return forwarded.split(",")[0].strip()

    return request.client.host if request.client else "0.0.0.0"


def utcnow() -> datetime:
    # Naive UTC, the way every timestamp column is stored
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_email(email) -> bool:
    return isinstance(email, str) and len(email) <= 254 and bool(EMAIL_REGEX.match(email))
