import asyncio
import logging
from typing import Optional

import aiosmtplib
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.dependencies import SESSION_KEY, AuthContext, get_auth_context, get_otp_manager, require_auth
from app.core.errors import NotFound, Unexpected, ValidationError
from app.core.limiter import limiter
from app.core.utils import get_client_ip, is_valid_email
from app.db.crud.users import complete_profile, get_or_create_user, get_user_by_email, get_user_by_id, mark_verified
from app.db.session import get_db
from app.schemas.user import CompleteProfileRequest, EmailRequest, VerifyOtpRequest
from app.services.otp_service import OTPManager
from app.services.security_service import create_session, destroy_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

SEND_ERRORS = (aiosmtplib.SMTPException, asyncio.TimeoutError, OSError)

def _clean_email(email: Optional[str]) -> str:
    email = (email or "").strip().lower()
    if not is_valid_email(email):
        raise ValidationError("Please provide a valid email address")
    return email

async def _issue_code(db: Session, otp: OTPManager, email: str, failure_message: str):
    # Rate limit before creating the account so a throttled address leaves no trace
    otp.check_rate_limit(email)

    user = get_or_create_user(db, email)
    try:
        await otp.request_code(email)
    except SEND_ERRORS as e:
        logger.error(f"Failed to send OTP to {email}: {e}")
        raise Unexpected(failure_message, detail=str(e))
    return user

# =====================================================
# REQUEST / RESEND OTP
# =====================================================
@router.post("/request-otp")
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def request_otp(
    request: Request,
    body: EmailRequest,
    db: Session = Depends(get_db),
    otp: OTPManager = Depends(get_otp_manager),
):
    email = _clean_email(body.email)
    user = await _issue_code(db, otp, email, "Failed to send OTP. Please try again.")
    return {
        "success": True,
        "message": f"OTP sent to your email. Valid for {otp.expiry_minutes} minutes.",
        "userId": user.id,
    }

@router.post("/resend-otp")
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def resend_otp(
    request: Request,
    body: EmailRequest,
    db: Session = Depends(get_db),
    otp: OTPManager = Depends(get_otp_manager),
):
    email = _clean_email(body.email)
    user = await _issue_code(db, otp, email, "Failed to resend OTP. Please try again.")
    return {
        "success": True,
        "message": "New OTP sent to your email.",
        "userId": user.id,
    }

# =====================================================
# VERIFY OTP
# =====================================================
@router.post("/verify-otp")
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def verify_otp(
    request: Request,
    body: VerifyOtpRequest,
    db: Session = Depends(get_db),
    otp: OTPManager = Depends(get_otp_manager),
):
    if not body.email or not body.otp:
        raise ValidationError("Email and OTP are required")

    email = body.email.strip().lower()
    otp.verify_code(email, body.otp.strip())

    user = get_user_by_email(db, email)
    if not user:
        raise ValidationError("User not found")

    if not user.is_verified:
        user = mark_verified(db, user.id)
        try:
            await otp.sender.send_welcome(email)
        except SEND_ERRORS:
            logger.exception(f"Welcome email to {email} failed")

    session = create_session(
        db,
        user_id=user.id,
        email=user.email,
        ip_address=get_client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
    request.session.clear()
    request.session[SESSION_KEY] = session.id

    return {
        "success": True,
        "message": "OTP verified successfully. Logging you in...",
        "userId": user.id,
        "profileComplete": bool(user.profile_complete),
        "redirectUrl": "/news",
    }

# =====================================================
# CURRENT USER / LOGOUT
# =====================================================
@router.get("/me")
def me(auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    user = get_user_by_id(db, auth.user_id)
    if not user:
        raise NotFound("User not found")
    return {"success": True, "user": user.to_public_dict()}

@router.get("/logout")
def logout(
    request: Request,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    session_id = auth.session_id if auth else request.session.get(SESSION_KEY)
    destroy_session(db, session_id)
    request.session.clear()
    return {"success": True, "message": "Logged out successfully", "redirectUrl": "/login"}

# =====================================================
# PROFILE COMPLETION
# =====================================================
@router.post("/complete-profile")
def submit_profile(
    body: CompleteProfileRequest,
    auth: AuthContext = Depends(require_auth),
    db: Session = Depends(get_db),
):
    if not body.has_academics():
        raise ValidationError("Academic details are required")

    user = complete_profile(
        db,
        auth.user_id,
        marks_10th=body.marks_10th,
        marks_12th=body.marks_12th,
        marks_grad=body.marks_grad,
        stream=body.stream,
        company=body.company,
        experience_months=body.experience_months,
        colleges=body.colleges,
    )
    if user is None:
        raise NotFound("User not found")

    logger.info(f"Profile completed for user {auth.user_id}")
    return {"success": True, "message": "Profile completed successfully!", "redirectUrl": "/news"}
