from typing import Optional

from sqlalchemy.orm import Session

from app.core.utils import utcnow
from app.db.models.user import User
from app.db.store import DocumentStore


def get_user_by_email(db: Session, email: str) -> User | None:
    return DocumentStore(db).find_one("users", {"email": email})


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return DocumentStore(db).find_one("users", {"id": user_id})


def create_user(db: Session, email: str, phone: Optional[str] = None) -> User:
    return DocumentStore(db).insert_one("users", {
        "email": email,
        "phone": phone,
        "is_verified": False,
        "profile_complete": False,
        "target_colleges": [],
    })


def get_or_create_user(db: Session, email: str) -> User:
    user = get_user_by_email(db, email)
    if user is None:
        user = create_user(db, email)
    return user


def mark_verified(db: Session, user_id: int) -> User | None:
    return DocumentStore(db).update_one(
        "users", {"id": user_id}, {"is_verified": True, "updated_at": utcnow()}
    )


def complete_profile(
    db: Session,
    user_id: int,
    marks_10th: float,
    marks_12th: float,
    marks_grad: float,
    stream: str,
    company: Optional[str] = None,
    experience_months: Optional[int] = None,
    colleges: Optional[list] = None,
) -> User | None:
    """
    Writes academics, work experience and target colleges together with
    profile_complete=True in one UPDATE, so a partially completed profile
    is never visible.
    """
    update = {
        "acad_10th": marks_10th,
        "acad_12th": marks_12th,
        "acad_grad": marks_grad,
        "acad_stream": stream,
        "profile_complete": True,
        "updated_at": utcnow(),
    }
    if company and experience_months is not None:
        update["current_company"] = company
        update["work_ex_months"] = experience_months
    if colleges:
        update["target_colleges"] = list(colleges)

    return DocumentStore(db).update_one("users", {"id": user_id}, update)
