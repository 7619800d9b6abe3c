import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.utils import utcnow
from app.data.colleges import OFFICIAL_DATA, seed_documents
from app.db.models.college import College
from app.db.store import DocumentStore

logger = logging.getLogger(__name__)

NESTED_RECORDS = ("placement", "admission", "fees")


def list_colleges(db: Session, tier: Optional[int] = None) -> list[College]:
    query = {"tier": tier} if tier is not None else None
    return DocumentStore(db).find_many("colleges", query, sort=[("tier", 1), ("name", 1)])


def get_college_by_name(db: Session, name: str) -> College | None:
    """Case-insensitive exact match first, then a substring match."""
    store = DocumentStore(db)
    college = store.find_one("colleges", {"name": {"$ieq": name}})
    if college is None:
        college = store.find_one("colleges", {"name": {"$icontains": name}}, sort=[("name", 1)])
    return college


def seed_colleges(db: Session) -> int:
    """Inserts the seed dataset when the collection is empty. Returns rows inserted."""
    store = DocumentStore(db)
    if store.count("colleges"):
        return 0

    documents = seed_documents()
    stamp = utcnow().isoformat()
    for document in documents:
        for key in NESTED_RECORDS:
            document[key] = {**document[key], "updated_at": stamp}

    store.insert_many("colleges", documents)
    logger.info(f"Seeded {len(documents)} colleges")
    return len(documents)


def _update_nested(db: Session, name: str, key: str, data: dict) -> College | None:
    store = DocumentStore(db)
    college = get_college_by_name(db, name)
    if college is None:
        logger.warning(f"College not found: {name}")
        return None

    merged = {**(getattr(college, key) or {}), **data, "updated_at": utcnow().isoformat()}
    if key == "fees":
        merged.setdefault("duration_months", 24)
        merged.setdefault("currency", "INR")

    return store.update_one("colleges", {"id": college.id}, {key: merged, "updated_at": utcnow()})


def update_placement(db: Session, name: str, data: dict) -> College | None:
    return _update_nested(db, name, "placement", data)


def update_admission(db: Session, name: str, data: dict) -> College | None:
    return _update_nested(db, name, "admission", data)


def update_fees(db: Session, name: str, data: dict) -> College | None:
    return _update_nested(db, name, "fees", data)


def update_program_data(db: Session, name: str, data: dict) -> College | None:
    allowed = {"programs", "alumni_count", "rating", "nirf_rank"}
    update = {key: value for key, value in data.items() if key in allowed}
    college = get_college_by_name(db, name)
    if college is None or not update:
        return None
    update["updated_at"] = utcnow()
    return DocumentStore(db).update_one("colleges", {"id": college.id}, update)


def apply_official_data(db: Session, data: Optional[dict] = None) -> dict:
    """Refreshes placement, admission and fees records. Returns updated/missing counts."""
    updated, missing = 0, 0
    for name, records in (data or OFFICIAL_DATA).items():
        if get_college_by_name(db, name) is None:
            logger.warning(f"College not found: {name}")
            missing += 1
            continue

        if "placement" in records:
            update_placement(db, name, records["placement"])
        if "admission" in records:
            update_admission(db, name, records["admission"])
        if "fees" in records:
            update_fees(db, name, records["fees"])
        if "program" in records:
            update_program_data(db, name, records["program"])

        logger.info(f"Updated official data for {name}")
        updated += 1

    return {"updated": updated, "missing": missing}
