from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.db.crud.colleges import get_college_by_name, list_colleges
from app.db.session import get_db

router = APIRouter(prefix="/api/colleges", tags=["colleges"])

@router.get("")
def get_colleges(tier: Optional[int] = Query(default=None, ge=1, le=3), db: Session = Depends(get_db)):
    colleges = list_colleges(db, tier=tier)
    return {"success": True, "count": len(colleges), "colleges": [c.to_dict() for c in colleges]}

@router.get("/{name}")
def get_college(name: str, db: Session = Depends(get_db)):
    college = get_college_by_name(db, name)
    if college is None:
        raise NotFound(f"College '{name}' not found")
    return {"success": True, "college": college.to_dict()}
