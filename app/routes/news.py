from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.crud.articles import get_articles_by_college, get_recent_articles
from app.db.session import get_db

router = APIRouter(prefix="/api/news", tags=["news"])

@router.get("")
def get_news(
    college: Optional[str] = None,
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    if college:
        articles = get_articles_by_college(db, college, limit=limit)
    else:
        articles = get_recent_articles(db, limit=limit)
    return {"success": True, "count": len(articles), "articles": [a.to_dict() for a in articles]}
