from typing import Optional

from sqlalchemy.orm import Session

from app.db.models.article import NewsArticle
from app.db.store import DocumentStore

RECENT_SORT = [("created_at", -1), ("id", -1)]


def create_article(db: Session, **fields) -> NewsArticle:
    return DocumentStore(db).insert_one("articles", fields)


def get_article_by_url(db: Session, url: str) -> NewsArticle | None:
    return DocumentStore(db).find_one("articles", {"source_url": url})


def get_recent_articles(db: Session, limit: int = 20, skip: int = 0) -> list[NewsArticle]:
    return DocumentStore(db).find_many("articles", sort=RECENT_SORT, limit=limit, skip=skip)


def get_articles_by_college(db: Session, college_name: str, limit: int = 20) -> list[NewsArticle]:
    # college_names is a JSON list, filtered here to stay portable across SQLite and PostgreSQL
    wanted = college_name.lower()
    matches = []
    for article in DocumentStore(db).find_many("articles", sort=RECENT_SORT):
        if any(name.lower() == wanted for name in article.college_names or []):
            matches.append(article)
            if len(matches) >= limit:
                break
    return matches


def get_all_articles(db: Session) -> list[NewsArticle]:
    """Newest first, the order de-duplication walks them in."""
    return DocumentStore(db).find_many("articles", sort=[("created_at", -1), ("id", -1)])


def count_articles(db: Session, query: Optional[dict] = None) -> int:
    return DocumentStore(db).count("articles", query)


def delete_articles(db: Session, ids: list[int]) -> int:
    if not ids:
        return 0
    return DocumentStore(db).delete_many("articles", {"id": {"$in": ids}})


def clear_articles(db: Session) -> int:
    return DocumentStore(db).delete_many("articles")
