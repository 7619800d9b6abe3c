import logging
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy.orm import Session

from app.db.crud.articles import create_article, get_article_by_url
from app.services.college_matcher import get_matcher

logger = logging.getLogger(__name__)

ARTICLE_FIELDS = ("title", "summary", "content", "source_name", "source_url", "published_at")


def _parse_published(value):
    if value is None or isinstance(value, datetime):
        return value
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable published_at '{value}', leaving it empty")
        return None
    # Stored as naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def ingest_articles(db: Session, items: Iterable[dict]) -> dict:
    """
    Imports article dictionaries, tagging each with the colleges it mentions.
    Items without a title or URL, and URLs already stored, are skipped.
    """
    matcher = get_matcher()
    added, skipped = 0, 0

    for item in items:
        title = (item.get("title") or "").strip()
        url = (item.get("source_url") or "").strip()
        if not title or not url:
            skipped += 1
            continue
        if get_article_by_url(db, url) is not None:
            skipped += 1
            continue

        fields = {key: item.get(key) for key in ARTICLE_FIELDS}
        fields.update(title=title, source_url=url, published_at=_parse_published(item.get("published_at")))

        text = " ".join(filter(None, [title, item.get("summary"), item.get("content")]))
        fields["college_names"] = matcher.match_names(text)

        create_article(db, **fields)
        added += 1

    logger.info(f"Article import finished: {added} added, {skipped} skipped")
    return {"added": added, "skipped": skipped}
