import logging

from sqlalchemy.orm import Session

from app.db.crud.articles import delete_articles, get_all_articles

logger = logging.getLogger(__name__)

TITLE_SIMILARITY_THRESHOLD = 0.85


def string_similarity(first: str, second: str) -> float:
    """
    Cheap character-overlap similarity between two titles.

    Containment scores max_len / (min_len * 1.5), which can exceed 1 when
    the shorter title is much shorter. Otherwise it is the share of equal
    characters at equal positions over the longer length.
    """
    if not first or not second:
        return 0.0

    a, b = first.lower(), second.lower()
    if a == b:
        return 1.0

    if a in b or b in a:
        return max(len(a), len(b)) / (min(len(a), len(b)) * 1.5)

    matches = sum(1 for x, y in zip(a, b) if x == y)
    return matches / max(len(a), len(b))


def is_duplicate(kept, candidate) -> bool:
    url_match = bool(kept.source_url) and kept.source_url == candidate.source_url
    return url_match or string_similarity(kept.title, candidate.title) > TITLE_SIMILARITY_THRESHOLD


def find_duplicates(articles: list) -> list:
    """Articles (newest first) that duplicate an earlier one in the list."""
    duplicates = []
    seen_ids = set()

    for i, kept in enumerate(articles):
        if kept.id in seen_ids:
            continue
        for candidate in articles[i + 1:]:
            if candidate.id in seen_ids:
                continue
            if is_duplicate(kept, candidate):
                seen_ids.add(candidate.id)
                duplicates.append(candidate)
                logger.info(f"Duplicate found: \"{(candidate.title or '')[:50]}...\"")
        seen_ids.add(kept.id)

    return duplicates


def deduplicate_articles(db: Session) -> dict:
    articles = get_all_articles(db)
    logger.info(f"Checking {len(articles)} articles for duplicates")

    duplicates = find_duplicates(articles)
    removed = delete_articles(db, [article.id for article in duplicates])
    if removed:
        logger.info(f"Removed {removed} duplicate articles")

    return {
        "checked": len(articles),
        "duplicates": len(duplicates),
        "removed": removed,
        "remaining": len(articles) - removed,
    }
