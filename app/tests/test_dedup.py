from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from app.db.crud.articles import create_article, count_articles
from app.services.dedup import deduplicate_articles, find_duplicates, string_similarity


def article(id, title, url=None):
    return SimpleNamespace(id=id, title=title, source_url=url)


def test_string_similarity_edge_cases():
    assert string_similarity("", "anything") == 0
    assert string_similarity(None, "anything") == 0
    assert string_similarity("CAT Results Out", "cat results out") == 1
    # Containment: 24 / (13 * 1.5)
    assert string_similarity("IIM Ahmedabad", "IIM Ahmedabad placements") == pytest.approx(24 / 19.5)
    # Positional overlap: 3 of 4 characters line up
    assert string_similarity("abcd", "abxd") == pytest.approx(0.75)
    assert string_similarity("abc", "xyz") == 0


def test_find_duplicates_by_title_and_url():
    articles = [
        article(3, "IIM Ahmedabad announces final placements", "https://news.example/a"),
        article(2, "IIM Ahmedabad announces final placement!", "https://news.example/b"),
        article(1, "Completely different story", "https://news.example/a"),
    ]
    assert [a.id for a in find_duplicates(articles)] == [2, 1]


def test_missing_urls_are_not_a_match():
    articles = [article(2, "First story"), article(1, "Another topic entirely")]
    assert find_duplicates(articles) == []


def test_deduplicate_articles_keeps_newest(db):
    now = datetime(2025, 3, 1, 9, 0)
    create_article(db, title="XLRI opens applications", source_url="https://x.example/1", created_at=now)
    create_article(db, title="XLRI opens applications", source_url="https://y.example/2", created_at=now + timedelta(hours=1))
    create_article(db, title="FMS fee hike announced", source_url="https://x.example/3", created_at=now + timedelta(hours=2))

    result = deduplicate_articles(db)

    assert result == {"checked": 3, "duplicates": 1, "removed": 1, "remaining": 2}
    assert count_articles(db) == 2
    assert count_articles(db, {"source_url": "https://x.example/1"}) == 0
