#!/usr/bin/env python3
"""
Imports articles from a JSON file (a list of objects with title, summary,
content, source_name, source_url, published_at) and tags each with the
colleges it mentions.
"""
import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.crud.colleges import list_colleges
from app.db.session import SessionLocal
from app.services.college_matcher import init_matcher
from app.services.ingestion import ingest_articles


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="JSON file with a list of articles")
    args = parser.parse_args(argv)

    with open(args.path, "r", encoding="utf-8") as f:
        items = json.load(f)

    db = SessionLocal()
    try:
        init_matcher(list_colleges(db))
        result = ingest_articles(db, items)
    finally:
        db.close()

    print(f"Added: {result['added']}  Skipped: {result['skipped']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
