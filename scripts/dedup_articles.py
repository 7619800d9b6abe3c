#!/usr/bin/env python3
"""Removes duplicate articles (same URL or near-identical title), keeping the newest."""
import os
import sys
import time

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.session import SessionLocal
from app.services.dedup import deduplicate_articles


def main():
    started = time.monotonic()
    print("Starting data deduplication...")

    db = SessionLocal()
    try:
        result = deduplicate_articles(db)
    finally:
        db.close()

    print(f"    Articles checked: {result['checked']}")
    print(f"    Duplicates removed: {result['removed']}")
    print(f"    Remaining: {result['remaining']}")
    print(f"Done in {time.monotonic() - started:.2f}s")


if __name__ == "__main__":
    main()
