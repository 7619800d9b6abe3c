#!/usr/bin/env python3
"""
Drops every collection and re-runs the initialization.
WARNING: destroys all users, sessions and articles.
"""
import argparse
import os
import sys

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.session import SessionLocal
from app.db.store import DocumentStore
from scripts.init_db import init_db


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args(argv)

    if not args.yes and input("This deletes ALL data. Type 'reset' to continue: ").strip() != "reset":
        print("Aborted.")
        return 1

    db = SessionLocal()
    try:
        dropped = DocumentStore(db).drop_collections()
        print(f"Dropped {len(dropped)} collections: {', '.join(dropped) or 'none'}")
        result = init_db(db)
    finally:
        db.close()

    print(f"Reinitialized: {len(result['created'])} collections, {result['seeded']} colleges seeded.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
