#!/usr/bin/env python3
"""Creates the portal's collections and seeds the college dataset."""
import os
import sys

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.crud.colleges import seed_colleges
from app.db.session import SessionLocal
from app.db.store import DocumentStore


def init_db(db) -> dict:
    created = DocumentStore(db).create_collections()
    seeded = seed_colleges(db)
    return {"created": created, "seeded": seeded}


def main():
    print("Initializing database...")
    db = SessionLocal()
    try:
        result = init_db(db)
    finally:
        db.close()

    print(f"    Created collections: {', '.join(result['created']) or 'none'}")
    print(f"    Seeded colleges: {result['seeded']}")
    print("Database initialization completed.")


if __name__ == "__main__":
    main()
