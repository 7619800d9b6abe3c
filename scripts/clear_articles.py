#!/usr/bin/env python3
import os
import sys

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.crud.articles import clear_articles
from app.db.session import SessionLocal


def main():
    print("Clearing articles collection...")
    db = SessionLocal()
    try:
        deleted = clear_articles(db)
    finally:
        db.close()
    print(f"Successfully deleted {deleted} articles.")


if __name__ == "__main__":
    main()
