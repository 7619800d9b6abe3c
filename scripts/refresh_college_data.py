#!/usr/bin/env python3
"""Writes the official placement, admission and fees figures into the colleges collection."""
import os
import sys

from dotenv import load_dotenv

load_dotenv()
sys.path.append(os.getcwd())

from app.db.crud.colleges import apply_official_data, seed_colleges
from app.db.session import SessionLocal


def main():
    db = SessionLocal()
    try:
        seed_colleges(db)
        result = apply_official_data(db)
    finally:
        db.close()

    print(f"Colleges updated: {result['updated']}")
    if result["missing"]:
        print(f"Colleges not found: {result['missing']}")


if __name__ == "__main__":
    main()
