#!/usr/bin/env python3
"""
Seed the database with demo data (user, sample PDFs, quiz, attempts, chat, progress).
Run from backend dir with project venv active: python scripts/seed.py
Safe to run repeatedly.
"""
import logging
import sys
from pathlib import Path

BACKEND = Path(__file__).resolve().parent.parent
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    from beyondchats.database import SessionLocal, init_db
    from beyondchats.seed import seed_database

    init_db()
    db = SessionLocal()
    try:
        added = seed_database(db)
    except Exception as e:
        db.rollback()
        print(f"FAIL seed: {e}")
        return 1
    finally:
        db.close()
    for table, count in added.items():
        print(f"OK {table}: {count} added")
    return 0


if __name__ == "__main__":
    sys.exit(main())
