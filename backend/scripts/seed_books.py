#!/usr/bin/env python3
"""
Seed Books Script
Creates the books table if needed and inserts the sample library.
"""

import sys
import os

# Allow running from a checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from booklog.core.logging import setup_logging
from booklog.database import SessionLocal, init_db
from booklog.services.sample_data import seed_sample_books


def main():
    setup_logging()
    init_db()

    db = SessionLocal()
    try:
        added = seed_sample_books(db)
    finally:
        db.close()

    print(f"Added {added} sample book(s).")


if __name__ == '__main__':
    main()
