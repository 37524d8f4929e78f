#!/usr/bin/env python3
"""
Database Connection Check
Connects to DATABASE_URL and reports whether the database is reachable.
Exit status is 0 on success, 1 on failure.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sqlalchemy.exc import SQLAlchemyError

from booklog.config import get_settings
from booklog.database import check_connection


def main() -> int:
    settings = get_settings()
    print("Testing database connection...")
    print(f"URL: {settings.DATABASE_URL}")
    print()

    try:
        dialect = check_connection()
    except SQLAlchemyError as e:
        print(f"❌ Failed: {e}")
        print()
        print("Check DATABASE_URL in your .env file.")
        return 1

    print(f"✅ SUCCESS! Connected ({dialect})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
