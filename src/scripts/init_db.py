#!/usr/bin/env python3
"""Create the calendar request-log SQLite3 database."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DB_PATH
from core.database import create_tables, get_connection


def create_database(db_path: Path = DB_PATH):
    """Create the database and tables if they don't exist."""
    # Ensure directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        create_tables(conn)
    finally:
        conn.close()
    print(f"Database created successfully at: {db_path}")


if __name__ == "__main__":
    create_database()
