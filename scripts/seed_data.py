#!/usr/bin/env python3
"""
Database Seed Script

Populates the demo database with people, films and credits.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Keep existing rows
    python scripts/seed_data.py --no-clear

This script:
1. Connects to the database using DATABASE_URL
2. Creates the tables if needed
3. Clears existing data (unless --no-clear)
4. Inserts the demo data set
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from relay_connection.demo.database import SessionLocal, create_tables
from relay_connection.demo.seed import clear_demo_data, seed_demo_data


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the demo database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            print("Clearing existing data...")
            clear_demo_data(db)

        counts = seed_demo_data(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        for table, count in counts.items():
            print(f"  - {table}: {count}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise

    finally:
        db.close()


if __name__ == "__main__":
    seed_database(clear_existing="--no-clear" not in sys.argv)
