"""
Demo Seed Data

Three people, three films and the credits between them.
Used by ``scripts/seed_data.py`` and the test fixtures.
"""

import logging
from typing import Dict

from sqlalchemy import delete
from sqlalchemy.orm import Session

from relay_connection.demo.models import Film, Person, PersonFilm

logger = logging.getLogger(__name__)

PEOPLE = [
    {"id": 1, "name": "Tom Hanks", "born": 1956},
    {"id": 2, "name": "Robert Zemeckis", "born": 1952},
    {"id": 3, "name": "Michael J Fox", "born": 1961},
]

FILMS = [
    {"id": 1, "name": "Forrest Gump", "released": 1994},
    {"id": 2, "name": "Cast Away", "released": 2000},
    {"id": 3, "name": "Back to the Future", "released": 1985},
]

CREDITS = [
    {"film_id": 1, "person_id": 1, "performance": 5, "rel_type": "acted_in", "roles": ["Forrest"]},
    {"film_id": 1, "person_id": 2, "performance": 5, "rel_type": "directed", "roles": []},
    {"film_id": 2, "person_id": 1, "performance": 2, "rel_type": "acted_in", "roles": ["Chuck Noland"]},
    {"film_id": 2, "person_id": 2, "performance": 4, "rel_type": "directed", "roles": []},
    {"film_id": 3, "person_id": 2, "performance": 4, "rel_type": "directed", "roles": []},
    {"film_id": 3, "person_id": 3, "performance": 4, "rel_type": "acted_in", "roles": ["Marty McFly"]},
]


def clear_demo_data(db: Session) -> None:
    """Delete all demo rows (credits first for the foreign keys)."""
    db.execute(delete(PersonFilm))
    db.execute(delete(Film))
    db.execute(delete(Person))
    db.commit()


def seed_demo_data(db: Session) -> Dict[str, int]:
    """
    Insert the demo data set.

    Returns:
        Row counts per table
    """
    db.add_all(Person(**data) for data in PEOPLE)
    db.add_all(Film(**data) for data in FILMS)
    db.flush()
    db.add_all(PersonFilm(**data) for data in CREDITS)
    db.commit()

    counts = {"people": len(PEOPLE), "films": len(FILMS), "credits": len(CREDITS)}
    logger.info("Seeded demo data: %s", counts)
    return counts
