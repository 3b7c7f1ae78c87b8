"""
Demo Models

People, films and the credits that link them.

Model Relationships:
- Person <-> Film: Many-to-Many through person_films, where each row
  carries relationship data (roles, performance, rel_type). That data
  is exposed on ``PersonFilmEdge`` rather than on ``Film`` itself.
"""

from typing import List, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from relay_connection.demo.database import Base


class Person(Base):
    """
    Person model.

    Table: people

    Example:
        person = Person(name="Tom Hanks", born=1956)
    """

    __tablename__ = "people"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    born: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Person(id={self.id}, name='{self.name}')"


class Film(Base):
    """
    Film model.

    Table: films
    """

    __tablename__ = "films"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    released: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Film(id={self.id}, name='{self.name}')"


class PersonFilm(Base):
    """
    Credit linking a person to a film.

    Table: person_films

    rel_type is "acted_in" or "directed"; roles is a JSON list of
    character names (empty for directors).
    """

    __tablename__ = "person_films"

    id: Mapped[int] = mapped_column(primary_key=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    film_id: Mapped[int] = mapped_column(
        ForeignKey("films.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    roles: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    performance: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    rel_type: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return (
            f"PersonFilm(person_id={self.person_id}, film_id={self.film_id}, "
            f"rel_type='{self.rel_type}')"
        )
