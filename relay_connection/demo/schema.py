"""
Demo GraphQL Schema

SDL-first schema for people and films, paginated with ``@connection``.

Each connection resolver shows one way of computing ``hasNextPage``:

- ``people``: returns exactly ``first`` rows and lets the library infer
  it (a full page means "maybe more")
- ``films``: uses a window count of the remaining rows
- ``Person.films``: fetches ``first + 1`` rows

Cursors are opaque ``type:id`` strings, so ``node(cursor:)`` can look up
any person or film from a cursor alone.
"""

from typing import Any, Dict, List, Optional

from ariadne import ObjectType, QueryType, UnionType, make_executable_schema
from graphql import GraphQLResolveInfo, GraphQLSchema
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from relay_connection.demo.models import Film, Person, PersonFilm
from relay_connection.exceptions import InvalidCursorError
from relay_connection.graphql import connection_directive
from relay_connection.services.cursor import decode_cursor, encode_cursor

TYPE_DEFS = """
type Person {
  id: ID!
  name: String!
  born: Int!
  films: [Film!]! @connection(prefix: "PersonFilm")
}

type Film {
  id: ID!
  name: String!
  released: Int!
}

union Node = Person | Film

type Query {
  people: [Person!]! @connection
  films: [Film!]! @connection
  node(cursor: ID!): Node
}
"""

TYPE_OPTIONS = {
    "Person": {
        "encodeCursor": True,
    },
    "Film": {
        "cursorPropOrFn": lambda film: encode_cursor("Film", film["id"]),
        "connectionProps": {
            "Film": {"totalCount": "Int!"},
        },
        "edgeProps": {
            "PersonFilm": {
                "roles": "[String!]!",
                "performance": "Int",
                "relType": "String!",
            },
        },
    },
}

NODE_MODELS = {
    "Person": Person,
    "Film": Film,
}

query = QueryType()
person = ObjectType("Person")
node = UnionType("Node")


def _cursor_id(cursor: str, type_name: str) -> int:
    """Decode a cursor that must belong to ``type_name``."""
    decoded = decode_cursor(cursor)
    if decoded.type_name != type_name:
        raise InvalidCursorError(f"Cursor does not belong to {type_name}")
    try:
        return int(decoded.id)
    except ValueError as exc:
        raise InvalidCursorError() from exc


def _limit(stmt, first: Optional[int], extra: int = 0):
    # negative values are rejected by the connection wrapper
    if first is not None and first >= 0:
        return stmt.limit(first + extra)
    return stmt


def _rows(db: Session, stmt) -> List[Dict[str, Any]]:
    # plain dicts: edge props are popped off each row
    return [dict(row) for row in db.execute(stmt).mappings()]


# =============================================================================
# Query Resolvers
# =============================================================================
@query.field("people")
def resolve_people(
    _, info: GraphQLResolveInfo, first: Optional[int] = None, after: Optional[str] = None
) -> List[Dict[str, Any]]:
    db: Session = info.context["db"]

    stmt = select(Person.id, Person.name, Person.born).order_by(Person.id)
    if after:
        stmt = stmt.where(Person.id > _cursor_id(after, "Person"))

    return _rows(db, _limit(stmt, first))


@query.field("films")
def resolve_films(
    _, info: GraphQLResolveInfo, first: Optional[int] = None, after: Optional[str] = None
) -> Dict[str, Any]:
    db: Session = info.context["db"]

    stmt = select(
        Film.id,
        Film.name,
        Film.released,
        func.count().over().label("remaining_count"),
    ).order_by(Film.id)
    if after:
        stmt = stmt.where(Film.id > _cursor_id(after, "Film"))

    rows = _rows(db, _limit(stmt, first))
    remaining = rows[0]["remaining_count"] if rows else 0
    for row in rows:
        del row["remaining_count"]

    return {
        "edges": rows,
        "pageInfo": {"hasNextPage": first is not None and remaining > first},
        "totalCount": db.scalar(select(func.count()).select_from(Film)),
    }


@query.field("node")
def resolve_node(_, info: GraphQLResolveInfo, cursor: str) -> Optional[Dict[str, Any]]:
    db: Session = info.context["db"]

    decoded = decode_cursor(cursor)
    model = NODE_MODELS.get(decoded.type_name)
    if model is None:
        return None

    stmt = select(model.__table__).where(model.id == _cursor_id(cursor, decoded.type_name))
    row = db.execute(stmt).mappings().first()
    if row is None:
        return None

    return {"__typename": decoded.type_name, **row}


# =============================================================================
# Object Resolvers
# =============================================================================
@person.field("films")
def resolve_person_films(
    obj: Dict[str, Any],
    info: GraphQLResolveInfo,
    first: Optional[int] = None,
    after: Optional[str] = None,
) -> Dict[str, Any]:
    db: Session = info.context["db"]

    stmt = (
        select(
            Film.id,
            Film.name,
            Film.released,
            PersonFilm.roles,
            PersonFilm.performance,
            PersonFilm.rel_type.label("relType"),
        )
        .join(PersonFilm, PersonFilm.film_id == Film.id)
        .where(PersonFilm.person_id == obj["id"])
        .order_by(Film.id)
    )
    if after:
        stmt = stmt.where(Film.id > _cursor_id(after, "Film"))

    # one extra row tells us whether another page exists
    rows = _rows(db, _limit(stmt, first, extra=1))

    return {
        "edges": rows,
        "pageInfo": {"hasNextPage": first is not None and len(rows) > first},
    }


@node.type_resolver
def resolve_node_type(obj: Dict[str, Any], *_) -> str:
    return obj["__typename"]


def create_schema() -> GraphQLSchema:
    """Build the executable demo schema with connection fields applied."""
    directive = connection_directive(TYPE_OPTIONS)
    schema = make_executable_schema(
        [directive.type_defs, TYPE_DEFS],
        query,
        person,
        node,
    )
    return directive.transform(schema)


schema = create_schema()
