"""
relay_connection

Relay-style cursor pagination for SDL-first GraphQL schemas.

Package Structure:
- config.py: Settings using Pydantic Settings
- exceptions.py: Error types
- schemas/: Pydantic models for per-type pagination options
- services/: Cursor codec and list-to-connection windowing
- graphql/: The ``@connection`` directive and schema transform
- demo/: FastAPI + SQLAlchemy service paginating films and people

Quick start:
    from ariadne import make_executable_schema
    from relay_connection import connection_directive

    directive = connection_directive()
    schema = directive.transform(
        make_executable_schema([directive.type_defs, type_defs], query)
    )
"""

from relay_connection.exceptions import (
    InvalidArgumentError,
    InvalidCursorError,
    InvalidResolverResultError,
    RelayConnectionError,
)
from relay_connection.graphql import (
    ConnectionDirective,
    PartialConnection,
    RawList,
    connection_directive,
)
from relay_connection.schemas import PaginationConfig, PaginationMode
from relay_connection.services.connection import build_connection
from relay_connection.services.cursor import DecodedCursor, decode_cursor, encode_cursor

__version__ = "0.1.0"

__all__ = [
    "ConnectionDirective",
    "DecodedCursor",
    "InvalidArgumentError",
    "InvalidCursorError",
    "InvalidResolverResultError",
    "PaginationConfig",
    "PaginationMode",
    "PartialConnection",
    "RawList",
    "RelayConnectionError",
    "build_connection",
    "connection_directive",
    "decode_cursor",
    "encode_cursor",
]
