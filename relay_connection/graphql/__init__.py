"""
GraphQL Package

Schema-level support for Relay cursor pagination on graphql-core schemas:
- directive.py: the ``@connection`` directive and schema transform
- results.py: accepted resolver return shapes
- schema_mapper.py: non-mutating schema rebuild used by the transform
"""

from relay_connection.graphql.directive import (
    ConnectionDirective,
    ConnectionFieldBinding,
    connection_directive,
)
from relay_connection.graphql.results import PartialConnection, RawList, classify_result

__all__ = [
    "ConnectionDirective",
    "ConnectionFieldBinding",
    "PartialConnection",
    "RawList",
    "classify_result",
    "connection_directive",
]
