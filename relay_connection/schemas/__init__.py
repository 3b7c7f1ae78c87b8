"""
Pydantic Schemas Package

Validated configuration models for the connection directive.
"""

from relay_connection.schemas.pagination import (
    PaginationConfig,
    PaginationMode,
    parse_type_options,
)

__all__ = [
    "PaginationConfig",
    "PaginationMode",
    "parse_type_options",
]
