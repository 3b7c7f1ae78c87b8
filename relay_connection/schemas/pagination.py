"""
Pagination Configuration Schemas

Per-type options for the connection directive, keyed by the node type
name (e.g. ``"Film"``).

The options map mirrors the camelCase keys used in SDL-first setups, so
both spellings are accepted:

    connection_directive({
        "Film": {
            "paginationMode": "edges",
            "cursorPropOrFn": lambda film: encode_cursor("Film", film["id"]),
            "connectionProps": {"totalCount": "Int!"},
            "edgeProps": {
                "PersonFilm": {"roles": "[String!]!", "performance": "Int"},
            },
        },
    })

Additional props may be nested one level under a connection prefix to
scope them to one relationship: above, ``roles`` and ``performance``
only appear on ``PersonFilmEdge``, never on ``FilmEdge``.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# name -> GraphQL type string, optionally nested one level under a prefix
PropsMap = Dict[str, Union[str, Dict[str, str]]]


class PaginationMode(str, Enum):
    """How the ``edges`` list of a connection is shaped."""

    # edges are {cursor, node, ...edgeProps}
    EDGES = "edges"
    # edges are the nodes themselves, no Edge type is generated
    SIMPLE = "simple"


def _flatten_props(
    props: Optional[Union[PropsMap, List[str]]],
    prefix: Optional[str],
) -> Dict[str, Optional[str]]:
    if not props:
        return {}
    if isinstance(props, list):
        return {name: None for name in props}
    if prefix and isinstance(props.get(prefix), dict):
        return dict(props[prefix])
    return {name: value for name, value in props.items() if isinstance(value, str)}


class PaginationConfig(BaseModel):
    """
    Options for one node type.

    Attributes:
        pagination_mode: ``edges`` (default) or ``simple``
        cursor_prop_or_fn: Property read off each item for its cursor, or
            a function ``(item) -> cursor``
        encode_cursor: Pass property cursors through ``encode_cursor``
            using the node type name
        connection_props: Extra fields for the generated Connection type
        edge_props: Extra fields for the generated Edge type. At resolve
            time the same names are moved off each item onto its edge.
            A plain list of names is accepted for resolve-time use only.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    pagination_mode: PaginationMode = Field(
        default=PaginationMode.EDGES,
        alias="paginationMode",
    )
    cursor_prop_or_fn: Union[str, Callable[[Any], Any]] = Field(
        default="id",
        alias="cursorPropOrFn",
    )
    encode_cursor: bool = Field(default=False, alias="encodeCursor")
    connection_props: Optional[PropsMap] = Field(
        default=None,
        alias="connectionProps",
    )
    edge_props: Optional[Union[PropsMap, List[str]]] = Field(
        default=None,
        alias="edgeProps",
    )

    @field_validator("cursor_prop_or_fn")
    @classmethod
    def cursor_prop_must_not_be_empty(cls, v):
        if isinstance(v, str) and not v:
            raise ValueError("cursorPropOrFn must be a non-empty property name")
        return v

    @property
    def is_simple(self) -> bool:
        return self.pagination_mode == PaginationMode.SIMPLE

    def connection_fields(self, prefix: Optional[str] = None) -> Dict[str, str]:
        """Connection fields (name -> type string) for ``prefix``."""
        return {
            name: type_string
            for name, type_string in _flatten_props(self.connection_props, prefix).items()
            if type_string
        }

    def edge_fields(self, prefix: Optional[str] = None) -> Dict[str, str]:
        """Edge fields (name -> type string) for ``prefix``."""
        return {
            name: type_string
            for name, type_string in _flatten_props(self.edge_props, prefix).items()
            if type_string
        }

    def edge_prop_names(self, prefix: Optional[str] = None) -> List[str]:
        """Item properties relocated onto each edge for ``prefix``."""
        return list(_flatten_props(self.edge_props, prefix))


_type_options_adapter = TypeAdapter(Dict[str, PaginationConfig])


def parse_type_options(
    type_options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, PaginationConfig]:
    """
    Validate a ``{type name: options}`` map.

    Values may be plain dicts or ``PaginationConfig`` instances.

    Raises:
        pydantic.ValidationError: If any entry is malformed
    """
    return _type_options_adapter.validate_python(dict(type_options or {}))
