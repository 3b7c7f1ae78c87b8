"""
Connection Resolver Results

A resolver behind a connection field may return:

- a list of items                      -> RawList
- a mapping ``{edges, pageInfo, ...}``  -> PartialConnection
- a RawList / PartialConnection directly

The mapping form lets a resolver supply ``hasNextPage``/``hasPreviousPage``
and extra connection fields such as ``totalCount``:

    return {
        "edges": rows,
        "pageInfo": {"hasNextPage": len(rows) > first},
        "totalCount": total,
    }
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Union

from relay_connection.exceptions import InvalidResolverResultError


@dataclass(frozen=True)
class RawList:
    """Plain items; page info is inferred."""

    items: Sequence[Any]


@dataclass(frozen=True)
class PartialConnection:
    """Items plus caller-supplied page info and extra connection fields."""

    items: Sequence[Any]
    page_info: Optional[Mapping[str, Any]] = None
    extra_props: Dict[str, Any] = field(default_factory=dict)


ConnectionResult = Union[RawList, PartialConnection]


def classify_result(value: Any) -> ConnectionResult:
    """
    Classify a resolver's settled return value.

    Raises:
        InvalidResolverResultError: For strings, numbers, booleans, None
            and any other non-list, non-mapping value
    """
    if isinstance(value, (RawList, PartialConnection)):
        return value

    if isinstance(value, (list, tuple)):
        return RawList(items=value)

    if isinstance(value, Mapping):
        extra_props = {
            key: val for key, val in value.items() if key not in ("edges", "pageInfo")
        }
        return PartialConnection(
            items=value.get("edges") or [],
            page_info=value.get("pageInfo"),
            extra_props=extra_props,
        )

    raise InvalidResolverResultError()
