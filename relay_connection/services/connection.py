"""
Connection Windowing Service

Turns a plain list of items into a Relay connection envelope:

    {
        "edges": [{"cursor": ..., "node": item, ...edgeProps}, ...],
        "pageInfo": {
            "startCursor": ...,
            "endCursor": ...,
            "hasPreviousPage": bool,
            "hasNextPage": bool,
        },
        ...connectionProps,
    }

The list is expected to start AFTER the ``after`` cursor already: this
service never filters by cursor, it only slices ``first`` items off the
front and reads ``after`` as a hint for ``hasPreviousPage``.

hasNextPage Strategies
======================
Without an override, ``hasNextPage`` is true when a full page came back.
That is only exact when the caller over-fetches by one row, so resolvers
that know better should pass it explicitly:

1. Return ``first`` rows and accept the approximation
2. Fetch ``first + 1`` rows and pass ``hasNextPage: len(rows) > first``
3. Use a window count (``count(*) over ()``) and compare it to ``first``
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, List, Optional, Sequence

from relay_connection.exceptions import InvalidArgumentError
from relay_connection.schemas.pagination import PaginationConfig
from relay_connection.services.cursor import encode_cursor

DEFAULT_CONFIG = PaginationConfig()


def _read(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _pop(item: Any, name: str) -> Any:
    if isinstance(item, MutableMapping):
        return item.pop(name, None)
    value = getattr(item, name, None)
    if hasattr(item, name):
        delattr(item, name)
    return value


def cursor_getter(type_name: str, config: PaginationConfig) -> Callable[[Any], Any]:
    """
    Build the ``item -> cursor`` function for a config.

    A string names the property to read; a callable is used as-is and
    must return the cursor synchronously. Errors it raises propagate.
    """
    prop_or_fn = config.cursor_prop_or_fn
    if callable(prop_or_fn):
        return prop_or_fn

    if config.encode_cursor:
        return lambda item: encode_cursor(type_name, _read(item, prop_or_fn))
    return lambda item: _read(item, prop_or_fn)


def build_connection(
    type_name: str,
    items: Sequence[Any],
    args: Mapping[str, Any],
    config: Optional[PaginationConfig] = None,
    page_info: Optional[Mapping[str, Any]] = None,
    connection_props: Optional[Mapping[str, Any]] = None,
    *,
    prefix: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a connection from a list of items.

    Args:
        type_name: Node type name (used when cursors are encoded)
        items: Items in page order, already positioned after ``after``
        args: Field arguments; only ``first`` and ``after`` are read
        config: Options for the node type (defaults when omitted)
        page_info: Partial override for ``hasNextPage``/``hasPreviousPage``
        connection_props: Extra top-level keys (e.g. ``totalCount``)
        prefix: Connection prefix used to pick prefix-scoped edge props

    Returns:
        Connection dict with ``edges``, ``pageInfo`` and any extra keys

    Raises:
        InvalidArgumentError: If ``first`` is not a non-negative integer
    """
    config = config or DEFAULT_CONFIG
    first = args.get("first")
    after = args.get("after")

    if first is not None and (not isinstance(first, int) or isinstance(first, bool) or first < 0):
        raise InvalidArgumentError('Argument "first" must be a non-negative integer')

    page: List[Any] = list(items)[:first] if first is not None else list(items)
    get_cursor = cursor_getter(type_name, config)

    if config.is_simple:
        edges: List[Any] = page
        start_cursor = get_cursor(page[0]) if page else None
        end_cursor = get_cursor(page[-1]) if page else None
    else:
        prop_names = config.edge_prop_names(prefix)
        edges = []
        for item in page:
            # read before relocation, the cursor prop may itself be an edge prop
            cursor = get_cursor(item)
            edge = {name: _pop(item, name) for name in prop_names}
            edge["cursor"] = cursor
            edge["node"] = item
            edges.append(edge)
        start_cursor = edges[0]["cursor"] if edges else None
        end_cursor = edges[-1]["cursor"] if edges else None

    overrides = page_info or {}
    has_previous_page = overrides.get("hasPreviousPage")
    if has_previous_page is None:
        has_previous_page = bool(after)
    has_next_page = overrides.get("hasNextPage")
    if has_next_page is None:
        has_next_page = first is not None and len(page) >= first

    return {
        **(connection_props or {}),
        "edges": edges,
        "pageInfo": {
            "startCursor": start_cursor,
            "endCursor": end_cursor,
            "hasPreviousPage": has_previous_page,
            "hasNextPage": has_next_page,
        },
    }
