"""
Connection Windowing Tests

Tests for build_connection: slicing, cursors, edge props and page info.
"""

import pytest

from relay_connection.exceptions import InvalidArgumentError
from relay_connection.schemas.pagination import PaginationConfig, PaginationMode
from relay_connection.services.connection import build_connection
from relay_connection.services.cursor import encode_cursor


def edge(item: dict, cursor) -> dict:
    return {"cursor": cursor, "node": item}


class TestArguments:
    """Tests for first/after handling."""

    def test_negative_first(self, items):
        """Test a negative first value is rejected."""
        with pytest.raises(InvalidArgumentError, match='Argument "first" must be a non-negative integer'):
            build_connection("T", items, {"first": -1})

    @pytest.mark.parametrize("first", [1.0, 2.5, "2", True])
    def test_non_integer_first(self, items, first):
        """Test floats, strings and booleans are rejected as first values."""
        with pytest.raises(InvalidArgumentError, match='Argument "first" must be a non-negative integer'):
            build_connection("T", items, {"first": first})

    def test_first_zero(self, items):
        """Test first=0 returns no edges and reports a next page."""
        result = build_connection("T", items, {"first": 0})

        assert result["edges"] == []
        assert result["pageInfo"] == {
            "startCursor": None,
            "endCursor": None,
            "hasPreviousPage": False,
            "hasNextPage": True,
        }

    def test_no_first(self, items):
        """Test a missing first value takes the whole list."""
        result = build_connection("T", items, {})

        assert len(result["edges"]) == 3
        assert result["pageInfo"]["hasNextPage"] is False

    def test_empty_list(self):
        """Test an empty list gives empty cursors."""
        result = build_connection("T", [], {"first": 10, "after": "abc"})

        assert result == {
            "edges": [],
            "pageInfo": {
                "startCursor": None,
                "endCursor": None,
                "hasPreviousPage": True,
                "hasNextPage": False,
            },
        }


class TestEdgesMode:
    """Tests for the default edges pagination mode."""

    def test_default_options(self, items):
        """Test slicing with the default id cursor."""
        result = build_connection("T", items, {"first": 2, "after": 1})

        assert result == {
            "edges": [
                edge({"id": 10001, "otherId": 8001, "name": "foo"}, 10001),
                edge({"id": 10002, "otherId": 8002, "name": "bar"}, 10002),
            ],
            "pageInfo": {
                "startCursor": 10001,
                "endCursor": 10002,
                "hasPreviousPage": True,
                "hasNextPage": True,
            },
        }

    def test_custom_cursor_prop(self, items):
        """Test reading the cursor from another property."""
        config = PaginationConfig(cursor_prop_or_fn="otherId")

        result = build_connection("T", items, {"first": 2, "after": 1}, config)

        assert [e["cursor"] for e in result["edges"]] == [8001, 8002]
        assert result["pageInfo"]["startCursor"] == 8001
        assert result["pageInfo"]["endCursor"] == 8002

    def test_custom_cursor_function(self, items):
        """Test computing the cursor with a function."""
        config = PaginationConfig(cursor_prop_or_fn=lambda item: item["name"])

        result = build_connection("T", items, {"first": 2, "after": 1}, config)

        assert [e["cursor"] for e in result["edges"]] == ["foo", "bar"]
        assert result["pageInfo"]["startCursor"] == "foo"
        assert result["pageInfo"]["endCursor"] == "bar"

    def test_encoded_cursor(self, items):
        """Test property cursors can be made opaque with the node type name."""
        config = PaginationConfig(encode_cursor=True)

        result = build_connection("Film", items, {"first": 1}, config)

        assert result["edges"][0]["cursor"] == encode_cursor("Film", 10001)

    def test_cursor_function_errors_propagate(self, items):
        """Test errors raised by a cursor function are not wrapped."""
        config = PaginationConfig(cursor_prop_or_fn=lambda item: item["missing"])

        with pytest.raises(KeyError):
            build_connection("T", items, {"first": 1}, config)

    def test_object_items(self):
        """Test cursors are read from attributes of non-mapping items."""

        class Row:
            def __init__(self, id):
                self.id = id

        rows = [Row(1), Row(2)]

        result = build_connection("T", rows, {"first": 5})

        assert [e["cursor"] for e in result["edges"]] == [1, 2]
        assert result["edges"][0]["node"] is rows[0]


class TestEdgeProps:
    """Tests for moving item properties onto edges."""

    def test_edge_props_list(self, items):
        """Test listed properties move from the node to the edge."""
        config = PaginationConfig(edge_props=["otherId"])

        result = build_connection("T", items, {"first": 2, "after": 1}, config)

        assert result["edges"] == [
            {"cursor": 10001, "otherId": 8001, "node": {"id": 10001, "name": "foo"}},
            {"cursor": 10002, "otherId": 8002, "node": {"id": 10002, "name": "bar"}},
        ]

    def test_edge_props_map(self, items):
        """Test the keys of a type-string map are the relocated properties."""
        config = PaginationConfig(edge_props={"otherId": "Int!"})

        result = build_connection("T", items, {"first": 1}, config)

        assert result["edges"][0]["otherId"] == 8001
        assert "otherId" not in result["edges"][0]["node"]

    def test_edge_props_scoped_by_prefix(self, items):
        """Test props nested under a prefix only apply to that prefix."""
        config = PaginationConfig(edge_props={"TFriend": {"otherId": "Int!"}})

        scoped = build_connection("T", [dict(i) for i in items], {"first": 1}, config, prefix="TFriend")
        unscoped = build_connection("T", [dict(i) for i in items], {"first": 1}, config, prefix="T")

        assert scoped["edges"][0]["otherId"] == 8001
        assert "otherId" not in scoped["edges"][0]["node"]
        assert "otherId" not in unscoped["edges"][0]
        assert unscoped["edges"][0]["node"]["otherId"] == 8001

    def test_config_not_mutated(self, items):
        """Test resolving a prefix leaves the shared config unchanged."""
        edge_props = {"TFriend": {"otherId": "Int!"}}
        config = PaginationConfig(edge_props=edge_props)

        build_connection("T", items, {"first": 1}, config, prefix="TFriend")

        assert config.edge_props == edge_props

    def test_cursor_prop_can_be_relocated(self, items):
        """Test the cursor is read before the property is moved."""
        config = PaginationConfig(cursor_prop_or_fn="otherId", edge_props=["otherId"])

        result = build_connection("T", items, {"first": 1}, config)

        assert result["edges"][0] == {
            "cursor": 8001,
            "otherId": 8001,
            "node": {"id": 10001, "name": "foo"},
        }


class TestSimpleMode:
    """Tests for the simple pagination mode."""

    def test_simple_mode(self, items):
        """Test edges are the raw items and cursors are still computed."""
        config = PaginationConfig(pagination_mode=PaginationMode.SIMPLE)

        result = build_connection("T", items, {"first": 2, "after": 1}, config)

        assert result == {
            "edges": [
                {"id": 10001, "otherId": 8001, "name": "foo"},
                {"id": 10002, "otherId": 8002, "name": "bar"},
            ],
            "pageInfo": {
                "startCursor": 10001,
                "endCursor": 10002,
                "hasPreviousPage": True,
                "hasNextPage": True,
            },
        }

    def test_simple_mode_ignores_edge_props(self, items):
        """Test no properties are relocated in simple mode."""
        config = PaginationConfig(pagination_mode="simple", edge_props=["otherId"])

        result = build_connection("T", items, {"first": 1}, config)

        assert result["edges"][0] == {"id": 10001, "otherId": 8001, "name": "foo"}


class TestPageInfo:
    """Tests for hasNextPage/hasPreviousPage inference and overrides."""

    def test_without_after_value(self, items):
        """Test hasPreviousPage is false without an after cursor."""
        result = build_connection("T", items, {"first": 2})

        assert result["pageInfo"]["hasPreviousPage"] is False
        assert result["pageInfo"]["hasNextPage"] is True

    def test_first_larger_than_dataset(self, items):
        """Test hasNextPage is false when less than a page came back."""
        result = build_connection("T", items, {"first": 100})

        assert len(result["edges"]) == 3
        assert result["pageInfo"] == {
            "startCursor": 10001,
            "endCursor": 10003,
            "hasPreviousPage": False,
            "hasNextPage": False,
        }

    def test_user_provided_page_values(self, items):
        """Test caller-supplied page info wins over inference."""
        result = build_connection(
            "T",
            items,
            {"first": 100},
            None,
            {"hasNextPage": True, "hasPreviousPage": True},
        )

        assert result["pageInfo"]["hasNextPage"] is True
        assert result["pageInfo"]["hasPreviousPage"] is True

    def test_false_override_is_respected(self, items):
        """Test an explicit False is not treated as missing."""
        result = build_connection("T", items, {"first": 2, "after": 5}, None, {"hasPreviousPage": False})

        assert result["pageInfo"]["hasPreviousPage"] is False
        assert result["pageInfo"]["hasNextPage"] is True


class TestConnectionProps:
    """Tests for extra top-level connection keys."""

    def test_extra_keys_pass_through(self, items):
        """Test keys such as totalCount are merged in."""
        result = build_connection("T", items, {"first": 1}, None, None, {"totalCount": 3})

        assert result["totalCount"] == 3
        assert len(result["edges"]) == 1

    def test_engine_keys_win(self, items):
        """Test extra keys cannot replace edges or pageInfo."""
        result = build_connection(
            "T",
            items,
            {"first": 1},
            None,
            None,
            {"edges": "nope", "pageInfo": "nope"},
        )

        assert isinstance(result["edges"], list)
        assert result["pageInfo"]["startCursor"] == 10001
