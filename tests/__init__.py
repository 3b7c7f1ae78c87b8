"""
Test Suite for relay_connection

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample items)
- test_cursor.py: Cursor encoding and decoding
- test_pagination_config.py: Per-type option validation
- test_connection.py: Windowing (slicing, cursors, edge props, page info)
- test_schema_mapper.py: Schema copying
- test_directive.py: Schema transform and resolver wrapping
- test_graphql.py: Demo GraphQL endpoint
- test_config.py: Settings

Run tests with:
    pytest
    pytest tests/test_directive.py -v
"""
