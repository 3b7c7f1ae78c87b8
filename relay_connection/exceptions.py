"""
Exceptions

Errors raised by the cursor codec, the windowing engine and the
connection resolver wrapper.

Inside a GraphQL request these surface as field errors: graphql-core
catches them, adds an entry to ``errors`` and nulls the field (and any
non-null parents) without affecting sibling fields.
"""


class RelayConnectionError(Exception):
    """Base class for all relay_connection errors."""


class InvalidCursorError(RelayConnectionError):
    """A cursor could not be decoded into a ``type:id`` pair."""

    def __init__(self, message: str = "Invalid cursor provided"):
        super().__init__(message)


class InvalidArgumentError(RelayConnectionError):
    """A pagination argument is out of range (e.g. a negative ``first``)."""


class InvalidResolverResultError(RelayConnectionError):
    """A connection resolver returned something that is not a list or mapping."""

    def __init__(
        self, message: str = "Connection responses must be an array or object"
    ):
        super().__init__(message)
