"""
Cursor Codec

Opaque cursors are the base64 encoding of ``"<typeName>:<id>"``.

Embedding the type name makes cursors globally unique, so a single
``node(cursor: ID!)`` query can route a cursor back to its table.

Decoding splits on the FIRST colon only: ids may contain colons, type
names may not.
"""

import base64
import binascii
from typing import Dict, NamedTuple, Union

from relay_connection.exceptions import InvalidCursorError

DELIMITER = ":"


class DecodedCursor(NamedTuple):
    type_name: str
    id: str

    def as_dict(self) -> Dict[str, str]:
        """Return the GraphQL-facing ``{typeName, id}`` form."""
        return {"typeName": self.type_name, "id": self.id}


def encode_cursor(type_name: str, id: Union[str, int]) -> str:
    """
    Encode a (type name, id) pair as an opaque cursor.

    Example:
        >>> encode_cursor("Film", 1)
        'RmlsbTox'
    """
    raw = f"{type_name}{DELIMITER}{id}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> DecodedCursor:
    """
    Decode a cursor produced by ``encode_cursor``.

    Args:
        cursor: Opaque cursor string

    Returns:
        DecodedCursor with ``type_name`` and ``id`` (always a string)

    Raises:
        InvalidCursorError: If the cursor is not base64, not UTF-8, has
            no colon, or has an empty type name or id
    """
    try:
        text = base64.b64decode(cursor, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError, TypeError) as exc:
        raise InvalidCursorError() from exc

    type_name, sep, id_ = text.partition(DELIMITER)
    if not sep or not type_name or not id_:
        raise InvalidCursorError()

    return DecodedCursor(type_name=type_name, id=id_)
