"""
Decoding of PHP serialized column values.

The CMS stores structured widget values (headline units, list items, table
rows) as PHP ``serialize()`` strings in a single column. This module turns
them back into plain Python structures.
"""
import logging
from typing import Any, Dict, List, Union

import phpserialize

logger = logging.getLogger(__name__)

SERIALIZED_ARRAY_PREFIX = "a:"


class DecodeError(ValueError):
    """Raised when a serialized value cannot be decoded."""


def deserialize(value: Any) -> Any:
    """
    Decode a PHP serialized array.

    Values that are not serialized arrays (already decoded structures, None,
    plain scalars) are returned unchanged.

    >>> deserialize('a:2:{i:0;s:1:"a";i:1;s:1:"b";}')
    ['a', 'b']
    >>> deserialize("plain")
    'plain'

    :param value: column value
    :return: list, dict or the value itself
    :raises DecodeError: if the value looks serialized but cannot be decoded
    """
    if value is None or isinstance(value, (list, dict)):
        return value
    if isinstance(value, bytes):
        raw = value
        text = value.decode("utf-8", errors="replace")
    elif isinstance(value, str):
        text = value
        raw = value.encode("utf-8")
    else:
        return value
    if not text.startswith(SERIALIZED_ARRAY_PREFIX):
        return value
    try:
        decoded = phpserialize.loads(raw, decode_strings=True)
    except ValueError as e:
        raise DecodeError(f"Malformed serialized value {text[:40]!r}: {e}") from e
    logger.debug(f"Decoded serialized array with {len(decoded)} entries")
    return _normalize(decoded)


def serialize(value: Any) -> str:
    """
    Encode a value the way PHP ``serialize()`` does.

    :param value:
    :return:
    """
    return phpserialize.dumps(value).decode("utf-8")


def _normalize(value: Any) -> Union[List, Dict, Any]:
    # PHP arrays come back as dicts; sequential ones become lists
    if not isinstance(value, dict):
        return value
    items = {k: _normalize(v) for k, v in value.items()}
    if list(items.keys()) == list(range(len(items))):
        return list(items.values())
    return items
