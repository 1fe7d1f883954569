"""
content-undo: human readable undo descriptions for CMS content elements.

Architecture
============

* :mod:`.undo`: describers, undo events and the listener wiring them
* :mod:`.formatters`: escaping and truncation of stored text
* :mod:`.serialization`: decoding of PHP serialized columns
* :mod:`.config`: YAML backed settings
* :mod:`.cli`: command line access


"""
import importlib_metadata

try:
    __version__ = importlib_metadata.version(__name__)
except importlib_metadata.PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"  # pragma: no cover

from content_undo.serialization import DecodeError
from content_undo.undo import (
    ContentDescriber,
    ContentUndoDescriptionListener,
    InvalidRecordError,
    MissingFieldError,
    UndoDescriptionEvent,
)

__all__ = [
    "ContentDescriber",
    "ContentUndoDescriptionListener",
    "UndoDescriptionEvent",
    "DecodeError",
    "InvalidRecordError",
    "MissingFieldError",
]
