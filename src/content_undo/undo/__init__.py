"""
Undo log support.

* :class:`ContentDescriber`: summarizes content element records
* :class:`ContentUndoDescriptionListener`: applies it to undo events
"""

from .content_describer import ContentDescriber
from .event import UndoDescriptionEvent
from .listener import ContentUndoDescriptionListener
from .records import InvalidRecordError, MissingFieldError, parse_record

__all__ = [
    "ContentDescriber",
    "ContentUndoDescriptionListener",
    "UndoDescriptionEvent",
    "InvalidRecordError",
    "MissingFieldError",
    "parse_record",
]
