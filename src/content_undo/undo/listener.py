import logging
from dataclasses import dataclass, field

from content_undo.undo.content_describer import ContentDescriber
from content_undo.undo.event import UndoDescriptionEvent

logger = logging.getLogger(__name__)


@dataclass
class ContentUndoDescriptionListener:
    """
    Sets the undo description of content element events.

    Events for other tables are left untouched.
    """

    describer: ContentDescriber = field(default_factory=ContentDescriber)

    def __call__(self, event: UndoDescriptionEvent) -> None:
        table = event.get_table()
        if not self.describer.supports(table):
            return
        description = self.describer.describe(table, event.get_data())
        logger.debug(f"Undo description for {table}: {description}")
        event.set_description(description)
