from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class UndoDescriptionEvent:
    """
    Raised when a deleted record is moved to the undo log.

    Listeners read the table and record, and may set a description.
    """

    table: str
    data: Dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None

    def get_table(self) -> str:
        return self.table

    def get_data(self) -> Dict[str, Any]:
        """A copy of the record; listeners cannot alter the logged data."""
        return dict(self.data)

    def set_description(self, description: Optional[str]) -> None:
        self.description = description
