"""
Event Repository Interface.
Defines specific data access operations for Events.
"""

from typing import Any, Dict, Optional

from eventplanner.domain.repositories.base import BaseRepository
from eventplanner.domain.models.event import Event
from eventplanner.domain.schemas.event import EventFilter


class EventRepository(BaseRepository[Event]):
    """Interface for Event-specific operations."""

    def get_with_filters(self, filters: EventFilter) -> Dict[str, Any]:
        """Get events with filtering and pagination."""
        ...

    def update_by_id(self, event_id: str, values: Dict[str, Any]) -> Optional[Event]:
        """Overwrite the event's columns in a single locked transaction.

        An empty ``created_at`` keeps the stored value. Returns None when no
        row has that id.
        """
        ...

    def insert_ignore_duplicate(self, values: Dict[str, Any]) -> bool:
        """Insert unless the id already exists. Returns True if a row was added."""
        ...

    def count(self) -> int:
        """Total number of events."""
        ...
