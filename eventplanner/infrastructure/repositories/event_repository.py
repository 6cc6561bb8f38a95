"""
SQLAlchemy Implementation of Event Repository.
"""

from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.dialects import postgresql, sqlite

from eventplanner.core.exceptions import EventImportException
from eventplanner.domain.models.event import Event
from eventplanner.domain.repositories.event_repository import EventRepository
from eventplanner.domain.schemas.event import EventFilter
from eventplanner.infrastructure.repositories.base_repository import SQLAlchemyRepository

# Dialects with a native INSERT ... ON CONFLICT DO NOTHING
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLAlchemyEventRepository(SQLAlchemyRepository[Event], EventRepository):
    """Event repository implementation using SQLAlchemy."""

    def count(self) -> int:
        return self.db.query(func.count(Event.id)).scalar() or 0

    def get_with_filters(self, filters: EventFilter) -> Dict[str, Any]:
        """Get events with filtering and pagination, newest first."""
        query = self.db.query(Event)

        if filters.status:
            query = query.filter(Event.status == filters.status)

        total = query.count()
        offset = (filters.page - 1) * filters.page_size
        events = (
            query.order_by(Event.created_at.desc(), Event.id.asc())
            .offset(offset)
            .limit(filters.page_size)
            .all()
        )

        return {
            "items": events,
            "total": total,
            "page": filters.page,
            "page_size": filters.page_size,
            "total_pages": (total + filters.page_size - 1) // filters.page_size,
        }

    def update_by_id(self, event_id: str, values: Dict[str, Any]) -> Optional[Event]:
        """Lock the row, merge the new values, commit. None if absent."""
        event = (
            self.db.query(Event)
            .filter(Event.id == event_id)
            .with_for_update()
            .first()
        )
        if event is None:
            self.db.rollback()
            return None

        if not values.get("created_at"):
            values = {**values, "created_at": event.created_at}

        for field, value in values.items():
            if field != "id" and hasattr(event, field):
                setattr(event, field, value)

        self.commit()
        self.db.refresh(event)
        return event

    def insert_ignore_duplicate(self, values: Dict[str, Any]) -> bool:
        dialect = self.db.get_bind().dialect.name
        insert = UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise EventImportException(f"importing is not supported on {dialect}")

        stmt = insert(Event).values(**values).on_conflict_do_nothing(index_elements=["id"])
        try:
            result = self.db.execute(stmt)
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.commit()
        return result.rowcount > 0
