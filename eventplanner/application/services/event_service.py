"""Event service — business rules for creating, changing and removing events."""

import time
import uuid
from datetime import datetime
from typing import Any, Dict

import pytz
import structlog
from sqlalchemy.exc import SQLAlchemyError

from eventplanner.config import get_settings
from eventplanner.core.exceptions import EntityNotFoundException, StoreException
from eventplanner.domain.models.event import Event
from eventplanner.domain.repositories.event_repository import EventRepository
from eventplanner.domain.schemas.event import EventFilter, EventPayload

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)


def now_timestamp() -> str:
    """Current time in the configured timezone, RFC 3339 with seconds."""
    return datetime.now(tz).isoformat(timespec="seconds")


def generate_event_id() -> str:
    return f"ev_{time.time_ns()}_{uuid.uuid4().hex[:6]}"


def compute_balance(total_cost: int, paid: int) -> int:
    return total_cost - paid


def _column_values(payload: EventPayload) -> Dict[str, Any]:
    values = payload.model_dump()
    values["balance"] = compute_balance(payload.total_cost, payload.paid)
    return values


def get_events(repo: EventRepository, filters: EventFilter) -> Dict[str, Any]:
    return repo.get_with_filters(filters)


def get_event(repo: EventRepository, event_id: str) -> Event:
    event = repo.get_by_id(event_id)
    if event is None:
        raise EntityNotFoundException("event not found")
    return event


def create_event(repo: EventRepository, payload: EventPayload) -> Event:
    values = _column_values(payload)
    if not values["id"]:
        values["id"] = generate_event_id()
    if not values["created_at"]:
        values["created_at"] = now_timestamp()

    try:
        event = repo.create(values)
    except SQLAlchemyError:
        logger.exception("Insert error", event_id=values["id"])
        raise StoreException("failed to save event")

    logger.info("Event created", event_id=event.id, balance=event.balance)
    return event


def update_event(repo: EventRepository, event_id: str, payload: EventPayload) -> Event:
    """Replace the event stored under ``event_id``.

    The path id is the only target; an id in the payload never moves or
    renames the row. A missing ``createdAt`` keeps the stored one.
    """
    values = _column_values(payload)
    values["id"] = event_id

    try:
        event = repo.update_by_id(event_id, values)
    except SQLAlchemyError:
        logger.exception("Update error", event_id=event_id)
        raise StoreException("failed to update event")

    if event is None:
        raise EntityNotFoundException("event not found")

    logger.info("Event updated", event_id=event.id, balance=event.balance)
    return event


def delete_event(repo: EventRepository, event_id: str) -> str:
    try:
        deleted = repo.delete_by_id(event_id)
    except SQLAlchemyError:
        logger.exception("Delete error", event_id=event_id)
        raise StoreException("failed to delete event")

    if deleted == 0:
        raise EntityNotFoundException("event not found")

    logger.info("Event deleted", event_id=event_id)
    return event_id
