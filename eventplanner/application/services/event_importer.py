"""Bulk event importer — loads an exported JSON document into the events table.

Runs offline (see ``scripts/import_events.py``); the HTTP service never calls
it. The document looks like::

    {"events": {"<key>": {"eventName": ..., "totalCost": ...}, "users": {...}}}

Rows are copied verbatim, balance included, and ids that already exist are
skipped rather than overwritten.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple, Union

import structlog
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from eventplanner.core.exceptions import EventImportException
from eventplanner.domain.repositories.event_repository import EventRepository
from eventplanner.domain.schemas.event import EventPayload

logger = structlog.get_logger(__name__)

# Keys that live next to the events but are not events
NON_EVENT_KEYS = {"users", "auditLogs"}


class ImportReport(BaseModel):
    total: int = 0  # valid events found in the document
    inserted: int = 0
    skipped: int = 0  # already in the database
    failed: int = 0


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise EventImportException(f"Cannot read {path}: {e}") from e


def extract_events(document: Dict[str, Any]) -> Iterator[Tuple[str, EventPayload]]:
    """Yield ``(key, event)`` for every entry that looks like an event."""
    section = document.get("events") if isinstance(document, dict) else None
    if not isinstance(section, dict):
        raise EventImportException("No 'events' section found in JSON")

    logger.info("Analyzing events section", items=len(section))

    for key, value in section.items():
        if key in NON_EVENT_KEYS:
            logger.info("Skipping non-event key", key=key)
            continue

        if not isinstance(value, dict):
            logger.warning("Entry is not an object", key=key)
            continue

        try:
            event = EventPayload.model_validate(value)
        except ValidationError as e:
            logger.warning("Failed to parse entry as event", key=key, errors=e.error_count())
            continue

        if not event.event_name and event.total_cost == 0:
            logger.info("Skipping non-event entry", key=key)
            continue

        yield key, event


def import_events(repo: EventRepository, document: Dict[str, Any]) -> ImportReport:
    report = ImportReport()

    for key, event in extract_events(document):
        report.total += 1
        values = event.model_dump()
        # Entries exported without an id are keyed by it
        values["id"] = event.id or key

        try:
            inserted = repo.insert_ignore_duplicate(values)
        except SQLAlchemyError:
            logger.exception("Insert error", event_id=values["id"])
            report.failed += 1
            continue

        if inserted:
            report.inserted += 1
            logger.info(
                "Inserted event",
                event_id=values["id"],
                customer=event.customer_name or "(no name)",
                event_name=event.event_name,
                date_time=event.date_time.strip(),
            )
        else:
            report.skipped += 1
            logger.info("Skipped duplicate", event_id=values["id"])

    logger.info("Import complete", **report.model_dump())
    return report
