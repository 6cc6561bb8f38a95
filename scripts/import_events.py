"""Import events from an exported JSON document.

Usage: python scripts/import_events.py [events.json]

Existing ids are left untouched; run it as often as needed.
"""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import SQLAlchemyError

from eventplanner.config import get_settings
from eventplanner.core.exceptions import EventImportException
from eventplanner.core.logging import configure_logging
from eventplanner.application.services.event_importer import import_events, load_document
from eventplanner.domain.models.event import Event
from eventplanner.infrastructure.database import Database
from eventplanner.infrastructure.repositories.event_repository import SQLAlchemyEventRepository


def main(path: str = "events.json") -> int:
    configure_logging()
    try:
        document = load_document(path)
    except EventImportException as e:
        print(f"Import failed: {e}")
        return 1

    database = Database(get_settings().DATABASE_URL)
    try:
        database.ping()
        database.create_all()
    except SQLAlchemyError as e:
        print(f"Cannot connect to the database: {e}")
        database.dispose()
        return 1

    db = database.session()
    try:
        report = import_events(SQLAlchemyEventRepository(db, Event), document)
    except EventImportException as e:
        print(f"Import failed: {e}")
        return 1
    finally:
        db.close()
        database.dispose()

    print("Import complete!")
    print(f"   Inserted: {report.inserted} events")
    print(f"   Skipped: {report.skipped} events (already in database)")
    print(f"   Failed: {report.failed} events")
    print(f"   Total valid events in JSON: {report.total}")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
