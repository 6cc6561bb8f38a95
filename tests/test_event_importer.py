"""
Tests for the offline bulk importer
"""

import json

import pytest
from sqlalchemy.exc import OperationalError

from eventplanner.application.services.event_importer import (
    extract_events,
    import_events,
    load_document,
)
from eventplanner.core.exceptions import EventImportException
from eventplanner.domain.models.event import Event
from eventplanner.infrastructure.repositories.event_repository import SQLAlchemyEventRepository

DOCUMENT = {
    "events": {
        "-Nx1": {
            "id": "ev_100",
            "eventName": "Engagement",
            "customerName": "Anil",
            "paid": 200,
            "balance": 300,
            "totalCost": 500,
            "dateTime": " 2025-04-02 ",
            "gcalId": "abc123",
        },
        "-Nx2": {"eventName": "Birthday", "totalCost": 0, "paid": 0},
        "-Nx3": {"totalCost": 0, "status": "draft"},
        "-Nx4": {"eventName": "Broken", "paid": "not a number"},
        "-Nx5": "not an object",
        "users": {"u1": {"eventName": "should never be read"}},
        "auditLogs": {"a1": {"totalCost": 10}},
    }
}


def test_extract_skips_non_events():
    keys = [key for key, _ in extract_events(DOCUMENT)]
    assert keys == ["-Nx1", "-Nx2"]


def test_missing_events_section():
    with pytest.raises(EventImportException):
        list(extract_events({"users": {}}))


def test_import_copies_rows_verbatim(event_repo, db_session):
    report = import_events(event_repo, DOCUMENT)

    assert report.model_dump() == {"total": 2, "inserted": 2, "skipped": 0, "failed": 0}
    engagement = db_session.get(Event, "ev_100")
    assert engagement.balance == 300
    assert engagement.date_time == " 2025-04-02 "
    # No id in the entry: the document key is used
    assert db_session.get(Event, "-Nx2").event_name == "Birthday"


def test_import_twice_skips_existing(event_repo):
    import_events(event_repo, DOCUMENT)
    report = import_events(event_repo, DOCUMENT)

    assert report.inserted == 0
    assert report.skipped == 2
    assert event_repo.count() == 2


def test_import_does_not_overwrite(event_repo, db_session):
    event_repo.create({"id": "ev_100", "event_name": "Edited later", "total_cost": 1, "paid": 1, "balance": 0})

    report = import_events(event_repo, DOCUMENT)

    assert report.skipped == 1
    db_session.expire_all()
    assert db_session.get(Event, "ev_100").event_name == "Edited later"


def test_load_document(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    assert load_document(path) == DOCUMENT

    with pytest.raises(EventImportException):
        load_document(tmp_path / "missing.json")


class FlakyEvents:
    """Refuses to store one id, accepts the rest."""

    def __init__(self, bad_id):
        self.bad_id = bad_id
        self.stored = []

    def insert_ignore_duplicate(self, values):
        if values["id"] == self.bad_id:
            raise OperationalError("INSERT INTO events ...", {}, Exception("disk full"))
        self.stored.append(values["id"])
        return True


def test_import_counts_failed_inserts_and_continues():
    repo = FlakyEvents(bad_id="ev_100")

    report = import_events(repo, DOCUMENT)

    assert report.model_dump() == {"total": 2, "inserted": 1, "skipped": 0, "failed": 1}
    assert repo.stored == ["-Nx2"]


class FakeBind:
    class dialect:
        name = "mssql"


class FakeSession:
    def get_bind(self):
        return FakeBind()


def test_import_on_unsupported_database():
    repo = SQLAlchemyEventRepository(FakeSession(), Event)

    with pytest.raises(EventImportException):
        import_events(repo, DOCUMENT)
