"""
Global pytest configuration and fixtures for the Event Planner tests
"""

import os

# Required settings must exist before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["TIMEZONE"] = "UTC"

import pytest
from fastapi.testclient import TestClient

from eventplanner.application.services.auth_service import create_access_token, create_user
from eventplanner.domain.models.event import Event
from eventplanner.domain.models.user import User
from eventplanner.infrastructure.database import Database
from eventplanner.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from eventplanner.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from eventplanner.main import app


@pytest.fixture
def client():
    """A running app with its own empty in-memory database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_db(client):
    """The database the running app uses."""
    return client.app.state.db


@pytest.fixture
def database():
    """A standalone in-memory database, no app involved."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def event_repo(db_session):
    return SQLAlchemyEventRepository(db_session, Event)


@pytest.fixture
def make_user(app_db):
    """Create users in the app's database."""

    def _make_user(email="staff@example.com", password="s3cret", role="Staff", name="Sam Staff"):
        with app_db.session() as session:
            repo = SQLAlchemyUserRepository(session, User)
            return create_user(repo, name=name, email=email, password=password, role=role)

    return _make_user


@pytest.fixture
def staff_user(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(email="admin@example.com", password="adm1n", role="Admin", name="Ada Admin")


@pytest.fixture
def auth_headers(staff_user):
    return {"Authorization": create_access_token(staff_user)}


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": create_access_token(admin_user)}


@pytest.fixture
def count_events(app_db):
    def _count():
        with app_db.session() as session:
            return session.query(Event).count()

    return _count


@pytest.fixture
def stored_event(app_db):
    """Read an event row straight from the app's database."""

    def _stored(event_id):
        with app_db.session() as session:
            return session.get(Event, event_id)

    return _stored
