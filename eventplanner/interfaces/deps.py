"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from eventplanner.domain.models.event import Event
from eventplanner.domain.models.user import User
from eventplanner.domain.repositories.event_repository import EventRepository
from eventplanner.domain.repositories.user_repository import UserRepository
from eventplanner.infrastructure.database import get_db
from eventplanner.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from eventplanner.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    """Get event repository instance."""
    return SQLAlchemyEventRepository(db, Event)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
