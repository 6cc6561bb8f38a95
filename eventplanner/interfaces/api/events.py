"""Events API routes — list, read, create, update, delete."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from eventplanner.application.services.event_service import (
    create_event,
    delete_event,
    get_event,
    get_events,
    update_event,
)
from eventplanner.domain.repositories.event_repository import EventRepository
from eventplanner.domain.schemas.event import EventFilter, EventPayload, EventRead
from eventplanner.interfaces.api.deps import get_current_claims
from eventplanner.interfaces.deps import get_event_repository

router = APIRouter(
    prefix="/events",
    tags=["Events"],
    dependencies=[Depends(get_current_claims)],
)


def _serialize(event) -> dict:
    return EventRead.model_validate(event).to_response()


@router.get("")
def list_events(
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    repo: EventRepository = Depends(get_event_repository),
):
    filters = EventFilter(status=status_filter, page=page, page_size=page_size)
    result = get_events(repo, filters)
    result["items"] = [_serialize(e) for e in result["items"]]
    return result


@router.get("/{event_id}")
def read_event(event_id: str, repo: EventRepository = Depends(get_event_repository)):
    return {"event": _serialize(get_event(repo, event_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
def create(body: EventPayload, repo: EventRepository = Depends(get_event_repository)):
    event = create_event(repo, body)
    return {"message": "event created", "event": _serialize(event)}


@router.put("/{event_id}")
def update(
    event_id: str,
    body: EventPayload,
    repo: EventRepository = Depends(get_event_repository),
):
    event = update_event(repo, event_id, body)
    return {"message": "event updated", "event": _serialize(event)}


@router.delete("/{event_id}")
def delete(event_id: str, repo: EventRepository = Depends(get_event_repository)):
    deleted_id = delete_event(repo, event_id)
    return {"message": "event deleted", "id": deleted_id}
