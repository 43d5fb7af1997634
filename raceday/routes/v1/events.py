"""Sporting event catalog endpoints for the V1 API."""

from fastapi import APIRouter, Depends

from ...config.settings import get_settings
from ...models.events import EventRead, ListEventsRequest, ListEventsResponse
from ...services.catalog import events_repo

router = APIRouter(tags=["events"])


@router.post("/list", response_model=ListEventsResponse)
def list_events(request: ListEventsRequest, settings=Depends(get_settings)):
    """
    List sporting events, optionally filtered and ordered.

    Args: \n
        request: Optional filter with a visible-only flag and an order by
            expression such as "name, id desc"
        settings: Application settings (injected)

    Returns: \n
        ListEventsResponse with the matching events, each carrying an OPEN or
        CLOSED status derived from its advertised start time

    Raises: \n
        InvalidOrderByField: If the order by expression is malformed or names an unknown field
        DatabaseError: If the query fails
    """
    events = events_repo.list(request.filter, settings.database_path)
    return ListEventsResponse(events=events)


@router.get("/{event_id}", response_model=EventRead)
def get_event(event_id: int, settings=Depends(get_settings)):
    """Get a single sporting event by id."""
    return events_repo.get(event_id, settings.database_path)
