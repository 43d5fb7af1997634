from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from ..services.db.fields import FieldSet
from ..services.status import EventStatus

EVENT_FIELDS = FieldSet(
    entity="event",
    fields=("id", "name", "visible", "advertised_start_time"),
)


class SportEventBase(SQLModel):
    name: str
    visible: bool
    advertised_start_time: datetime


class SportEvent(SportEventBase, table=True):
    __tablename__ = "events"
    id: Optional[int] = Field(default=None, primary_key=True)


class EventRead(SportEventBase):
    id: int
    status: EventStatus


class ListEventsRequestFilter(BaseModel):
    """Filter for listing sporting events."""

    visible_events_only: bool = PydanticField(
        False, description="Only return events flagged as visible"
    )
    order_by: str = PydanticField(
        "",
        description="Comma separated sort fields, each optionally followed by 'desc', e.g. 'name, id desc'",
    )

    model_config = {"frozen": True}


class ListEventsRequest(BaseModel):
    """Request model for listing sporting events."""

    filter: ListEventsRequestFilter | None = None


class ListEventsResponse(BaseModel):
    """Response model for listing sporting events."""

    events: list[EventRead] = PydanticField(default_factory=list)
