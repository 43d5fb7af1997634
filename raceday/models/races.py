from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from ..services.db.fields import FieldSet
from ..services.status import EventStatus

RACE_FIELDS = FieldSet(
    entity="race",
    fields=("id", "meeting_id", "name", "number", "visible", "advertised_start_time"),
)


class RaceBase(SQLModel):
    meeting_id: int = Field(index=True)
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime


class Race(RaceBase, table=True):
    __tablename__ = "races"
    id: Optional[int] = Field(default=None, primary_key=True)


class RaceRead(RaceBase):
    id: int
    status: EventStatus


class ListRacesRequestFilter(BaseModel):
    """Filter for listing races."""

    meeting_ids: list[int] = PydanticField(
        default_factory=list, description="Only return races held at these meetings"
    )
    visible_races_only: bool = PydanticField(
        False, description="Only return races flagged as visible"
    )
    order_by: str = PydanticField(
        "",
        description="Comma separated sort fields, each optionally followed by 'desc', e.g. 'meeting_id, advertised_start_time desc'",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "meeting_ids": [1, 2],
                "visible_races_only": True,
                "order_by": "meeting_id, advertised_start_time desc",
            }
        },
    }


class ListRacesRequest(BaseModel):
    """Request model for listing races."""

    filter: ListRacesRequestFilter | None = None


class ListRacesResponse(BaseModel):
    """Response model for listing races."""

    races: list[RaceRead] = PydanticField(default_factory=list)
