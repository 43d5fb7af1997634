"""
Read access to the race and sporting event catalogs.

Both catalogs share one repository implementation; they differ only in their
``EntitySchema``, base queries and the model each row is mapped to.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from ..errors.exceptions import EntityNotFound
from ..models.events import EVENT_FIELDS, EventRead
from ..models.races import RACE_FIELDS, RaceRead
from .db import connector as db_connector
from .db.queries import EVENTS_GET, EVENTS_LIST, RACES_GET, RACES_LIST, get_queries
from .db.sql_helpers import (
    EntitySchema,
    FlagConstraint,
    MembershipConstraint,
    assemble_query,
)
from .status import derive_status

T = TypeVar("T", bound=BaseModel)

RACE_SCHEMA = EntitySchema(
    name="race",
    field_set=RACE_FIELDS,
    constraints=(
        MembershipConstraint(attr="meeting_ids", column="meeting_id"),
        FlagConstraint(attr="visible_races_only", column="visible"),
    ),
)

EVENT_SCHEMA = EntitySchema(
    name="event",
    field_set=EVENT_FIELDS,
    constraints=(FlagConstraint(attr="visible_events_only", column="visible"),),
)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


class CatalogRepository(Generic[T]):
    """Lists and looks up one kind of catalog entity."""

    def __init__(self, schema: EntitySchema, list_query: str, get_query: str, read_model: type[T]):
        self.schema = schema
        self.list_query = list_query
        self.get_query = get_query
        self.read_model = read_model

    def list(self, criteria: Any | None, database_path: str) -> list[T]:
        """Return the entities matching ``criteria`` in the requested order."""
        compiled = assemble_query(self.list_query, self.schema, criteria)
        rows = db_connector.query(compiled.query, database_path, params=compiled.args)
        return self.scan(rows)

    def get(self, entity_id: int, database_path: str) -> T:
        """
        Return a single entity by id.

        Raises:
            EntityNotFound: If no row has the given id
        """
        rows = db_connector.query(self.get_query, database_path, params=[entity_id])
        items = self.scan(rows)
        if not items:
            raise EntityNotFound(
                message=f"{self.schema.name} not found", details={"id": entity_id}
            )
        return items[0]

    def scan(self, rows: list[dict], now: datetime | None = None) -> list[T]:
        now = now or datetime.now(UTC)
        items = []
        for row in rows:
            advertised_start_time = _parse_timestamp(row["advertised_start_time"])
            items.append(
                self.read_model(
                    **{
                        **row,
                        "advertised_start_time": advertised_start_time,
                        "status": derive_status(advertised_start_time, now),
                    }
                )
            )
        return items


_queries = get_queries()

races_repo: CatalogRepository[RaceRead] = CatalogRepository(
    RACE_SCHEMA, _queries[RACES_LIST], _queries[RACES_GET], RaceRead
)
events_repo: CatalogRepository[EventRead] = CatalogRepository(
    EVENT_SCHEMA, _queries[EVENTS_LIST], _queries[EVENTS_GET], EventRead
)
