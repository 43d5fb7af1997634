"""Base SQL statements for the catalog tables."""

RACES_LIST = "list_races"
RACES_GET = "get_race"
EVENTS_LIST = "list_events"
EVENTS_GET = "get_event"

_RACE_COLUMNS = "id, meeting_id, name, number, visible, advertised_start_time"
_EVENT_COLUMNS = "id, name, visible, advertised_start_time"


def get_queries() -> dict[str, str]:
    return {
        RACES_LIST: f"SELECT {_RACE_COLUMNS} FROM races",
        RACES_GET: f"SELECT {_RACE_COLUMNS} FROM races WHERE id = ?",
        EVENTS_LIST: f"SELECT {_EVENT_COLUMNS} FROM events",
        EVENTS_GET: f"SELECT {_EVENT_COLUMNS} FROM events WHERE id = ?",
    }
