"""Tests for the race catalog endpoints."""

import inspect

import pytest
from fastapi import status

from raceday.routes.v1 import events as events_routes
from raceday.routes.v1 import races as races_routes


class TestListRaces:
    """Test suite for POST /api/v1/races/list."""

    def test_list_without_filter(self, client):
        resp = client.post("/api/v1/races/list", json={})
        assert resp.status_code == status.HTTP_200_OK
        races = resp.json()["races"]
        assert [race["id"] for race in races] == [5, 3, 2, 1, 4]
        assert set(races[0]) == {
            "id", "meeting_id", "name", "number", "visible", "advertised_start_time", "status",
        }

    def test_list_visible_only(self, client):
        resp = client.post("/api/v1/races/list", json={"filter": {"visible_races_only": True}})
        assert resp.status_code == status.HTTP_200_OK
        assert [race["id"] for race in resp.json()["races"]] == [3, 1, 4]

    def test_list_by_meeting_ordered(self, client):
        resp = client.post(
            "/api/v1/races/list",
            json={"filter": {"meeting_ids": [7, 8, 9], "order_by": "name, id desc"}},
        )
        assert resp.status_code == status.HTTP_200_OK
        names = [race["name"] for race in resp.json()["races"]]
        assert names == ["Caulfield Race 3", "Ellerslie Race 5", "Flemington Race 1", "Randwick Race 2"]

    def test_statuses(self, client):
        resp = client.post("/api/v1/races/list", json={"filter": {"order_by": "id"}})
        statuses = [race["status"] for race in resp.json()["races"]]
        assert statuses == ["CLOSED", "OPEN", "OPEN", "CLOSED", "OPEN"]

    @pytest.mark.parametrize("order_by", ["some-order-junk", "Name, Id desc", "id asc", "id desc now"])
    def test_invalid_order_by(self, client, order_by):
        resp = client.post("/api/v1/races/list", json={"filter": {"order_by": order_by}})
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        body = resp.json()
        assert body["error"] is True
        assert body["message"] == "invalid order by field"

    def test_invalid_filter_type(self, client):
        resp = client.post("/api/v1/races/list", json={"filter": {"meeting_ids": "seven"}})
        assert resp.status_code == 422


class TestGetRace:
    """Test suite for GET /api/v1/races/{id}."""

    def test_get_race(self, client):
        resp = client.get("/api/v1/races/4")
        assert resp.status_code == status.HTTP_200_OK
        body = resp.json()
        assert body["id"] == 4
        assert body["name"] == "Ascot Race 4"
        assert body["status"] == "CLOSED"

    def test_get_missing_race(self, client):
        resp = client.get("/api/v1/races/404")
        assert resp.status_code == status.HTTP_404_NOT_FOUND
        body = resp.json()
        assert body["error"] is True
        assert body["message"] == "race not found"
        assert body["details"] == {"id": 404}

    def test_get_race_rejects_non_integer_id(self, client):
        resp = client.get("/api/v1/races/abc")
        assert resp.status_code == 422


@pytest.mark.parametrize(
    "handler",
    [races_routes.list_races, races_routes.get_race, events_routes.list_events, events_routes.get_event],
)
def test_catalog_handlers_run_in_threadpool(handler):
    assert not inspect.iscoroutinefunction(handler)
