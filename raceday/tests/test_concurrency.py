"""Tests for concurrent request handling."""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from raceday.models.races import RACE_FIELDS, ListRacesRequestFilter
from raceday.services.catalog import RACE_SCHEMA
from raceday.services.db.sql_helpers import assemble_query, build_order_by_clause


class TestConcurrentRequests:
    """Test suite for concurrent request handling."""

    def test_concurrent_list_requests(self, client):
        """Test multiple concurrent listing requests with different orderings."""
        orderings = ["id", "id desc", "name", "meeting_id desc, id", "number desc"]

        def make_request(order_by):
            resp = client.post("/api/v1/races/list", json={"filter": {"order_by": order_by}})
            return order_by, resp.status_code, [race["id"] for race in resp.json()["races"]]

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(make_request, orderings[i % 5]) for i in range(20)]
            results = [future.result() for future in as_completed(futures)]

        assert len(results) == 20
        by_order: dict[str, set[tuple[int, ...]]] = {}
        for order_by, status_code, ids in results:
            assert status_code == 200
            by_order.setdefault(order_by, set()).add(tuple(ids))

        assert by_order["id"] == {(1, 2, 3, 4, 5)}
        assert by_order["id desc"] == {(5, 4, 3, 2, 1)}
        assert all(len(variants) == 1 for variants in by_order.values())

    def test_mixed_concurrent_operations(self, client):
        """Test concurrent mix of listings, lookups and rejected requests."""
        def make_list():
            return client.post("/api/v1/events/list", json={}).status_code

        def make_get(event_id):
            return client.get(f"/api/v1/events/{event_id}").status_code

        def make_invalid():
            return client.post(
                "/api/v1/events/list", json={"filter": {"order_by": "junk"}}
            ).status_code

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = []
            for i in range(4):
                futures.append(executor.submit(make_list))
                futures.append(executor.submit(make_get, i + 1))
                futures.append(executor.submit(make_invalid))

            results = [future.result() for future in as_completed(futures)]

        assert len(results) == 12
        assert sorted(results) == [200] * 7 + [400] * 4 + [404]


def test_compilation_is_thread_safe():
    criteria = ListRacesRequestFilter(meeting_ids=[1, 2, 3], visible_races_only=True, order_by="name, id desc")
    expected = assemble_query("SELECT id FROM races", RACE_SCHEMA, criteria)
    errors = []

    def compile_many():
        for _ in range(200):
            if assemble_query("SELECT id FROM races", RACE_SCHEMA, criteria) != expected:
                errors.append("mismatch")
            build_order_by_clause(RACE_FIELDS, "meeting_id desc")

    threads = [threading.Thread(target=compile_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
