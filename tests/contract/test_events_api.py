"""Contract tests for the Datastar event endpoints."""

import pytest
from fastapi.testclient import TestClient


# API version prefix
API_PREFIX = "/api/v1"


pytestmark = pytest.mark.contract


class TestRenderEventEndpoint:
    """Contract tests for POST /api/v1/events/{event_name}."""

    def test_merge_fragments(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/datastar-merge-fragments",
            json={"payload": "<p>a</p>\n<p>b</p>", "options": {"merge_mode": "bogus"}},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/event-stream"
        assert response.headers["cache-control"] == "no-cache"
        assert response.text == (
            "event: datastar-merge-fragments\n"
            "data: mergeMode morph\n"
            "data: fragments <p>a</p>\n"
            "data: fragments <p>b</p>\n"
            "\n"
        )

    def test_merge_signals_with_structured_payload(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/DATASTAR_MERGE_SIGNALS",
            json={"payload": {"count": 1}, "options": {"only_if_missing": True}},
        )

        assert response.status_code == 200
        assert "data: onlyIfMissing true\ndata: signals {\"count\":1}\n" in response.text

    def test_remove_signals_with_list_payload(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/datastar-remove-signals",
            json={"payload": ["a.b", "c.d"]},
        )

        assert response.status_code == 200
        assert response.text.endswith("data: paths a.b\ndata: paths c.d\n\n")

    def test_unknown_event(self, client: TestClient):
        response = client.post(f"{API_PREFIX}/events/datastar-explode", json={"payload": "x"})

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "UNKNOWN_EVENT"

    def test_empty_payload(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/datastar-execute-script",
            json={"payload": "", "options": {"auto_remove": True}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "EMPTY_PAYLOAD"
        assert "timestamp" in data


class TestStreamEndpoint:
    """Contract tests for POST /api/v1/events/stream."""

    def test_frames_are_streamed_in_order(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/stream",
            json={
                "events": [
                    {"event": "datastar-merge-fragments", "payload": "<p id=\"x\">1</p>"},
                    {"event": "datastar-remove-fragments", "payload": None},
                    {"event": "datastar-merge-signals", "payload": {"n": 2}},
                    {"event": "datastar-execute-script", "payload": "done()"},
                ]
            },
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/event-stream"
        events = [
            line[len("event: "):]
            for line in response.text.split("\n")
            if line.startswith("event: ")
        ]
        # 空的 remove-fragments 不會輸出
        assert events == [
            "datastar-merge-fragments",
            "datastar-merge-signals",
            "datastar-execute-script",
        ]

    def test_unknown_event_rejects_batch(self, client: TestClient):
        response = client.post(
            f"{API_PREFIX}/events/stream",
            json={"events": [
                {"event": "datastar-merge-fragments", "payload": "<p/>"},
                {"event": "nope", "payload": "x"},
            ]},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "UNKNOWN_EVENT"

    def test_empty_batch_is_invalid_request(self, client: TestClient):
        response = client.post(f"{API_PREFIX}/events/stream", json={"events": []})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "INVALID_REQUEST"


class TestHeadersEndpoint:
    """Contract tests for GET /api/v1/events/headers."""

    def test_headers(self, client: TestClient, sse_header_names):
        response = client.get(f"{API_PREFIX}/events/headers")

        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data] == sse_header_names
        assert data[0] == {"name": "Content-Type", "value": "text/event-stream"}
