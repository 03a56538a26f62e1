"""
Tests for the HTTP transport.
"""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from seabird_radio import config
from seabird_radio.errors import UpstreamError
from seabird_radio.main import create_app


@pytest.fixture
def client(router):
    return TestClient(create_app(router))


COMMAND = {
    "command": "pota",
    "arg": "20m ft8",
    "source": {"channelId": "#radio", "user": {"displayName": "bob"}},
}


class TestCommandEndpoint:
    """Test command events posted over HTTP."""

    def test_post_command(self, client):
        resp = client.post("/api/commands", json=COMMAND)

        assert resp.status_code == 200
        replies = resp.json()["replies"]
        assert len(replies) == 1
        assert replies[0]["channelId"] == "#radio"
        assert replies[0]["text"].startswith("bob: [time:")
        assert "14.074MHz FT8" in replies[0]["text"]

    def test_post_user_error(self, client):
        resp = client.post("/api/commands", json=dict(COMMAND, arg="20m 30m 40m"))

        assert resp.status_code == 200
        assert resp.json()["replies"][0]["text"].startswith("bob: invalid pota command")

    def test_api_key_required(self, client, monkeypatch):
        monkeypatch.setattr(config, "API_KEY", "secret")

        assert client.post("/api/commands", json=COMMAND).status_code == 401
        resp = client.post("/api/commands", json=COMMAND, headers={"x-api-key": "secret"})
        assert resp.status_code == 200

    def test_list_commands(self, client):
        resp = client.get("/api/commands")

        names = [c["name"] for c in resp.json()["commands"]]
        assert names == ["bands", "pota"]
        assert "shortHelp" in resp.json()["commands"][0]

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"x-request-id": "abc123"})

        assert resp.json() == {"ok": True}
        assert resp.headers["x-request-id"] == "abc123"

    def test_command_logged_without_body(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="seabird_radio"):
            client.post("/api/commands", json=COMMAND, headers={"x-request-id": "req-7"})

        events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "seabird_radio"]
        http = next(e for e in events if e["event"] == "http_request")
        assert http["command"] == "pota"
        assert http["channel_id"] == "#radio"
        assert http["request_id"] == "req-7"
        assert "body_preview" not in http
        assert "headers" not in http
        received = next(e for e in events if e["event"] == "command_received")
        assert received["request_id"] == "req-7"


class TestRestEndpoints:
    """Test the REST views of both lookups."""

    def test_bands(self, client):
        resp = client.get("/api/bands")

        assert resp.status_code == 200
        body = resp.json()
        assert body["record"]["bands"]["30m-20m"] == {"day": "Good", "night": "Fair"}
        assert body["lines"][0] == "updated 18 Oct 2026 1200 GMT"

    def test_bands_upstream_error(self, client, router):
        router.solar_source.side_effect = UpstreamError("down")

        assert client.get("/api/bands").status_code == 502

    def test_pota_default_mode(self, client):
        resp = client.get("/api/pota/20m")

        assert resp.status_code == 200
        record = resp.json()["record"]
        assert record["activator"] == "K1SSB"
        assert record["mode"] == "SSB"
        assert record["frequency"] == "14.200"
        assert record["spot_time"] == "2026-10-18T11:58:00Z"

    def test_pota_not_found(self, client):
        resp = client.get("/api/pota/40m", params={"mode": "ft8"})

        assert resp.status_code == 404
        assert resp.json()["detail"] == "no activations found on 40m over FT8"

    def test_pota_bad_band(self, client):
        assert client.get("/api/pota/6m").status_code == 400
