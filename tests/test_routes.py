"""
Evening Coffee Backend - API Route Tests
==========================================

What:  End-to-end tests of every endpoint through the ASGI stack.
How:   HTTPX AsyncClient over ASGITransport (no server process), one app per
       test built by create_app() in conftest.py.

What we test:
    ✅ Contact and reservation intake, including their log records
    ✅ Fixed menu and store info payloads
    ✅ Health payload carries the app id
    ✅ Route prefixing in standalone vs embedded mode
    ✅ Static file serving and 404s
"""

import logging
import re

import pytest

APP_ID = "cafe-7"
INDEX_HTML = "<!DOCTYPE html><html><body><h1>Evening Coffee</h1></body></html>"

THANKS = "Thank you for your message! We'll get back to you soon."


class TestContact:
    """POST /contact."""

    @pytest.mark.asyncio
    async def test_contact_success(self, standalone_client):
        response = await standalone_client.post(
            "/contact", json={"name": "A", "email": "a@b.com", "message": "hi"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": THANKS}

    @pytest.mark.asyncio
    async def test_contact_logs_truncated_message(self, standalone_client, caplog):
        """Only the first 100 characters of the message reach the log."""
        caplog.set_level(logging.INFO, logger="tests.submissions")
        long_message = "x" * 250

        response = await standalone_client.post(
            "/contact",
            json={"name": "Ada", "email": "ada@example.com", "message": long_message},
        )

        assert response.status_code == 200
        records = [r for r in caplog.records if r.name == "tests.submissions"]
        assert len(records) == 1
        logged = records[0].submission
        assert logged["name"] == "Ada"
        assert logged["email"] == "ada@example.com"
        assert logged["message"] == "x" * 100 + "..."
        assert logged["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_contact_accepts_form_encoding(self, standalone_client):
        response = await standalone_client.post(
            "/contact", data={"name": "B", "email": "b@c.com", "message": "hello"}
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    @pytest.mark.asyncio
    async def test_contact_without_message_is_internal_error(self, standalone_client):
        """A missing message is reported like any other server fault."""
        response = await standalone_client.post(
            "/contact", json={"name": "A", "email": "a@b.com"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Failed to send message. Please try again.",
        }

    @pytest.mark.asyncio
    async def test_contact_with_empty_body_is_internal_error(self, standalone_client):
        response = await standalone_client.post("/contact")

        assert response.status_code == 500
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_contact_malformed_json_is_internal_error(self, standalone_client):
        """An undecodable body never reaches the contact handler."""
        response = await standalone_client.post(
            "/contact",
            content=b'{"message": "unterminated',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestReservation:
    """POST /reservation."""

    @pytest.mark.asyncio
    async def test_reservation_success(self, standalone_client):
        response = await standalone_client.post(
            "/reservation",
            json={"name": "Sam", "date": "2024-06-01", "time": "19:00", "guests": 4},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == (
            "Your table has been reserved! We'll call you to confirm the details."
        )
        assert re.fullmatch(r"EC\d+", body["reservationId"])

    @pytest.mark.asyncio
    async def test_reservation_ids_strictly_increase(self, standalone_client):
        ids = []
        for _ in range(5):
            response = await standalone_client.post("/reservation", json={"guests": 2})
            ids.append(int(response.json()["reservationId"][2:]))

        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_reservation_accepts_empty_body(self, standalone_client):
        response = await standalone_client.post("/reservation")

        assert response.status_code == 200
        assert response.json()["success"] is True

    @pytest.mark.asyncio
    async def test_reservation_logs_full_payload(self, standalone_client, caplog):
        caplog.set_level(logging.INFO, logger="tests.submissions")
        payload = {"name": "Sam", "phone": "555-0100", "notes": "window seat"}

        await standalone_client.post("/reservation", json=payload)

        records = [r for r in caplog.records if r.name == "tests.submissions"]
        assert len(records) == 1
        logged = records[0].submission
        for key, value in payload.items():
            assert logged[key] == value
        assert "timestamp" in logged

    @pytest.mark.asyncio
    async def test_reservation_accepts_array_body(self, standalone_client, caplog):
        """Array items are logged under their indexes, like any other fields."""
        caplog.set_level(logging.INFO, logger="tests.submissions")

        response = await standalone_client.post("/reservation", json=["window", "4"])

        assert response.status_code == 200
        assert re.fullmatch(r"EC\d+", response.json()["reservationId"])
        (record,) = [r for r in caplog.records if r.name == "tests.submissions"]
        assert record.submission["0"] == "window"
        assert record.submission["1"] == "4"
        assert "timestamp" in record.submission

    @pytest.mark.asyncio
    async def test_reservation_malformed_json_is_internal_error(self, standalone_client, caplog):
        caplog.set_level(logging.INFO, logger="tests.submissions")

        response = await standalone_client.post(
            "/reservation",
            content=b"{guests: 4}",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert not [r for r in caplog.records if r.name == "tests.submissions"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [b'"hello"', b"42", b"null", b"true"])
    async def test_reservation_scalar_json_is_internal_error(self, standalone_client, raw):
        """Only JSON objects and arrays are accepted as bodies."""
        response = await standalone_client.post(
            "/reservation",
            content=raw,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestCatalog:
    """GET /menu and GET /info."""

    @pytest.mark.asyncio
    async def test_menu_has_six_available_items(self, standalone_client):
        response = await standalone_client.get("/menu")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        menu = body["menu"]
        assert [item["id"] for item in menu] == [1, 2, 3, 4, 5, 6]
        assert all(item["available"] is True for item in menu)
        assert all(item["price"] > 0 for item in menu)

    @pytest.mark.asyncio
    async def test_menu_first_item_is_turkish_coffee(self, standalone_client):
        response = await standalone_client.get("/menu")

        first = response.json()["menu"][0]
        assert first == {
            "id": 1,
            "name": "Turkish Coffee",
            "description": "Traditional Turkish coffee served with Turkish delight",
            "price": 4.5,
            "category": "Traditional",
            "available": True,
        }

    @pytest.mark.asyncio
    async def test_info_lists_every_weekday(self, standalone_client):
        response = await standalone_client.get("/info")

        assert response.status_code == 200
        info = response.json()["info"]
        assert set(info["hours"]) == {
            "monday", "tuesday", "wednesday", "thursday",
            "friday", "saturday", "sunday",
        }
        assert info["name"] == "Evening Coffee"
        assert info["established"] == 2018
        assert set(info["social"]) == {"facebook", "instagram", "twitter", "linkedin"}


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_app_id(self, standalone_client):
        response = await standalone_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "appId": APP_ID,
            "name": "Evening Coffee Website",
            "version": "1.0.0",
        }

    @pytest.mark.asyncio
    async def test_health_sets_request_id_header(self, standalone_client):
        response = await standalone_client.get("/health", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestEmbeddedMode:
    """API routes move under /api/{app_id}; static routes stay put."""

    @pytest.mark.asyncio
    async def test_api_reachable_under_prefix(self, embedded_client):
        prefix = f"/api/{APP_ID}"

        assert (await embedded_client.get(f"{prefix}/menu")).status_code == 200
        assert (await embedded_client.get(f"{prefix}/info")).status_code == 200
        health = await embedded_client.get(f"{prefix}/health")
        assert health.json()["appId"] == APP_ID

        contact = await embedded_client.post(
            f"{prefix}/contact", json={"name": "A", "email": "a@b.com", "message": "hi"}
        )
        assert contact.json() == {"success": True, "message": THANKS}

    @pytest.mark.asyncio
    async def test_api_not_reachable_at_root(self, embedded_client):
        assert (await embedded_client.get("/menu")).status_code == 404
        assert (await embedded_client.get("/health")).status_code == 404
        assert (await embedded_client.post("/contact", json={"message": "hi"})).status_code == 404

    @pytest.mark.asyncio
    async def test_index_served_without_prefix(self, embedded_client):
        response = await embedded_client.get("/")

        assert response.status_code == 200
        assert response.text == INDEX_HTML

    @pytest.mark.asyncio
    async def test_standalone_has_no_prefixed_routes(self, standalone_client):
        response = await standalone_client.get(f"/api/{APP_ID}/menu")

        assert response.status_code == 404


class TestStaticFiles:

    @pytest.mark.asyncio
    async def test_index(self, standalone_client):
        response = await standalone_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text == INDEX_HTML

    @pytest.mark.asyncio
    async def test_asset_by_relative_path(self, standalone_client):
        response = await standalone_client.get("/css/site.css")

        assert response.status_code == 200
        assert "color" in response.text

    @pytest.mark.asyncio
    async def test_directory_serves_its_index(self, standalone_client):
        response = await standalone_client.get("/about")

        assert response.status_code == 200
        assert response.text == "<h1>About us</h1>"

    @pytest.mark.asyncio
    async def test_missing_file_is_404(self, standalone_client):
        response = await standalone_client.get("/nope.png")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_head_index(self, standalone_client):
        response = await standalone_client.head("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["content-length"] == str(len(INDEX_HTML))
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_head_asset(self, standalone_client):
        response = await standalone_client.head("/css/site.css")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_head_missing_file_is_404(self, standalone_client):
        response = await standalone_client.head("/nope.png")

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
    async def test_other_methods_on_unknown_path_are_404(self, standalone_client, method):
        response = await standalone_client.request(method, "/nowhere")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_missing_index_is_404(self, standalone_client, static_root):
        (static_root / "index.html").unlink()

        response = await standalone_client.get("/")

        assert response.status_code == 404
