"""
Reservation endpoints over a real (SQLite) database.
"""

from datetime import datetime, timezone

import pytz

from booking_api.core import clock

from helpers import create_reservation, future_range


def parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestReservationsApi:

    def test_create_and_read(self, client, user_headers, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        assert reservation["status"] == "pending"
        assert reservation["apartment"]["title"] == apartment["title"]

        response = client.get(f"/api/reservations/{reservation['id']}", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["id"] == reservation["id"]

    def test_overlap_rejected_back_to_back_allowed(self, client, user_headers, register, apartment):
        create_reservation(client, user_headers, apartment["id"], days_ahead=30, nights=3)
        other_headers, _ = register(email="other@example.com")

        start, end = future_range(days_ahead=31, nights=1)
        clash = client.post(
            "/api/reservations",
            json={"apartment_id": apartment["id"], "start_time": start, "end_time": end},
            headers=other_headers,
        )
        assert clash.status_code == 409
        assert clash.json()["error"]["code"] == "ConflictError"

        adjacent = create_reservation(client, other_headers, apartment["id"], days_ahead=33, nights=2)
        assert adjacent["status"] == "pending"

    def test_past_start_is_validation_error(self, client, user_headers, apartment):
        start, end = future_range(days_ahead=-5, nights=2)
        response = client.post(
            "/api/reservations",
            json={"apartment_id": apartment["id"], "start_time": start, "end_time": end},
            headers=user_headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"][0]["field"] == "start_time"

    def test_requires_authentication(self, client, apartment):
        start, end = future_range()
        response = client.post(
            "/api/reservations",
            json={"apartment_id": apartment["id"], "start_time": start, "end_time": end},
        )
        assert response.status_code == 401

    def test_non_admin_status_update_forbidden_admin_allowed(self, client, user_headers, admin_headers, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        url = f"/api/reservations/{reservation['id']}/status"

        forbidden = client.put(url, json={"status": "confirmed"}, headers=user_headers)
        assert forbidden.status_code == 403
        assert forbidden.json()["error"]["code"] == "AuthorizationError"

        allowed = client.put(url, json={"status": "confirmed"}, headers=admin_headers)
        assert allowed.status_code == 200

        read = client.get(f"/api/reservations/{reservation['id']}", headers=user_headers)
        assert read.json()["status"] == "confirmed"

    def test_illegal_transition_conflicts(self, client, user_headers, admin_headers, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        response = client.put(
            f"/api/reservations/{reservation['id']}/status",
            json={"status": "completed"},
            headers=admin_headers,
        )
        assert response.status_code == 409
        assert response.json()["error"]["details"]["current_status"] == "pending"

    def test_cancel_own_and_not_others(self, client, user_headers, register, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        other_headers, _ = register(email="mallory@example.com")

        url = f"/api/reservations/{reservation['id']}/cancel"
        assert client.put(url, headers=other_headers).status_code == 403
        assert client.get(f"/api/reservations/{reservation['id']}", headers=other_headers).status_code == 403

        cancelled = client.put(url, headers=user_headers)
        assert cancelled.status_code == 200
        assert cancelled.json()["status"] == "cancelled"

        assert client.put(url, headers=user_headers).status_code == 409

    def test_lists(self, client, user_headers, register, admin_headers, apartment):
        create_reservation(client, user_headers, apartment["id"], days_ahead=30)
        other_headers, _ = register(email="trent@example.com")
        create_reservation(client, other_headers, apartment["id"], days_ahead=40)

        mine = client.get("/api/reservations/my", headers=user_headers).json()
        assert mine["pagination"]["totalItems"] == 1

        assert client.get("/api/reservations", headers=user_headers).status_code == 403
        everything = client.get("/api/reservations", headers=admin_headers).json()
        assert everything["pagination"]["totalItems"] == 2

        pending = client.get("/api/reservations", params={"status": "confirmed"}, headers=admin_headers)
        assert pending.json()["pagination"]["totalItems"] == 0

    def test_admin_soft_delete(self, client, user_headers, admin_headers, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        url = f"/api/reservations/{reservation['id']}"

        assert client.delete(url, headers=user_headers).status_code == 403
        assert client.delete(url, headers=admin_headers).status_code == 200
        assert client.get(url, headers=admin_headers).status_code == 404

        # Soft-deleted bookings no longer block the dates
        again = create_reservation(client, user_headers, apartment["id"])
        assert again["id"] != reservation["id"]

    def test_activity_log_records_lifecycle(self, client, user_headers, admin_headers, apartment):
        reservation = create_reservation(client, user_headers, apartment["id"])
        client.put(
            f"/api/reservations/{reservation['id']}/status",
            json={"status": "confirmed"},
            headers=admin_headers,
        )

        response = client.get("/api/activity", headers=admin_headers)
        assert response.status_code == 200
        actions = {entry["action"] for entry in response.json()["items"]}
        assert {"reservation.created", "reservation.confirmed"} <= actions

        assert client.get("/api/activity", headers=user_headers).status_code == 403

    def test_times_returned_as_utc_with_offset(self, client, user_headers, apartment, monkeypatch):
        monkeypatch.setattr(clock, "tz", pytz.timezone("Europe/Belgrade"))

        response = client.post(
            "/api/reservations",
            json={
                "apartment_id": apartment["id"],
                "start_time": "2030-06-01T14:00:00",
                "end_time": "2030-06-03T10:00:00",
            },
            headers=user_headers,
        )
        assert response.status_code == 201, response.text
        body = response.json()
        assert parse_iso(body["start_time"]) == datetime(2030, 6, 1, 12, tzinfo=timezone.utc)
        assert parse_iso(body["end_time"]) == datetime(2030, 6, 3, 8, tzinfo=timezone.utc)

        fetched = client.get(f"/api/reservations/{body['id']}", headers=user_headers).json()
        assert parse_iso(fetched["start_time"]) == parse_iso(body["start_time"])

        # Echoing the returned instant back must hit the same booking
        availability = client.get(
            f"/api/apartments/{apartment['id']}/availability",
            params={"start_time": body["start_time"], "end_time": body["end_time"]},
        ).json()
        assert availability["available"] is False
        assert parse_iso(availability["start_time"]) == parse_iso(body["start_time"])
