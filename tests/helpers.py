"""Small helpers shared by the API tests."""

from datetime import datetime, timedelta, timezone


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def future_range(days_ahead: int = 30, nights: int = 3):
    """ISO strings for a naive-UTC range safely in the future."""
    start = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0) + timedelta(days=days_ahead)
    end = start + timedelta(days=nights)
    return start.isoformat(), end.isoformat()


def create_reservation(client, headers, apartment_id, days_ahead: int = 30, nights: int = 3):
    start, end = future_range(days_ahead, nights)
    response = client.post(
        "/api/reservations",
        json={"apartment_id": apartment_id, "start_time": start, "end_time": end},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
