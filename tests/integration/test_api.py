from datetime import date
from urllib.parse import unquote

import httpx
import pytest
import pytest_asyncio

from campaign_calendar.api.main import create_app
from campaign_calendar.constants import MSG_EVENT_ASSIGNEE_UNKNOWN

HEADER = "X-Simulated-Address"
DESIGNER = {HEADER: "10.0.0.1"}
DEPT_A = {HEADER: "10.0.0.2"}
GUEST = {HEADER: "10.0.0.9"}


@pytest.fixture
def app(container):
    return create_app(container)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


async def _seed_directory(container):
    await container.directory.create_user("User One", "u1@x.com", user_id="u1")
    await container.directory.create_department("Department A", department_id="dept-A")
    await container.directory.create_department("Department B", department_id="dept-B")


def _event_payload(**overrides):
    payload = {
        "title": "Launch",
        "date": date(2025, 6, 14).isoformat(),
        "urgency": "High",
        "department_id": "dept-A",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_access_profile_reflects_caller_address(client, container):
    await _seed_directory(container)

    designer = (await client.get("/api/access/me", headers=DESIGNER)).json()
    department = (await client.get("/api/access/me", headers=DEPT_A)).json()
    guest = (await client.get("/api/access/me", headers=GUEST)).json()

    assert designer["role"] == "designer" and designer["read_only"] is False
    assert department == {
        "address": "10.0.0.2",
        "role": "department_user",
        "department_id": "dept-A",
        "department_name": "Department A",
        "read_only": True,
    }
    assert guest["role"] == "guest" and guest["department_id"] is None


@pytest.mark.asyncio
async def test_visibility_depends_on_caller(client, container):
    await _seed_directory(container)
    await client.post("/api/events", json=_event_payload(title="Alpha"), headers=DESIGNER)
    await client.post("/api/events", json=_event_payload(title="Beta", department_id="dept-B"), headers=DESIGNER)

    designer_titles = [event["title"] for event in (await client.get("/api/events", headers=DESIGNER)).json()]
    dept_titles = [event["title"] for event in (await client.get("/api/events", headers=DEPT_A)).json()]
    guest_events = (await client.get("/api/events", headers=GUEST)).json()

    assert designer_titles == ["Alpha", "Beta"]
    assert dept_titles == ["Alpha"]
    assert guest_events == []


@pytest.mark.asyncio
async def test_query_parameters_narrow_results(client, container):
    await _seed_directory(container)
    await client.post("/api/events", json=_event_payload(title="Alpha", urgency="Low"), headers=DESIGNER)
    await client.post("/api/events", json=_event_payload(title="Beta", urgency="High"), headers=DESIGNER)

    by_text = (await client.get("/api/events", params={"q": "alp"}, headers=DESIGNER)).json()
    by_urgency = (await client.get("/api/events", params={"urgency": "High"}, headers=DESIGNER)).json()

    assert [event["title"] for event in by_text] == ["Alpha"]
    assert [event["title"] for event in by_urgency] == ["Beta"]


@pytest.mark.asyncio
async def test_assignment_with_failing_channel_falls_back_and_records_once(client, container, failing_channel, launcher, fake_sleep):
    await _seed_directory(container)

    response = await client.post("/api/events", json=_event_payload(assignee_id="u1", description="Banner"), headers=DESIGNER)

    assert response.status_code == 201
    body = response.json()
    assignment = body["assignment"]
    assert assignment["outcome"] == "fallback_handoff"
    assert assignment["fallback_uri"].startswith("mailto:u1@x.com?")
    assert "Launch" in unquote(assignment["fallback_uri"])
    assert launcher.launched == [assignment["fallback_uri"]]
    assert fake_sleep.delays == [1.0]
    assert len(failing_channel.calls) == 1
    assert body["event"]["assignee_name"] == "User One"
    assert body["event"]["department_name"] == "Department A"

    notifications = (await client.get("/api/notifications", headers=DESIGNER)).json()
    logs = (await client.get("/api/logs", headers=DESIGNER)).json()
    assert len(notifications) == 1
    assert "User One" in notifications[0]["message"] and "Launch" in notifications[0]["message"]
    assert len(logs) == 1
    assert body["event"]["id"] in logs[0]["message"]

    events = (await client.get("/api/events", headers=DESIGNER)).json()
    assert [event["id"] for event in events] == [body["event"]["id"]]


@pytest.mark.asyncio
async def test_event_without_assignee_skips_notification(client, container, failing_channel):
    await _seed_directory(container)

    response = await client.post("/api/events", json=_event_payload(), headers=DESIGNER)

    assert response.status_code == 201
    assert response.json()["assignment"] is None
    assert failing_channel.calls == []
    assert (await client.get("/api/notifications", headers=DESIGNER)).json() == []
    assert (await client.get("/api/logs", headers=DESIGNER)).json() == []


@pytest.mark.asyncio
async def test_unknown_assignee_creates_event_without_notification(client, container, failing_channel):
    await _seed_directory(container)

    response = await client.post("/api/events", json=_event_payload(assignee_id="ghost"), headers=DESIGNER)

    assert response.status_code == 201
    body = response.json()
    assert body["assignment"] is None
    assert body["event"]["assignee_name"] == "unknown"
    assert failing_channel.calls == []
    toasts = (await client.get("/api/toasts")).json()
    assert [(toast["kind"], toast["message"]) for toast in toasts] == [("info", MSG_EVENT_ASSIGNEE_UNKNOWN)]
    assert (await client.get("/api/notifications", headers=DESIGNER)).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [DEPT_A, GUEST])
async def test_only_designer_may_write(client, container, headers):
    await _seed_directory(container)

    created = await client.post("/api/events", json=_event_payload(), headers=headers)
    cleared = await client.delete("/api/logs", headers=headers)
    seeded = await client.post("/api/admin/seed", headers=headers)

    assert created.status_code == 403
    assert created.json()["code"] == "forbidden"
    assert cleared.status_code == 403
    assert seeded.status_code == 403
    toasts = (await client.get("/api/toasts")).json()
    assert toasts and all(toast["kind"] == "info" for toast in toasts)


@pytest.mark.asyncio
async def test_delete_event_and_delete_all(client, container):
    await _seed_directory(container)
    first = (await client.post("/api/events", json=_event_payload(title="One"), headers=DESIGNER)).json()
    await client.post("/api/events", json=_event_payload(title="Two"), headers=DESIGNER)

    assert (await client.delete(f"/api/events/{first['event']['id']}", headers=DESIGNER)).status_code == 204
    assert (await client.delete(f"/api/events/{first['event']['id']}", headers=DESIGNER)).status_code == 404
    assert (await client.delete("/api/events", headers=DESIGNER)).json() == {"removed": 1}
    assert (await client.get("/api/events", headers=DESIGNER)).json() == []


@pytest.mark.asyncio
async def test_deleting_department_leaves_dangling_references(client, container):
    await _seed_directory(container)
    await client.post("/api/events", json=_event_payload(title="Alpha"), headers=DESIGNER)

    assert (await client.delete("/api/admin/departments/dept-A", headers=DESIGNER)).status_code == 204

    dept_events = (await client.get("/api/events", headers=DEPT_A)).json()
    profile = (await client.get("/api/access/me", headers=DEPT_A)).json()
    assert [event["department_name"] for event in dept_events] == ["unknown"]
    assert profile["department_name"] == "unknown"


@pytest.mark.asyncio
async def test_access_map_changes_apply_on_next_request(client, container):
    await _seed_directory(container)
    assert (await client.get("/api/access/me", headers=GUEST)).json()["role"] == "guest"

    response = await client.put(
        "/api/admin/access-map/departments/10.0.0.9",
        json={"department_id": "dept-B"},
        headers=DESIGNER,
    )
    assert response.status_code == 200
    assert response.json()["department_addresses"]["10.0.0.9"] == "dept-B"

    profile = (await client.get("/api/access/me", headers=GUEST)).json()
    assert profile["role"] == "department_user"
    assert profile["department_id"] == "dept-B"

    assert (await client.delete("/api/admin/access-map/departments/10.0.0.9", headers=DESIGNER)).status_code == 200
    assert (await client.get("/api/access/me", headers=GUEST)).json()["role"] == "guest"


@pytest.mark.asyncio
async def test_clearing_notifications_and_logs(client, container):
    await _seed_directory(container)
    await client.post("/api/events", json=_event_payload(assignee_id="u1"), headers=DESIGNER)

    read = await client.post("/api/notifications/read-all", headers=DESIGNER)
    assert read.json() == {"updated": 1}
    assert (await client.delete("/api/notifications", headers=DESIGNER)).json() == {"removed": 1}
    assert (await client.get("/api/notifications", headers=DESIGNER)).json() == []
    assert len((await client.get("/api/logs", headers=DESIGNER)).json()) == 1


@pytest.mark.asyncio
async def test_seed_fills_empty_collections_once(client):
    first = (await client.post("/api/admin/seed", headers=DESIGNER)).json()
    second = (await client.post("/api/admin/seed", headers=DESIGNER)).json()

    assert first == {"users": 3, "departments": 5, "events": 6}
    assert second == {"users": 0, "departments": 0, "events": 0}
    assert len((await client.get("/api/admin/users")).json()) == 3


@pytest.mark.asyncio
async def test_user_creation_validates_avatar(client):
    bad = await client.post(
        "/api/admin/users",
        json={"name": "New", "email": "new@x.com", "avatar": "not-an-emoji"},
        headers=DESIGNER,
    )
    good = await client.post(
        "/api/admin/users",
        json={"name": "New", "email": "new@x.com", "avatar": "👩‍💼"},
        headers=DESIGNER,
    )

    assert bad.status_code == 422
    assert good.status_code == 201
    assert good.json()["avatar"] == "👩‍💼"


@pytest.mark.asyncio
async def test_holiday_warning_and_listing(client, container):
    await _seed_directory(container)

    created = await client.post("/api/events", json=_event_payload(date="2025-10-29"), headers=DESIGNER)
    holidays = (await client.get("/api/holidays", params={"year": 2025})).json()

    assert created.json()["holiday_warning"] == "Cumhuriyet Bayramı"
    assert holidays["2025-04-23"] == "Ulusal Egemenlik ve Çocuk Bayramı"
    assert all(key.startswith("2025-") for key in holidays)


@pytest.mark.asyncio
async def test_metrics_endpoint(client):
    await client.get("/api/admin/health")
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "campaign_http_requests_total" in response.text


@pytest.mark.asyncio
async def test_mapping_address_to_unknown_department_is_rejected(client, container):
    await _seed_directory(container)

    response = await client.put(
        "/api/admin/access-map/departments/10.0.0.9",
        json={"department_id": "dept-Z"},
        headers=DESIGNER,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"
    assert (await client.get("/api/access/me", headers=GUEST)).json()["role"] == "guest"
