from datetime import date

import pytest

from campaign_calendar.constants import MSG_EVENT_WRITE_FAILED
from campaign_calendar.core.exceptions import (
    EventWriteError,
    ForbiddenError,
    NotFoundError,
    UpstreamWriteError,
    ValidationError,
)
from campaign_calendar.models.access import AccessRole, AccessScope
from campaign_calendar.models.event import EventCreateRequest
from campaign_calendar.models.toast import ToastKind
from campaign_calendar.services.campaigns import CampaignService
from campaign_calendar.services.seed import seed_defaults
from campaign_calendar.storage.events import InMemoryEventStore

DESIGNER_SCOPE = AccessScope(role=AccessRole.DESIGNER)
DEPT_SCOPE = AccessScope(role=AccessRole.DEPARTMENT_USER, department_id="dept-A")


class BrokenEventStore(InMemoryEventStore):
    async def create_event(self, payload, *, event_id=None):
        raise ConnectionError("store offline")

    async def delete_all(self):
        raise ConnectionError("store offline")


def _payload(**overrides):
    data = {"title": "Launch", "date": date(2025, 6, 14), "urgency": "High", "department_id": "dept-A"}
    data.update(overrides)
    return EventCreateRequest(**data)


@pytest.mark.asyncio
async def test_event_write_failure_is_reported_and_nothing_is_notified(container, failing_channel):
    service = CampaignService(
        directory=container.directory,
        events=BrokenEventStore(),
        notifier=container.notifier,
        toasts=container.toasts,
    )
    await container.directory.create_user("User One", "u1@x.com", user_id="u1")

    with pytest.raises(UpstreamWriteError) as excinfo:
        await service.create_event(DESIGNER_SCOPE, _payload(assignee_id="u1"))

    assert isinstance(excinfo.value.__cause__, EventWriteError)
    assert excinfo.value.__cause__.details == {"reason": "store offline"}
    assert [toast.message for toast in container.toasts.active()] == [MSG_EVENT_WRITE_FAILED]
    assert container.toasts.active()[0].kind == ToastKind.INFO
    assert failing_channel.calls == []
    assert len(container.recorder.notifications) == 0


@pytest.mark.asyncio
async def test_missing_event_passes_through_as_not_found(container):
    with pytest.raises(NotFoundError):
        await container.campaigns.delete_event(DESIGNER_SCOPE, "missing")

    assert container.toasts.active() == []


@pytest.mark.asyncio
async def test_department_user_cannot_create_events(container):
    with pytest.raises(ForbiddenError):
        await container.campaigns.create_event(DEPT_SCOPE, _payload())

    assert await container.events.list_events() == []


@pytest.mark.asyncio
async def test_rendered_events_label_missing_references(container):
    await container.events.create_event(_payload(assignee_id=None, department_id=None), event_id="e1")
    await container.events.create_event(_payload(assignee_id="gone", department_id="dept-A"), event_id="e2")

    views = await container.campaigns.list_visible(DESIGNER_SCOPE)

    assert [(view.assignee_name, view.department_name) for view in views] == [
        ("unassigned", "unassigned"),
        ("unknown", "unknown"),
    ]


@pytest.mark.asyncio
async def test_access_map_edits_take_effect_on_next_resolution(container):
    service = container.directory_service
    await container.directory.create_department("Department B", department_id="dept-B")
    assert (await service.resolve_scope("10.0.0.7")).role == AccessRole.GUEST

    await service.map_department_address(DESIGNER_SCOPE, " 10.0.0.7 ", "dept-B")
    scope = await service.resolve_scope("10.0.0.7")

    assert scope.role == AccessRole.DEPARTMENT_USER
    assert scope.department_id == "dept-B"

    await service.unmap_department_address(DESIGNER_SCOPE, "10.0.0.7")
    assert (await service.resolve_scope("10.0.0.7")).role == AccessRole.GUEST

    with pytest.raises(NotFoundError):
        await service.unmap_department_address(DESIGNER_SCOPE, "10.0.0.7")


@pytest.mark.asyncio
async def test_access_map_is_designer_only(container):
    with pytest.raises(ForbiddenError):
        await container.directory_service.get_access_map(DEPT_SCOPE)


@pytest.mark.asyncio
async def test_seed_places_events_in_current_month_without_notifying(container, failing_channel):
    counts = await seed_defaults(container.directory, container.events, today=date(2025, 2, 10))

    events = await container.events.list_events()
    assert counts == {"users": 3, "departments": 5, "events": 6}
    assert [event.id for event in events] == ["1", "2", "3", "4", "5", "6"]
    assert all(event.date.year == 2025 and event.date.month == 2 for event in events)
    assert failing_channel.calls == []


@pytest.mark.asyncio
async def test_seed_leaves_populated_collections_alone(container):
    await container.directory.create_user("Only", "only@x.com", user_id="solo")

    counts = await seed_defaults(container.directory, container.events, today=date(2025, 2, 10))

    assert counts["users"] == 0
    assert [user.id for user in await container.directory.list_users()] == ["solo"]


@pytest.mark.asyncio
@pytest.mark.parametrize("address, department_id", [("10.0.0.7", "dept-missing"), ("   ", "dept-B")])
async def test_mapping_to_unknown_department_or_blank_address_is_rejected(container, address, department_id):
    await container.directory.create_department("Department B", department_id="dept-B")
    before = await container.directory.get_access_map()

    with pytest.raises(ValidationError):
        await container.directory_service.map_department_address(DESIGNER_SCOPE, address, department_id)

    assert await container.directory.get_access_map() == before
