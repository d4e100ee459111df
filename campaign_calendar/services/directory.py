"""Directory administration and caller access description."""

from __future__ import annotations

import logging
from typing import List

from campaign_calendar.access.resolver import resolve_role
from campaign_calendar.constants import MSG_ACCESS_UPDATED, MSG_DIRECTORY_WRITE_FAILED, UNKNOWN_LABEL
from campaign_calendar.core.exceptions import DirectoryWriteError, NotFoundError, ValidationError
from campaign_calendar.models.access import AccessMap, AccessProfile, AccessScope
from campaign_calendar.models.directory import Department, DepartmentCreateRequest, User, UserCreateRequest
from campaign_calendar.services.guards import guarded_write, require_designer
from campaign_calendar.storage.directory import Directory
from campaign_calendar.storage.toasts import ToastBoard

logger = logging.getLogger(__name__)


class DirectoryService:
    def __init__(self, *, directory: Directory, toasts: ToastBoard) -> None:
        self.directory = directory
        self.toasts = toasts

    async def resolve_scope(self, caller_address: str) -> AccessScope:
        return resolve_role(caller_address, await self.directory.get_access_map())

    async def describe(self, caller_address: str) -> AccessProfile:
        scope = await self.resolve_scope(caller_address)
        department_name = None
        if scope.department_id is not None:
            department = await self.directory.get_department(scope.department_id)
            department_name = department.name if department else UNKNOWN_LABEL
        return AccessProfile(
            address=caller_address,
            role=scope.role,
            department_id=scope.department_id,
            department_name=department_name,
            read_only=scope.read_only,
        )

    # ------------------------------------------------------------------
    # Users and departments
    # ------------------------------------------------------------------

    async def create_user(self, scope: AccessScope, payload: UserCreateRequest) -> User:
        require_designer(scope, "manage users")
        user = await self._write(lambda: self.directory.create_user(payload.name, str(payload.email), payload.avatar))
        self.toasts.success(f"{user.name} başarıyla eklendi.")
        return user

    async def delete_user(self, scope: AccessScope, user_id: str) -> None:
        require_designer(scope, "manage users")
        await self._write(lambda: self.directory.delete_user(user_id))
        self.toasts.info("Personel silindi.")

    async def create_department(self, scope: AccessScope, payload: DepartmentCreateRequest) -> Department:
        require_designer(scope, "manage departments")
        department = await self._write(lambda: self.directory.create_department(payload.name))
        self.toasts.success(f"{department.name} birimi eklendi.")
        return department

    async def delete_department(self, scope: AccessScope, department_id: str) -> None:
        """Remove a department; events and access entries keep the stale id."""

        require_designer(scope, "manage departments")
        await self._write(lambda: self.directory.delete_department(department_id))
        self.toasts.info("Birim silindi.")

    # ------------------------------------------------------------------
    # Access map
    # ------------------------------------------------------------------

    async def get_access_map(self, scope: AccessScope) -> AccessMap:
        require_designer(scope, "view access settings")
        return await self.directory.get_access_map()

    async def replace_access_map(self, scope: AccessScope, access_map: AccessMap) -> AccessMap:
        require_designer(scope, "change access settings")
        if access_map.designer_address in access_map.department_addresses:
            logger.warning(
                "Designer address %s is also mapped to department %s; designer takes precedence",
                access_map.designer_address,
                access_map.department_addresses[access_map.designer_address],
            )
        updated = await self._write(lambda: self.directory.set_access_map(access_map))
        self.toasts.success(MSG_ACCESS_UPDATED)
        return updated

    async def map_department_address(self, scope: AccessScope, address: str, department_id: str) -> AccessMap:
        current = await self.get_access_map(scope)
        address = address.strip()
        if not address:
            raise ValidationError("Address must not be empty")
        if await self.directory.get_department(department_id) is None:
            raise ValidationError(f"Department '{department_id}' does not exist")
        departments = dict(current.department_addresses)
        departments[address] = department_id
        return await self.replace_access_map(
            scope, AccessMap(designer_address=current.designer_address, department_addresses=departments)
        )

    async def unmap_department_address(self, scope: AccessScope, address: str) -> AccessMap:
        current = await self.get_access_map(scope)
        departments = dict(current.department_addresses)
        if departments.pop(address.strip(), None) is None:
            raise NotFoundError(f"Address '{address}' is not mapped to a department")
        return await self.replace_access_map(
            scope, AccessMap(designer_address=current.designer_address, department_addresses=departments)
        )

    async def list_users(self) -> List[User]:
        return await self.directory.list_users()

    async def list_departments(self) -> List[Department]:
        return await self.directory.list_departments()

    async def _write(self, action):
        return await guarded_write(
            action,
            error_type=DirectoryWriteError,
            error_code="DIRECTORY_WRITE_FAILED",
            toasts=self.toasts,
            failure_message=MSG_DIRECTORY_WRITE_FAILED,
        )


__all__ = ["DirectoryService"]
