"""In-memory directory of users, departments and the address access map."""

from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional, Protocol

from campaign_calendar.core.exceptions import NotFoundError
from campaign_calendar.models.access import AccessMap
from campaign_calendar.models.directory import Department, User

logger = logging.getLogger(__name__)


class Directory(Protocol):
    async def list_users(self) -> List[User]: ...

    async def get_user(self, user_id: str) -> Optional[User]: ...

    async def create_user(self, name: str, email: str, avatar: Optional[str] = None, *, user_id: Optional[str] = None) -> User: ...

    async def delete_user(self, user_id: str) -> None: ...

    async def list_departments(self) -> List[Department]: ...

    async def get_department(self, department_id: str) -> Optional[Department]: ...

    async def create_department(self, name: str, *, department_id: Optional[str] = None) -> Department: ...

    async def delete_department(self, department_id: str) -> None: ...

    async def get_access_map(self) -> AccessMap: ...

    async def set_access_map(self, access_map: AccessMap) -> AccessMap: ...


class InMemoryDirectory:
    """Directory backed by plain dictionaries.

    Department deletion does not touch events or access-map entries that
    reference the department; those references are left dangling.
    """

    def __init__(self, access_map: AccessMap) -> None:
        self._users: Dict[str, User] = {}
        self._departments: Dict[str, Department] = {}
        self._access_map = access_map.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def list_users(self) -> List[User]:
        return list(self._users.values())

    async def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def create_user(self, name: str, email: str, avatar: Optional[str] = None, *, user_id: Optional[str] = None) -> User:
        user = User(id=user_id or uuid.uuid4().hex, name=name, email=email, avatar=avatar)
        self._users[user.id] = user
        logger.debug("Created user %s", user.id)
        return user

    async def delete_user(self, user_id: str) -> None:
        if self._users.pop(user_id, None) is None:
            raise NotFoundError(f"User '{user_id}' not found")

    # ------------------------------------------------------------------
    # Departments
    # ------------------------------------------------------------------

    async def list_departments(self) -> List[Department]:
        return list(self._departments.values())

    async def get_department(self, department_id: str) -> Optional[Department]:
        return self._departments.get(department_id)

    async def create_department(self, name: str, *, department_id: Optional[str] = None) -> Department:
        department = Department(id=department_id or uuid.uuid4().hex, name=name)
        self._departments[department.id] = department
        return department

    async def delete_department(self, department_id: str) -> None:
        if self._departments.pop(department_id, None) is None:
            raise NotFoundError(f"Department '{department_id}' not found")

    # ------------------------------------------------------------------
    # Access map
    # ------------------------------------------------------------------

    async def get_access_map(self) -> AccessMap:
        return self._access_map.model_copy(deep=True)

    async def set_access_map(self, access_map: AccessMap) -> AccessMap:
        self._access_map = access_map.model_copy(deep=True)
        logger.info(
            "Access map replaced (designer=%s, departments=%d)",
            access_map.designer_address,
            len(access_map.department_addresses),
        )
        return await self.get_access_map()


__all__ = ["Directory", "InMemoryDirectory"]
