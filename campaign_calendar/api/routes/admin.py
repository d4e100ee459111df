"""Administrative endpoints: directory, access map and seeding."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from campaign_calendar.api.dependencies import get_access_scope, get_caller_address, get_container
from campaign_calendar.constants import MSG_SEEDED
from campaign_calendar.models.access import AccessMap, AccessScope
from campaign_calendar.models.directory import Department, DepartmentCreateRequest, User, UserCreateRequest
from campaign_calendar.services.container import ServiceContainer
from campaign_calendar.services.guards import require_designer
from campaign_calendar.services.seed import seed_defaults
from campaign_calendar.utils.audit import audit_logger

router = APIRouter(prefix="/admin", tags=["admin"])


class DepartmentAddressRequest(BaseModel):
    department_id: str = Field(..., min_length=1)


@router.get("/health")
async def healthcheck(container: ServiceContainer = Depends(get_container)) -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "environment": container.config.ENVIRONMENT}


@router.get("/users", response_model=List[User])
async def list_users(container: ServiceContainer = Depends(get_container)) -> List[User]:
    return await container.directory_service.list_users()


@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreateRequest,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> User:
    user = await container.directory_service.create_user(scope, payload)
    audit_logger.record("user.create", address, {"user_id": user.id})
    return user


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> None:
    await container.directory_service.delete_user(scope, user_id)
    audit_logger.record("user.delete", address, {"user_id": user_id})


@router.get("/departments", response_model=List[Department])
async def list_departments(container: ServiceContainer = Depends(get_container)) -> List[Department]:
    return await container.directory_service.list_departments()


@router.post("/departments", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(
    payload: DepartmentCreateRequest,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Department:
    department = await container.directory_service.create_department(scope, payload)
    audit_logger.record("department.create", address, {"department_id": department.id})
    return department


@router.delete("/departments/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
    department_id: str,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> None:
    await container.directory_service.delete_department(scope, department_id)
    audit_logger.record("department.delete", address, {"department_id": department_id})


@router.get("/access-map", response_model=AccessMap)
async def get_access_map(
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> AccessMap:
    return await container.directory_service.get_access_map(scope)


@router.put("/access-map", response_model=AccessMap)
async def replace_access_map(
    payload: AccessMap,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> AccessMap:
    updated = await container.directory_service.replace_access_map(scope, payload)
    audit_logger.record("access_map.replace", address, updated.model_dump())
    return updated


@router.put("/access-map/departments/{mapped_address}", response_model=AccessMap)
async def map_department_address(
    mapped_address: str,
    payload: DepartmentAddressRequest,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> AccessMap:
    updated = await container.directory_service.map_department_address(scope, mapped_address, payload.department_id)
    audit_logger.record(
        "access_map.map_department",
        address,
        {"address": mapped_address, "department_id": payload.department_id},
    )
    return updated


@router.delete("/access-map/departments/{mapped_address}", response_model=AccessMap)
async def unmap_department_address(
    mapped_address: str,
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> AccessMap:
    updated = await container.directory_service.unmap_department_address(scope, mapped_address)
    audit_logger.record("access_map.unmap_department", address, {"address": mapped_address})
    return updated


@router.post("/seed", response_model=Dict[str, int])
async def seed(
    address: str = Depends(get_caller_address),
    scope: AccessScope = Depends(get_access_scope),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, int]:
    require_designer(scope, "seed default data")
    counts = await seed_defaults(container.directory, container.events)
    container.toasts.success(MSG_SEEDED)
    audit_logger.record("seed", address, counts)
    return counts
