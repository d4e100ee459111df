from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class AccessRole(str, Enum):
    DESIGNER = "designer"
    DEPARTMENT_USER = "department_user"
    GUEST = "guest"


class AccessMap(BaseModel):
    """Address-to-role table: one designer address plus per-department addresses."""

    designer_address: str
    department_addresses: Dict[str, str] = Field(default_factory=dict)

    @field_validator("designer_address")
    def _strip_designer(cls, value: str) -> str:
        return value.strip()

    @field_validator("department_addresses")
    def _strip_departments(cls, value: Dict[str, str]) -> Dict[str, str]:
        stripped: Dict[str, str] = {}
        for address, department_id in value.items():
            key = address.strip()
            if key in stripped:
                raise ValueError(f"address '{key}' is mapped more than once")
            stripped[key] = department_id
        return stripped


class AccessScope(BaseModel):
    role: AccessRole
    department_id: Optional[str] = None

    @property
    def is_designer(self) -> bool:
        return self.role is AccessRole.DESIGNER

    @property
    def read_only(self) -> bool:
        return not self.is_designer


class AccessProfile(BaseModel):
    address: str
    role: AccessRole
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    read_only: bool
