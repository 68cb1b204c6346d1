from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from ..common.updates import UNSET, UnsetType, is_set


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the kiosk roster.

    Note: Plain data object, no DB access code here.
    """

    id: str
    name: str
    active: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "active": self.active,
            "created_at": self.created_at.isoformat(sep=" "),
            "updated_at": self.updated_at.isoformat(sep=" "),
        }


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update request; fields left as UNSET are not touched."""

    name: Union[str, UnsetType] = field(default=UNSET)
    active: Union[bool, UnsetType] = field(default=UNSET)

    def is_empty(self) -> bool:
        return not is_set(self.name) and not is_set(self.active)
