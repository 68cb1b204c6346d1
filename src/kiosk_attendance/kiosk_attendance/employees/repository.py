from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeUpdate


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, name: str, now: datetime) -> Employee:
        """Insert a new active employee; raises DuplicateIdError if the id is taken."""

        raise NotImplementedError

    def update(self, employee_id: str, changes: EmployeeUpdate, *, now: datetime) -> Optional[Employee]:
        """Apply the set fields of ``changes``; returns None if the id is unknown."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        raise NotImplementedError
