from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.updates import is_set
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeStore:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository, *, clock: Callable = now_local):
        self._employees = employees
        self._clock = clock

    def create(self, employee_id: str, name: str) -> Employee:
        employee_id = require_non_empty(employee_id, "Employee id")
        name = require_non_empty(name, "Employee name")

        employee = self._employees.create(employee_id=employee_id, name=name, now=self._clock())
        logger.info("Created employee %s", employee.id)
        return employee

    def update(self, employee_id: str, changes: EmployeeUpdate) -> Employee:
        if changes.is_empty():
            raise ValidationError("No fields to update")
        if is_set(changes.name):
            changes = EmployeeUpdate(name=require_non_empty(changes.name, "Employee name"), active=changes.active)
        if is_set(changes.active) and not isinstance(changes.active, bool):
            raise ValidationError("Active flag must be true or false")

        employee = self._employees.update(employee_id, changes, now=self._clock())
        if employee is None:
            raise NotFoundError(f"Employee {employee_id!r} not found")
        logger.info("Updated employee %s", employee.id)
        return employee

    def delete(self, employee_id: str) -> None:
        # Attendance records keep their employee_id and name snapshot.
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id!r} not found")
        logger.info("Deleted employee %s", employee_id)

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def list(self, active_only: bool = False) -> Sequence[Employee]:
        return self._employees.list_all(active_only=active_only)
