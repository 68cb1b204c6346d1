from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..common.updates import is_set
from ..core.exceptions import DuplicateIdError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

_COLUMNS = "id, name, active, created_at, updated_at"


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=row["id"],
        name=row["name"],
        active=bool(row["active"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, *, employee_id: str, name: str, now: datetime) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(id, name, active, created_at, updated_at)
                    VALUES(%s,%s,1,%s,%s)
                    """,
                    (employee_id, name, now, now),
                )
                cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
                return _to_employee(fetchone(cur))
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateIdError(f"An employee with id {employee_id!r} already exists") from e
            raise

    def update(self, employee_id: str, changes: EmployeeUpdate, *, now: datetime) -> Optional[Employee]:
        sets: list[str] = []
        params: list[object] = []
        if is_set(changes.name):
            sets.append("name=%s")
            params.append(changes.name)
        if is_set(changes.active):
            sets.append("active=%s")
            params.append(1 if changes.active else 0)
        sets.append("updated_at=%s")
        params.append(now)
        params.append(employee_id)

        with db_cursor(self._conn_factory) as (_, cur):
            # Lock the row so a concurrent update commits before or after, never interleaved.
            cur.execute("SELECT id FROM employees WHERE id=%s FOR UPDATE", (employee_id,))
            if not fetchone(cur):
                return None
            cur.execute(f"UPDATE employees SET {', '.join(sets)} WHERE id=%s", tuple(params))
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            return _to_employee(fetchone(cur))

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        where = "WHERE active=1" if active_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees {where} ORDER BY seq ASC")
            return [_to_employee(r) for r in fetchall(cur)]
