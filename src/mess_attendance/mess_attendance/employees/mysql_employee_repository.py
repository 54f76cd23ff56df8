from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _row_to_employee(row: dict) -> Employee:
    descriptor = row["face_descriptor"]
    # JSON columns come back as str (pure driver) or bytes (C extension)
    if isinstance(descriptor, (bytes, bytearray)):
        descriptor = descriptor.decode("utf-8")
    if isinstance(descriptor, str):
        descriptor = json.loads(descriptor)

    return Employee(
        employee_id=row["employee_id"],
        name=row["name"],
        face_descriptor=tuple(float(x) for x in descriptor),
        bound_device_id=row.get("device_id"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, face_descriptor, device_id
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return _row_to_employee(row)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, face_descriptor, device_id
                FROM employees
                ORDER BY id ASC
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, face_descriptor, device_id)
                VALUES(%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    json.dumps(list(employee.face_descriptor)),
                    employee.bound_device_id,
                ),
            )

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
