from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, work_date, punch_in, punch_out
                FROM attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["id"]),
                employee_id=r["employee_id"],
                work_date=r["work_date"],
                punch_in=r["punch_in"],
                punch_out=r.get("punch_out"),
            )

    def create_punch_in(self, *, employee_id: str, work_date: date, punch_in: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, work_date, punch_in)
                VALUES(%s,%s,%s)
                """,
                (employee_id, work_date, punch_in),
            )
            return int(cur.lastrowid)

    def close_open_record(self, *, attendance_id: int, punch_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET punch_out=%s
                WHERE id=%s AND punch_out IS NULL
                """,
                (punch_out, int(attendance_id)),
            )
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses: list[str] = []
        params: list[object] = []

        if start_date is not None:
            clauses.append("a.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("a.work_date <= %s")
            params.append(end_date)
        if employee_id is not None:
            clauses.append("a.employee_id = %s")
            params.append(employee_id)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.id, a.employee_id, e.name, a.work_date, a.punch_in, a.punch_out
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                {where}
                ORDER BY a.work_date DESC, a.punch_in DESC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    attendance_id=int(r["id"]),
                    employee_id=r["employee_id"],
                    name=r["name"],
                    work_date=r["work_date"],
                    punch_in=r["punch_in"],
                    punch_out=r.get("punch_out"),
                )
                for r in fetchall(cur)
            ]

    def count_present(self, work_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(DISTINCT employee_id) AS present FROM attendance WHERE work_date=%s",
                (work_date,),
            )
            row = fetchone(cur)
            return int(row["present"]) if row else 0

    def list_completed_shifts(self) -> Sequence[tuple[datetime, datetime]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT punch_in, punch_out FROM attendance WHERE punch_out IS NOT NULL")
            return [(r["punch_in"], r["punch_out"]) for r in fetchall(cur)]
