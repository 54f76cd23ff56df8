from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        """Insert a new employee; raises ConflictError if the id is taken."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
