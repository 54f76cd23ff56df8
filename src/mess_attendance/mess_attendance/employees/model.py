from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a roster entry.

    The descriptor is only ever compared by the client-side matcher; the
    server stores it and hands it back.
    """

    employee_id: str
    name: str
    face_descriptor: tuple[float, ...] = field(repr=False)
    bound_device_id: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "faceDescriptor": list(self.face_descriptor),
            "deviceId": self.bound_device_id,
        }
