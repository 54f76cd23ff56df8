from __future__ import annotations

import math
from typing import Any

from ..core.constants import FACE_DESCRIPTOR_LENGTH, PIN_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_str(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_pin(value: Any) -> str:
    # str.isdigit() also accepts non-ASCII digits such as "١٢٣٤"
    if not isinstance(value, str) or len(value) != PIN_LENGTH or not all("0" <= ch <= "9" for ch in value):
        raise ValidationError(f"PIN must be exactly {PIN_LENGTH} digits")
    return value


def require_descriptor(value: Any) -> list[float]:
    if not isinstance(value, (list, tuple)) or len(value) != FACE_DESCRIPTOR_LENGTH:
        raise ValidationError(f"faceDescriptor must be a list of {FACE_DESCRIPTOR_LENGTH} numbers")

    out: list[float] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)) or not math.isfinite(item):
            raise ValidationError("faceDescriptor contains a non-numeric value")
        out.append(float(item))
    return out


def require_coordinate(value: Any, field_name: str, *, limit: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError(f"{field_name} is required")
    if abs(value) > limit:
        raise ValidationError(f"{field_name} is out of range")
    return float(value)
