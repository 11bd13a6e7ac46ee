from __future__ import annotations

from ..core.exceptions import ValidationError


def require_positive_id(value, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")
    if parsed <= 0:
        raise ValidationError(f"{field_name} không hợp lệ")
    return parsed


def require_month(month, year) -> tuple[int, int]:
    try:
        m, y = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("Tháng/năm không hợp lệ")
    if not 1 <= m <= 12 or y < 1:
        raise ValidationError("Tháng/năm không hợp lệ")
    return m, y


def require_year(year) -> int:
    try:
        y = int(year)
    except (TypeError, ValueError):
        raise ValidationError("Năm không hợp lệ")
    if y < 1:
        raise ValidationError("Năm không hợp lệ")
    return y
