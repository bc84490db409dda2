from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def is_valid_hhmm(value: Optional[str]) -> bool:
    return bool(value) and _HHMM.match(str(value).strip()) is not None


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    if int(year) < 1:
        raise ValidationError(f"year must be positive, got {year}")
    return int(year), int(month)
