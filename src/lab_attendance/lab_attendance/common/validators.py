from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_id(value: Any, field_name: str) -> int:
    """Positive integer identifier (accepts ``"12"`` as well as ``12``)."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}")
    try:
        ident = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}")
    if ident <= 0:
        raise ValidationError(f"Invalid {field_name}")
    return ident


def require_amount(value: Any, field_name: str, *, default: Optional[float] = None) -> float:
    """Finite, non-negative amount. ``None`` falls back to ``default`` when given."""
    if value is None and default is not None:
        return float(default)
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a valid number (>=0)")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a valid number (>=0)")
    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(f"{field_name} must be a valid number (>=0)")
    return amount


def coerce_non_negative(value: Any) -> float:
    """Lenient numeric coercion: garbage, NaN and negatives all become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(0.0, number)
