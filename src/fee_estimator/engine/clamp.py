"""Input validation and clamping of enterprise value to the schedule."""

import math
from numbers import Real
from typing import Optional

from fee_estimator.core.errors import InvalidInputError
from fee_estimator.schedule.bands import FeeSchedule


def validate_enterprise_value(enterprise_value) -> float:
    if isinstance(enterprise_value, bool) or not isinstance(enterprise_value, Real):
        raise InvalidInputError(
            f"Enterprise value must be a number, got {type(enterprise_value).__name__}"
        )
    value = float(enterprise_value)
    if not math.isfinite(value):
        raise InvalidInputError("Enterprise value cannot be NaN or infinite")
    if value < 0:
        raise InvalidInputError("Enterprise value cannot be negative")
    return value


def clamp_enterprise_value(
    enterprise_value: float, schedule: FeeSchedule
) -> Optional[float]:
    """Return EV capped at the schedule ceiling, or None below the floor."""
    if enterprise_value < schedule.floor:
        return None
    return min(enterprise_value, schedule.cap)
