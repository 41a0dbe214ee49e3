"""Input rules for weight entries, the goal weight and list filters.

Every function here raises ``ValidationError`` (or ``FutureDateError``) and
never touches storage.
"""
import math
from datetime import date

from app.core.errors import FutureDateError, ValidationError
from app.core.time_utils import parse_ymd, utc_today


def validate_entry_date(value, field: str = "date", today: date | None = None) -> date:
    """Parse an entry date and reject anything after today in UTC.

    ``today`` is only passed by callers that need a fixed reference day;
    otherwise the current UTC date is read at call time.
    """
    if value is None or value == "":
        raise ValidationError(field, "missing", "date is required", message="Invalid request")
    try:
        parsed = parse_ymd(value)
    except ValueError as e:
        raise ValidationError(field, "invalid_format", str(e), message="Invalid date")

    if today is None:
        today = utc_today()
    if parsed > today:
        raise FutureDateError(field, value)
    return parsed


def validate_filter_date(value: str | None, field: str) -> date | None:
    """Parse an optional list-filter bound. Future bounds are fine here."""
    if value is None or value == "":
        return None
    try:
        return parse_ymd(value)
    except ValueError as e:
        raise ValidationError(field, "invalid_format", str(e), message="Invalid date")


def _check_positive(value, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, "not_a_number", f"{field} must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(field, "not_a_number", f"{field} must be a finite number")
    if value <= 0:
        raise ValidationError(field, "not_positive", f"{field} must be > 0")
    return value


def validate_pounds(value, field: str = "pounds") -> float:
    if value is None:
        raise ValidationError(field, "missing", f"{field} is required")
    return _check_positive(value, field)


def validate_goal_pounds(value, field: str = "pounds") -> float | None:
    # Clearing the goal is always allowed
    if value is None:
        return None
    return _check_positive(value, field)


def validate_weight_input(raw_date, raw_pounds, today: date | None = None) -> tuple[date, float]:
    """Validate a create/update body. Weight is checked before the date."""
    pounds = validate_pounds(raw_pounds)
    entry_date = validate_entry_date(raw_date, today=today)
    return entry_date, pounds
