"""Utility functions for the application."""

import math
from datetime import datetime, timezone

from .errors import ValidationError


def utcnow():
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(name, value):
    """Parse an ISO-8601 string (or datetime) into an aware UTC datetime.

    Raises:
        ValidationError: If the value is not a timestamp.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"{name} must be an ISO-8601 timestamp.") from e
    else:
        raise ValidationError(f"{name} must be an ISO-8601 timestamp.")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value):
    """Format a datetime the way it is stored in snapshots."""
    return value.astimezone(timezone.utc).isoformat()


def parse_amount(name, value, allow_zero=False):
    """Coerce a finite money amount.

    Amounts must be greater than zero, or at least zero when ``allow_zero``
    is set. NaN and infinities are rejected.

    Raises:
        ValidationError: If the value is not an acceptable amount.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number.")
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a number.") from e
    if not math.isfinite(amount):
        raise ValidationError(f"{name} must be a finite number.")
    if allow_zero and amount < 0:
        raise ValidationError(f"{name} cannot be negative.")
    if not allow_zero and amount <= 0:
        raise ValidationError(f"{name} must be greater than zero.")
    return amount


def parse_whole_number(name, value, minimum=0):
    """Coerce an integer that is at least ``minimum``.

    Raises:
        ValidationError: If the value is not a whole number in range.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a whole number.")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"{name} must be a whole number.") from e
    if number != value and not isinstance(value, str):
        raise ValidationError(f"{name} must be a whole number.")
    if number < minimum:
        raise ValidationError(f"{name} must be at least {minimum}.")
    return number


def parse_text_list(value):
    """Split a comma-separated string into a list of trimmed entries."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


def form_error_message(form):
    """Flatten WTForms errors, including those of nested forms, into one message."""
    messages = []
    for name, errors in form.errors.items():
        flat = []
        for error in errors:
            if isinstance(error, dict):
                for field_errors in error.values():
                    flat.extend(field_errors)
            else:
                flat.append(error)
        messages.append(f"{getattr(form, name).label.text}: {'; '.join(flat)}")
    return " ".join(messages) or "Invalid form submission."
