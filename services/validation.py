# services/validation.py
"""
Field validation for student records.

These functions are pure and shared by the API layer (``RecordService``)
and the UI controller, so both boundaries report the same messages.
The email and phone patterns are intentionally loose.
"""
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from models.record import FEE_STATUSES

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?\(?[0-9]{3}\)?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}")
DATE_ONLY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
DATETIME_PREFIX_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")

BODY_FIELD = "_body"


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(value))


def parse_join_date(value: Any) -> Optional[datetime]:
    """Parse an ISO date or datetime into a UTC datetime, or return None.

    Only the extended ISO forms (``YYYY-MM-DD`` and ``YYYY-MM-DDTHH:MM...``)
    are accepted. The result keeps millisecond precision, like the store.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            if DATE_ONLY_PATTERN.fullmatch(text):
                day = date.fromisoformat(text)
                return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
            if not DATETIME_PREFIX_PATTERN.match(text):
                return None
            if text[-1] in "Zz":
                text = text[:-1] + "+00:00"
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def _has_min_length(value: Any, length: int = 2) -> bool:
    return isinstance(value, str) and len(value.strip()) >= length


def check_record(payload: Any) -> List[Tuple[str, str]]:
    """Return every ``(field, message)`` violation of the payload, in field order."""
    if not isinstance(payload, Mapping):
        return [(BODY_FIELD, "Request body must be a JSON object")]

    errors: List[Tuple[str, str]] = []

    if not _has_min_length(payload.get("name")):
        errors.append(("name", "Name is required and must be at least 2 characters"))

    email = payload.get("email")
    if not email or not isinstance(email, str):
        errors.append(("email", "Email is required"))
    elif not is_valid_email(email.strip()):
        errors.append(("email", "Invalid email format"))

    phone = payload.get("phone")
    if phone and (not isinstance(phone, str) or not is_valid_phone(phone.strip())):
        errors.append(("phone", "Invalid phone number format"))

    if not _has_min_length(payload.get("course")):
        errors.append(("course", "Course/Service is required and must be at least 2 characters"))

    if payload.get("feeStatus") not in FEE_STATUSES:
        errors.append(("feeStatus", "Valid fee status is required"))

    join_date = payload.get("joinDate")
    if not join_date:
        errors.append(("joinDate", "Join date is required"))
    elif parse_join_date(join_date) is None:
        errors.append(("joinDate", "Invalid join date format"))

    notes = payload.get("notes")
    if notes and not isinstance(notes, str):
        errors.append(("notes", "Notes must be text"))

    return errors


def validate_record(payload: Any) -> List[str]:
    return [message for _, message in check_record(payload)]


def _clean_optional(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_record(payload: Mapping) -> Dict[str, Any]:
    """Build the stored form of an already validated payload."""
    return {
        "name": payload["name"].strip(),
        "email": payload["email"].strip().lower(),
        "phone": _clean_optional(payload.get("phone")),
        "course": payload["course"].strip(),
        "feeStatus": payload["feeStatus"],
        "joinDate": parse_join_date(payload["joinDate"]),
        "notes": _clean_optional(payload.get("notes")),
    }
