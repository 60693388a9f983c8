# models/record.py
from pydantic import BaseModel
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class FeeStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    PARTIAL = "Partial"
    SCHOLARSHIP = "Scholarship"


FEE_STATUSES = tuple(status.value for status in FeeStatus)

EDITABLE_FIELDS = ("name", "email", "phone", "course", "feeStatus", "joinDate", "notes")


class Record(BaseModel):
    id: str
    name: str
    email: str
    phone: str = ""
    course: str
    feeStatus: FeeStatus
    joinDate: datetime
    notes: str = ""
    createdAt: datetime
    updatedAt: datetime


class Envelope(BaseModel):
    success: bool
    message: Optional[str] = None
    errors: Optional[List[str]] = None


class RecordEnvelope(Envelope):
    data: Optional[Record] = None


class RecordListEnvelope(Envelope):
    count: int
    data: List[Record] = []


def _as_utc(value: Any) -> Any:
    # Documents read without tz_aware come back naive, stored as UTC
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def serialize_record(document: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": str(document["_id"]),
        "name": document["name"],
        "email": document["email"],
        "phone": document.get("phone", ""),
        "course": document["course"],
        "feeStatus": document["feeStatus"],
        "joinDate": _as_utc(document["joinDate"]),
        "notes": document.get("notes", ""),
        "createdAt": _as_utc(document["createdAt"]),
        "updatedAt": _as_utc(document["updatedAt"]),
    }
