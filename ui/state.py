# ui/state.py
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from models.record import EDITABLE_FIELDS

CREATE_MODE = "create"
EDIT_MODE = "edit"

FORM_FIELDS = EDITABLE_FIELDS


def empty_form_values() -> Dict[str, str]:
    values = {name: "" for name in FORM_FIELDS}
    values["joinDate"] = date.today().isoformat()
    return values


@dataclass
class Notification:
    level: str
    message: str
    duration: float = 3.0


@dataclass
class FormState:
    mode: str = CREATE_MODE
    editing_id: Optional[str] = None
    values: Dict[str, str] = field(default_factory=empty_form_values)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return "Edit Student" if self.mode == EDIT_MODE else "Add New Student"

    @property
    def submit_label(self) -> str:
        return "Update Student" if self.mode == EDIT_MODE else "Save Student"

    def reset(self):
        self.mode = CREATE_MODE
        self.editing_id = None
        self.values = empty_form_values()
        self.errors = {}

    def load(self, record: Dict[str, Any]):
        self.mode = EDIT_MODE
        self.editing_id = record["id"]
        self.values = {name: record.get(name) or "" for name in FORM_FIELDS}
        self.values["joinDate"] = str(record.get("joinDate", ""))[:10]
        self.errors = {}


@dataclass
class AppState:
    """Everything the page keeps between requests."""
    records: List[Dict[str, Any]] = field(default_factory=list)
    pending_delete_id: Optional[str] = None
    pending_delete_name: str = ""
    form: FormState = field(default_factory=FormState)
    notifications: List[Notification] = field(default_factory=list)

    def notify(self, message: str, level: str = "info", duration: float = 3.0) -> Notification:
        notification = Notification(level=level, message=message, duration=duration)
        self.notifications.append(notification)
        return notification

    def find_record(self, record_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self.records if r.get("id") == record_id), None)
