# ui/controller.py
import logging
from typing import Any, Dict, Optional

from services.validation import check_record
from ui.api import ApiError, RecordsApi
from ui.filtering import filter_records
from ui.render import describe_record, render_error_row, render_table
from ui.state import EDIT_MODE, FORM_FIELDS, AppState

logger = logging.getLogger(__name__)


class RecordController:
    """Drives the records page: the form, the table and the delete dialog.

    All page state lives on ``self.state``; each method returns the table
    body HTML when it changes what the table should show.
    """

    def __init__(self, api: RecordsApi, state: Optional[AppState] = None):
        self.api = api
        self.state = state or AppState()

    async def load_records(self) -> str:
        try:
            self.state.records = await self.api.list_records()
        except ApiError as e:
            logger.error(f"Error loading students: {e.message}")
            self.state.notify("Failed to load records. Please try again.", "error")
            return render_error_row()
        self.state.notify("Records loaded successfully", "success")
        return render_table(self.state.records)

    def apply_filter(self, search: str = "", status: str = "") -> str:
        return render_table(filter_records(self.state.records, search, status))

    def _form_payload(self, values: Dict[str, Any]) -> Dict[str, Any]:
        payload = {}
        for name in FORM_FIELDS:
            value = values.get(name)
            payload[name] = value.strip() if isinstance(value, str) else (value or "")
        return payload

    async def submit_form(self, values: Dict[str, Any]) -> bool:
        form = self.state.form
        form.values = {name: values.get(name) or "" for name in FORM_FIELDS}
        form.errors = {}
        for name, message in check_record(self._form_payload(values)):
            form.errors.setdefault(name, message)
        if form.errors:
            self.state.notify("Please fix validation errors", "error")
            return False

        payload = self._form_payload(values)
        editing = bool(form.mode == EDIT_MODE and form.editing_id)
        try:
            if editing:
                await self.api.update_record(form.editing_id, payload)
            else:
                await self.api.create_record(payload)
        except ApiError as e:
            logger.error(f"Error saving student: {e.message}")
            self.state.notify(f"Failed to save: {e.message}", "error")
            return False

        self.state.notify("Student updated successfully" if editing else "Student added successfully", "success")
        form.reset()
        await self.load_records()
        return True

    async def start_edit(self, record_id: str) -> bool:
        try:
            record = await self.api.get_record(record_id)
        except ApiError as e:
            logger.error(f"Error fetching student {record_id}: {e.message}")
            self.state.notify("Failed to load student details", "error")
            return False
        self.state.form.load(record)
        return True

    def cancel_edit(self):
        self.state.form.reset()

    def request_delete(self, record_id: str, name: str = ""):
        self.state.pending_delete_id = record_id
        self.state.pending_delete_name = name

    def cancel_delete(self):
        self.state.pending_delete_id = None
        self.state.pending_delete_name = ""

    async def confirm_delete(self) -> bool:
        record_id = self.state.pending_delete_id
        if not record_id:
            return False
        try:
            await self.api.delete_record(record_id)
        except ApiError as e:
            logger.error(f"Error deleting student {record_id}: {e.message}")
            self.state.notify("Failed to delete student", "error")
            self.cancel_delete()
            return False

        self.state.notify("Student deleted successfully", "success")
        self.cancel_delete()
        await self.load_records()
        return True

    def view_record(self, record_id: str) -> Optional[str]:
        record = self.state.find_record(record_id)
        if record is None:
            return None
        details = describe_record(record)
        self.state.notify(details, "info", duration=5.0)
        return details
