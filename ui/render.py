# ui/render.py
"""
HTML fragments for the records table.

The page swaps the table body for whatever these functions return, so every
user supplied value is escaped here.
"""
from html import escape
from typing import Any, Dict, Iterable

from models.record import FEE_STATUSES
from services.validation import parse_join_date

COLUMNS = 8


def _text(value: Any, placeholder: str = "-") -> str:
    return escape(str(value)) if value else placeholder


def status_class(status: Any) -> str:
    value = str(status or "").lower()
    return value if value in {s.lower() for s in FEE_STATUSES} else "pending"


def format_date(value: Any) -> str:
    parsed = parse_join_date(value)
    if parsed is None:
        return "-"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _message_row(css_class: str, icon: str, message: str) -> str:
    return (
        f'<tr><td colspan="{COLUMNS}" class="{css_class}">'
        f'<i class="fas {icon}"></i> {message}</td></tr>'
    )


def render_loading_row() -> str:
    return _message_row("loading-message", "fa-spinner fa-spin", "Loading records...")


def render_error_row() -> str:
    return _message_row("no-results", "fa-exclamation-circle", "Error loading records. Please refresh the page.")


def render_row(record: Dict[str, Any]) -> str:
    record_id = escape(str(record["id"]), quote=True)
    name = _text(record.get("name"), "")
    return (
        "<tr>"
        f"<td><strong>{name}</strong></td>"
        f"<td>{_text(record.get('email'), '')}</td>"
        f"<td>{_text(record.get('phone'))}</td>"
        f"<td>{_text(record.get('course'), '')}</td>"
        f'<td><span class="status-badge status-{status_class(record.get("feeStatus"))}">'
        f"{_text(record.get('feeStatus'), '')}</span></td>"
        f"<td>{format_date(record.get('joinDate'))}</td>"
        f"<td>{_text(record.get('notes'))}</td>"
        '<td><div class="action-buttons">'
        f'<button class="btn-icon view" data-action="view" data-id="{record_id}" title="View Details">'
        '<i class="fas fa-eye"></i></button>'
        f'<button class="btn-icon edit" data-action="edit" data-id="{record_id}" title="Edit Student">'
        '<i class="fas fa-edit"></i></button>'
        f'<button class="btn-icon delete" data-action="delete" data-id="{record_id}" data-name="{name}" '
        'title="Delete Student"><i class="fas fa-trash"></i></button>'
        "</div></td>"
        "</tr>"
    )


def render_table(records: Iterable[Dict[str, Any]]) -> str:
    rows = [render_row(record) for record in records]
    if not rows:
        return _message_row("no-results", "fa-user-slash", "No students found")
    return "\n".join(rows)


def describe_record(record: Dict[str, Any]) -> str:
    return "\n".join([
        f"Name: {record.get('name')}",
        f"Email: {record.get('email')}",
        f"Phone: {record.get('phone') or 'N/A'}",
        f"Course: {record.get('course')}",
        f"Fee Status: {record.get('feeStatus')}",
        f"Join Date: {format_date(record.get('joinDate'))}",
        f"Notes: {record.get('notes') or 'No notes'}",
    ])
