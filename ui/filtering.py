# ui/filtering.py
from typing import Any, Dict, Iterable, List


def matches_search(record: Dict[str, Any], term: str) -> bool:
    if not term:
        return True
    return any(term in str(record.get(key) or "").lower() for key in ("name", "email", "course"))


def filter_records(records: Iterable[Dict[str, Any]], search: str = "", status: str = "") -> List[Dict[str, Any]]:
    """Filter an already loaded record list without touching the network."""
    term = (search or "").strip().lower()
    return [
        record for record in records
        if matches_search(record, term) and (not status or record.get("feeStatus") == status)
    ]
