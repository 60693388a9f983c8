# services/record_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from pymongo.errors import DuplicateKeyError

from services.errors import DuplicateEmail, RecordNotFound, RecordValidationError
from services.record_gateway import RecordGateway, build_filter, build_sort, parse_object_id
from services.validation import normalize_record, validate_record

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    # Stored datetimes keep millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class RecordService:
    """Create, read, update and delete student records.

    Every write is validated first. Email uniqueness is checked before writing
    to give a clear conflict message, and the unique index on ``email`` is the
    final guard: a ``DuplicateKeyError`` from the store maps to the same
    ``DuplicateEmail`` error.
    """

    def __init__(self, gateway: RecordGateway, clock: Callable[[], datetime] = utc_now):
        self.gateway = gateway
        self.clock = clock

    def _validated(self, payload: Any) -> Dict[str, Any]:
        errors = validate_record(payload)
        if errors:
            logger.info(f"Validation failed: {errors}")
            raise RecordValidationError(errors)
        return normalize_record(payload)

    async def create(self, payload: Any) -> Dict[str, Any]:
        student = self._validated(payload)

        if await self.gateway.find_by_email(student["email"]):
            logger.warning(f"Duplicate email on create: {student['email']}")
            raise DuplicateEmail(student["email"])

        now = self.clock()
        student["createdAt"] = now
        student["updatedAt"] = now
        try:
            inserted_id = await self.gateway.insert_one(dict(student))
        except DuplicateKeyError:
            logger.warning(f"Unique index rejected email on create: {student['email']}")
            raise DuplicateEmail(student["email"])

        logger.info(f"Created student {inserted_id}")
        return {"_id": inserted_id, **student}

    async def list(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        query = build_filter(search, status)
        sort = build_sort(sort_by, sort_order)
        return await self.gateway.find_many(query, sort)

    async def get(self, record_id: str) -> Dict[str, Any]:
        oid = parse_object_id(record_id)
        student = await self.gateway.find_by_id(oid)
        if not student:
            logger.warning(f"Student not found: {record_id}")
            raise RecordNotFound(record_id)
        return student

    async def update(self, record_id: str, payload: Any) -> Dict[str, Any]:
        oid = parse_object_id(record_id)
        update_data = self._validated(payload)

        if await self.gateway.find_by_email(update_data["email"], exclude_id=oid):
            logger.warning(f"Duplicate email on update of {record_id}: {update_data['email']}")
            raise DuplicateEmail(update_data["email"])

        update_data["updatedAt"] = self.clock()
        try:
            matched = await self.gateway.update_one(oid, update_data)
        except DuplicateKeyError:
            logger.warning(f"Unique index rejected email on update of {record_id}: {update_data['email']}")
            raise DuplicateEmail(update_data["email"])

        if not matched:
            logger.warning(f"Student not found for update: {record_id}")
            raise RecordNotFound(record_id)

        student = await self.gateway.find_by_id(oid)
        if not student:
            raise RecordNotFound(record_id)
        logger.info(f"Updated student {record_id}")
        return student

    async def delete(self, record_id: str) -> None:
        oid = parse_object_id(record_id)
        if not await self.gateway.delete_one(oid):
            logger.warning(f"Student not found for delete: {record_id}")
            raise RecordNotFound(record_id)
        logger.info(f"Deleted student {record_id}")
