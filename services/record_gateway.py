# services/record_gateway.py
import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

from services.errors import MalformedIdentifier

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "email", "course")
SORT_FIELDS = {"name", "email", "phone", "course", "feeStatus", "joinDate", "createdAt", "updatedAt"}
DEFAULT_SORT_FIELD = "joinDate"


def parse_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise MalformedIdentifier(value)
    return ObjectId(value)


def build_filter(search: Optional[str] = None, status: Optional[str] = None) -> Dict[str, Any]:
    """Exact fee status match combined with a literal, case-insensitive text search."""
    query: Dict[str, Any] = {}
    if status:
        query["feeStatus"] = status
    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in SEARCH_FIELDS
        ]
    return query


def build_sort(sort_by: Optional[str] = None, sort_order: Optional[str] = "desc") -> List[Tuple[str, int]]:
    field = sort_by or DEFAULT_SORT_FIELD
    if field not in SORT_FIELDS:
        logger.warning(f"Unknown sort field '{field}', sorting by {DEFAULT_SORT_FIELD}")
        field = DEFAULT_SORT_FIELD
    direction = DESCENDING if (sort_order or "desc").lower() == "desc" else ASCENDING
    return [(field, direction)]


class RecordGateway:
    """Thin accessor over the student records collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index("name")
        await self.collection.create_index("email", unique=True)
        await self.collection.create_index("course")
        await self.collection.create_index("feeStatus")
        await self.collection.create_index([("joinDate", DESCENDING)])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one(query)

    async def find_many(self, query: Dict[str, Any], sort: List[Tuple[str, int]]) -> List[Dict[str, Any]]:
        return await self.collection.find(query, sort=sort).to_list(None)

    async def find_by_id(self, record_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.find_one({"_id": record_id})

    async def find_by_email(self, email: str, exclude_id: Optional[ObjectId] = None) -> Optional[Dict[str, Any]]:
        query: Dict[str, Any] = {"email": email}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        return await self.find_one(query)

    async def insert_one(self, document: Dict[str, Any]) -> ObjectId:
        result = await self.collection.insert_one(document)
        return result.inserted_id

    async def update_one(self, record_id: ObjectId, fields: Dict[str, Any]) -> bool:
        result = await self.collection.update_one({"_id": record_id}, {"$set": fields})
        return result.matched_count > 0

    async def delete_one(self, record_id: ObjectId) -> bool:
        result = await self.collection.delete_one({"_id": record_id})
        return result.deleted_count > 0
