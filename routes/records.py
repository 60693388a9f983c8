# routes/records.py
from fastapi import APIRouter, Body, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, Optional
import logging

import config
from database import get_db
from models.record import Envelope, RecordEnvelope, RecordListEnvelope, serialize_record
from services.record_gateway import RecordGateway
from services.record_service import RecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/records", tags=["records"])


def get_record_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> RecordService:
    return RecordService(RecordGateway(db[config.COLLECTION_NAME]))


@router.post("", status_code=201, response_model=RecordEnvelope, response_model_exclude_none=True)
async def create_record(
    payload: Dict[str, Any] = Body(...),
    service: RecordService = Depends(get_record_service),
):
    logger.info(f"Creating new record: {payload}")
    student = await service.create(payload)
    return {
        "success": True,
        "message": "Student created successfully",
        "data": serialize_record(student),
    }


@router.get("", response_model=RecordListEnvelope, response_model_exclude_none=True)
async def list_records(
    search: Optional[str] = None,
    status: Optional[str] = None,
    sort_by: str = Query("joinDate", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    service: RecordService = Depends(get_record_service),
):
    students = await service.list(search=search, status=status, sort_by=sort_by, sort_order=sort_order)
    return {
        "success": True,
        "count": len(students),
        "data": [serialize_record(s) for s in students],
    }


@router.get("/{id}", response_model=RecordEnvelope, response_model_exclude_none=True)
async def get_record(id: str, service: RecordService = Depends(get_record_service)):
    student = await service.get(id)
    return {"success": True, "data": serialize_record(student)}


@router.put("/{id}", response_model=RecordEnvelope, response_model_exclude_none=True)
async def update_record(
    id: str,
    payload: Dict[str, Any] = Body(...),
    service: RecordService = Depends(get_record_service),
):
    logger.info(f"Updating record {id}: {payload}")
    student = await service.update(id, payload)
    return {
        "success": True,
        "message": "Student updated successfully",
        "data": serialize_record(student),
    }


@router.delete("/{id}", response_model=Envelope, response_model_exclude_none=True)
async def delete_record(id: str, service: RecordService = Depends(get_record_service)):
    await service.delete(id)
    return {"success": True, "message": "Student deleted successfully"}
