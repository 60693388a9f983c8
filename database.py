# database.py
import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

import config
from services.record_gateway import RecordGateway

logger = logging.getLogger(__name__)

client: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None


async def connect() -> AsyncIOMotorDatabase:
    """Open the store connection, verify it and create the record indexes."""
    global client, db
    client = AsyncIOMotorClient(
        config.MONGODB_URI,
        maxPoolSize=10,
        serverSelectionTimeoutMS=5000,
        socketTimeoutMS=45000,
        tz_aware=True,
    )
    await client.admin.command("ping")
    logger.info(f"Connected to MongoDB, database: {config.DB_NAME}")

    db = client[config.DB_NAME]
    await init_db(db)
    return db


async def init_db(database: AsyncIOMotorDatabase):
    await RecordGateway(database[config.COLLECTION_NAME]).ensure_indexes()
    logger.info("Database indexes created")


async def close():
    global client, db
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")
    client = None
    db = None


async def ping(database: Optional[AsyncIOMotorDatabase]) -> bool:
    if database is None:
        return False
    try:
        await database.command("ping")
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False


def get_db() -> AsyncIOMotorDatabase:
    if db is None:
        raise RuntimeError("Database is not connected")
    return db
