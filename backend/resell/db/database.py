# resell/db/database.py
import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from resell.core.config import Settings

logger = logging.getLogger(__name__)

USERS = "Users"
PRODUCTS = "Products"
ORDERS = "Orders"


def create_client(settings: Settings) -> AsyncIOMotorClient:
    # Stable API v1, same as the Atlas cluster expects
    return AsyncIOMotorClient(
        settings.mongo_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def check_connection(client: AsyncIOMotorClient, settings: Settings) -> bool:
    """Ping the cluster. Raises when MONGO_FAIL_FAST is set, otherwise logs and returns False."""
    try:
        await asyncio.wait_for(
            client.admin.command("ping"), timeout=settings.MONGO_STARTUP_TIMEOUT
        )
        logger.info("MongoDB connected successfully.")
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        if settings.MONGO_FAIL_FAST:
            raise
        return False


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency: the database handle owned by the app lifespan."""
    return request.app.state.database
