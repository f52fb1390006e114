# resell/db/indexes.py
import logging

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from resell.db.database import ORDERS, PRODUCTS, USERS

logger = logging.getLogger(__name__)


async def ensure_indexes(db):
    """
    Back the duplicate checks with unique indexes so two racing requests
    cannot both insert. Existing duplicates make index creation fail; that
    is logged and the app keeps running on the pre-insert checks alone.
    """
    try:
        await db[USERS].create_index([("email", ASCENDING)], unique=True, name="email_unique")
        await db[ORDERS].create_index(
            [("buyerEmail", ASCENDING), ("productName", ASCENDING)],
            unique=True,
            name="buyer_product_unique",
        )
        await db[PRODUCTS].create_index([("sellerEmail", ASCENDING)], name="seller_email")
        await db[PRODUCTS].create_index([("category", ASCENDING)], name="category")
    except PyMongoError as e:
        logger.error("Index creation failed: %s", e)
        return False

    logger.info("MongoDB indexes ensured.")
    return True
