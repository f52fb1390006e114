# resell/crud/order_crud.py
from pymongo.errors import DuplicateKeyError

from resell.core.errors import DuplicateOrderError
from resell.db.database import ORDERS
from resell.models.order import Order, OrderStatus


async def find_existing_order(db, buyer_email: str, product_name: str):
    return await db[ORDERS].find_one({"buyerEmail": buyer_email, "productName": product_name})


# One order per (buyerEmail, productName); a different buyer may order the same product
async def create_order(db, data: dict):
    if await find_existing_order(db, data["buyerEmail"], data["productName"]):
        raise DuplicateOrderError()

    payload = {k: v for k, v in data.items() if k not in ("status", "createdAt", "transactionId")}
    order = Order(**payload)
    try:
        return await db[ORDERS].insert_one(order.model_dump(exclude_none=True))
    except DuplicateKeyError:
        raise DuplicateOrderError()


async def list_orders_by_buyer(db, email: str):
    return await db[ORDERS].find({"buyerEmail": email}).to_list(length=None)


async def list_all_orders(db):
    return await db[ORDERS].find({}).to_list(length=None)


async def get_order(db, order_id):
    return await db[ORDERS].find_one({"_id": order_id})


async def delete_order(db, order_id):
    return await db[ORDERS].delete_one({"_id": order_id})


async def mark_paid(db, order_id, transaction_id: str):
    # Trusts the caller: the payment itself is not checked with the provider
    return await db[ORDERS].update_one(
        {"_id": order_id},
        {"$set": {"status": OrderStatus.PAID.value, "transactionId": transaction_id}},
    )
