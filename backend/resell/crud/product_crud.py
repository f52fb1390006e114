# resell/crud/product_crud.py
from resell.crud import user_crud
from resell.db.database import PRODUCTS
from resell.models.product import Product


async def create_product(db, data: dict):
    seller = await user_crud.get_user_by_email(db, data["sellerEmail"])
    product = Product(**data)
    # Snapshot, not a live join: later seller changes do not flow here
    product.verified = bool(seller.get("verified")) if seller else False
    return await db[PRODUCTS].insert_one(product.model_dump(exclude_none=True))


async def list_products(db, category=None):
    query = {"category": category} if category else {}
    return await db[PRODUCTS].find(query).to_list(length=None)


async def mark_seller_products_verified(db, seller_email: str):
    return await db[PRODUCTS].update_many(
        {"sellerEmail": seller_email},
        {"$set": {"verified": True}},
    )
