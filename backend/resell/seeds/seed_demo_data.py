import logging

from resell.crud import order_crud, product_crud, user_crud
from resell.models.user import Role
from resell.services.seller_verification import verify_seller

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"email": "admin@resell.bd", "name": "Resell Admin"},
    {"email": "rahim@resell.bd", "name": "Rahim Uddin"},
    {"email": "karim@resell.bd", "name": "Karim Hasan"},
    {"email": "nadia@resell.bd", "name": "Nadia Islam"},
]

DEMO_PRODUCTS = [
    {"name": "Walton Primo R8", "category": "phones", "price": 9500, "sellerEmail": "rahim@resell.bd"},
    {"name": "HP EliteBook 840 G5", "category": "laptops", "price": 38000, "sellerEmail": "rahim@resell.bd"},
    {"name": "Canon EOS 1500D", "category": "cameras", "price": 27000, "sellerEmail": "karim@resell.bd"},
]

DEMO_ORDERS = [
    {"buyerEmail": "nadia@resell.bd", "productName": "Canon EOS 1500D", "price": 27000},
]


async def seed_demo_data(db):
    """Load demo users/products/orders through the same paths the API uses. Safe to re-run."""
    users = {}
    for data in DEMO_USERS:
        if not await user_crud.get_user_by_email(db, data["email"]):
            await user_crud.create_user(db, data)
        users[data["email"]] = await user_crud.get_user_by_email(db, data["email"])

    await user_crud.set_role(db, users["admin@resell.bd"]["_id"], Role.ADMIN)

    existing = {p.get("name") for p in await product_crud.list_products(db)}
    for data in DEMO_PRODUCTS:
        if data["name"] not in existing:
            await product_crud.create_product(db, data)

    # rahim is the verified seller; karim's listing stays unverified
    await verify_seller(db, users["rahim@resell.bd"]["_id"])

    for data in DEMO_ORDERS:
        if not await order_crud.find_existing_order(db, data["buyerEmail"], data["productName"]):
            await order_crud.create_order(db, data)

    logger.info("Demo data seeded!")
