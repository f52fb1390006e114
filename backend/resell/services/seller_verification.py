"""
Seller verification.

Verifying a user is two separate writes: the user document first, then every
product listed under that user's email. There is no transaction around them.
If the second write fails, the user stays verified while the products keep
their old flag. Both writes are plain ``$set`` updates, so calling
``verify_seller`` again finishes the job.
"""
import logging

from resell.core.errors import NotFoundError
from resell.crud import product_crud, user_crud

logger = logging.getLogger(__name__)


async def verify_seller(db, user_id):
    user = await user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    user_update = await user_crud.mark_verified(db, user_id)
    product_update = await product_crud.mark_seller_products_verified(db, user["email"])

    logger.info(
        "Verified seller %s: user modified=%s, products modified=%s",
        user["email"], user_update.modified_count, product_update.modified_count,
    )
    return {
        "userUpdated": user_update.modified_count,
        "productsUpdated": product_update.modified_count,
    }
