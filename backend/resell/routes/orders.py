# resell/routes/orders.py
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query

from resell.core.errors import DuplicateOrderError, ValidationError
from resell.crud import order_crud
from resell.db.database import get_database
from resell.schemas.order import OrderCreate, OrderOut, OrderPaidUpdate
from resell.schemas.results import (
    DeleteResultOut,
    InsertResultOut,
    SoftFailureOut,
    UpdateResultOut,
)
from resell.serialize import (
    delete_result,
    insert_result,
    serialize_doc,
    serialize_list,
    update_result,
)
from resell.utils.object_id import parse_object_id

order_router = APIRouter(tags=["Orders"])
admin_router = APIRouter(tags=["Admin"])


# ------------------------
# Place order
# ------------------------
@order_router.post("/orders", response_model=Union[InsertResultOut, SoftFailureOut])
async def create_order(data: OrderCreate, db=Depends(get_database)):
    try:
        result = await order_crud.create_order(db, data.model_dump(exclude_none=True))
    except DuplicateOrderError as e:
        return SoftFailureOut(message=e.message)
    return insert_result(result)


# ------------------------
# Buyer's orders
# ------------------------
@order_router.get("/orders", response_model=List[OrderOut])
async def list_orders(email: Optional[str] = Query(None), db=Depends(get_database)):
    if not email:
        raise ValidationError("Email is required")
    orders = await order_crud.list_orders_by_buyer(db, email)
    return serialize_list(orders)


@order_router.get("/orders/{order_id}", response_model=Optional[OrderOut])
async def get_order(order_id: str, db=Depends(get_database)):
    order = await order_crud.get_order(db, parse_object_id(order_id, "order id"))
    return serialize_doc(order)


@order_router.delete("/orders/{order_id}", response_model=DeleteResultOut)
async def delete_order(order_id: str, db=Depends(get_database)):
    result = await order_crud.delete_order(db, parse_object_id(order_id, "order id"))
    return delete_result(result)


# ------------------------
# Mark order paid
# ------------------------
@order_router.put("/orders/paid/{order_id}", response_model=UpdateResultOut)
async def mark_order_paid(order_id: str, data: OrderPaidUpdate, db=Depends(get_database)):
    result = await order_crud.mark_paid(
        db, parse_object_id(order_id, "order id"), data.transactionId
    )
    return update_result(result)


# Admin: every order. Not access-controlled.
@admin_router.get("/admin/orders", response_model=List[OrderOut])
async def list_all_orders(db=Depends(get_database)):
    orders = await order_crud.list_all_orders(db)
    return serialize_list(orders)
