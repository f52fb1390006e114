# resell/routes/users.py
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query

from resell.core.errors import UserExistsError
from resell.crud import user_crud
from resell.db.database import get_database
from resell.models.user import Role
from resell.schemas.results import (
    DeleteResultOut,
    InsertResultOut,
    SoftFailureOut,
    UpdateResultOut,
)
from resell.schemas.user import UserCreate, UserOut, VerifyResultOut
from resell.serialize import delete_result, insert_result, serialize_list, update_result
from resell.services.seller_verification import verify_seller
from resell.utils.object_id import parse_object_id

user_router = APIRouter(tags=["Users"])


# ------------------------
# Signup
# ------------------------
@user_router.post("/users", response_model=Union[InsertResultOut, SoftFailureOut])
async def create_user(data: UserCreate, db=Depends(get_database)):
    try:
        result = await user_crud.create_user(db, data.model_dump(exclude_none=True))
    except UserExistsError as e:
        return SoftFailureOut(message=e.message)
    return insert_result(result)


@user_router.get("/users", response_model=List[UserOut])
async def list_users(email: Optional[str] = Query(None), db=Depends(get_database)):
    users = await user_crud.list_users(db, email)
    return serialize_list(users)


@user_router.put("/users/admin/{user_id}", response_model=UpdateResultOut)
async def make_admin(user_id: str, db=Depends(get_database)):
    result = await user_crud.set_role(db, parse_object_id(user_id, "user id"), Role.ADMIN)
    return update_result(result)


# ------------------------
# Verify seller + their products
# ------------------------
@user_router.put("/users/verify/{user_id}", response_model=VerifyResultOut)
async def verify_user(user_id: str, db=Depends(get_database)):
    return await verify_seller(db, parse_object_id(user_id, "user id"))


@user_router.delete("/users/{user_id}", response_model=DeleteResultOut)
async def delete_user(user_id: str, db=Depends(get_database)):
    result = await user_crud.delete_user(db, parse_object_id(user_id, "user id"))
    return delete_result(result)
