# resell/crud/user_crud.py
from pymongo.errors import DuplicateKeyError

from resell.core.errors import UserExistsError
from resell.db.database import USERS
from resell.models.user import Role, User


async def get_user_by_email(db, email: str):
    return await db[USERS].find_one({"email": email})


async def get_user(db, user_id):
    return await db[USERS].find_one({"_id": user_id})


async def list_users(db, email=None):
    query = {"email": email} if email else {}
    return await db[USERS].find(query).to_list(length=None)


# Create user, refusing duplicate emails
async def create_user(db, data: dict):
    if await get_user_by_email(db, data["email"]):
        raise UserExistsError()

    # Signup never grants verification or a role
    user = User(**{k: v for k, v in data.items() if k not in ("verified", "role")})
    try:
        return await db[USERS].insert_one(user.model_dump(exclude_none=True))
    except DuplicateKeyError:
        raise UserExistsError()


async def set_role(db, user_id, role: Role):
    return await db[USERS].update_one({"_id": user_id}, {"$set": {"role": role.value}})


async def mark_verified(db, user_id):
    return await db[USERS].update_one({"_id": user_id}, {"$set": {"verified": True}})


async def delete_user(db, user_id):
    return await db[USERS].delete_one({"_id": user_id})
