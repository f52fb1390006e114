# resell/models/user.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    ADMIN = "admin"


class User(BaseModel):
    """Document stored in the Users collection. Extra signup fields are kept as-is."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    email: str
    verified: bool = False
    role: Optional[Role] = None
