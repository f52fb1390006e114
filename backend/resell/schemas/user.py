from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Validate only; the address is the exact-match key for products and orders
        validate_email(value)
        if "<" in value:
            raise ValueError("email must be a bare address")
        return value


class UserOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    verified: bool = False
    role: Optional[str] = None


class VerifyResultOut(BaseModel):
    userUpdated: int
    productsUpdated: int
