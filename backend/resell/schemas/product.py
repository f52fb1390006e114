from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    sellerEmail: str
    category: Optional[str] = None
    name: Optional[str] = None


class ProductOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    sellerEmail: str
    category: Optional[str] = None
    verified: bool = False
