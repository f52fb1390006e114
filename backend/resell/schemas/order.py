from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    buyerEmail: str
    productName: str


class OrderOut(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id")
    buyerEmail: str
    productName: str
    status: str
    createdAt: Optional[datetime] = None
    transactionId: Optional[str] = None


class OrderPaidUpdate(BaseModel):
    transactionId: str
