# resell/models/order.py
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


class Order(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True, validate_default=True)

    buyerEmail: str
    productName: str
    status: OrderStatus = OrderStatus.PENDING
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    transactionId: Optional[str] = None
