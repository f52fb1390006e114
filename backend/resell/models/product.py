# resell/models/product.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    sellerEmail: str
    category: Optional[str] = None
    # Snapshot of the seller's flag at creation; only the seller-verify cascade updates it later
    verified: bool = False
