# resell/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from resell.crud import product_crud
from resell.db.database import get_database
from resell.schemas.product import ProductCreate, ProductOut
from resell.schemas.results import InsertResultOut
from resell.serialize import insert_result, serialize_list

product_router = APIRouter(tags=["Products"])


# ------------------------
# Add product (verified copied from seller)
# ------------------------
@product_router.post("/products", response_model=InsertResultOut)
async def create_product(data: ProductCreate, db=Depends(get_database)):
    result = await product_crud.create_product(db, data.model_dump(exclude_none=True))
    return insert_result(result)


# ------------------------
# List products, optionally by category
# ------------------------
@product_router.get("/products", response_model=List[ProductOut])
async def list_products(category: Optional[str] = Query(None), db=Depends(get_database)):
    products = await product_crud.list_products(db, category)
    return serialize_list(products)
