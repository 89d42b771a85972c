# catalog/schemas/product.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.core.database import MAX_INTEGER_ID

# products.price is Numeric(10, 2)
MAX_PRICE = 10**8


class ProductIn(BaseModel):
    """Fields accepted by create and update; update replaces all of them."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = Field(ge=0, lt=MAX_PRICE, allow_inf_nan=False)
    supplier_id: int = Field(gt=0, le=MAX_INTEGER_ID)


class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    supplier_id: int
    created_at: datetime
    updated_at: datetime

    # Pydantic v2:
    model_config = ConfigDict(from_attributes=True)
