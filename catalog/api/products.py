# catalog/api/products.py

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from catalog.core.config import settings
from catalog.core.database import get_db
from catalog.core.errors import VALIDATION_ERROR_MESSAGE
from catalog.core.responses import send_error, send_response
from catalog.core.security import get_current_user
from catalog.schemas.product import ProductOut
from catalog.schemas.response import ApiError, ApiResponse
from catalog.services import products as product_service
from catalog.services.validation import validate_product_payload

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found."

router = APIRouter(
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"model": ApiError},
        404: {"model": ApiError},
    },
)


def _not_found(product_id: int):
    logger.info(f"Product {product_id} not found")
    return send_error(PRODUCT_NOT_FOUND)


def _invalid(errors: dict):
    logger.info(f"Product payload rejected: {errors}")
    return send_error(
        VALIDATION_ERROR_MESSAGE,
        errors=errors,
        status_code=settings.VALIDATION_ERROR_STATUS,
    )


@router.get("", name="products.index", response_model=ApiResponse[List[ProductOut]])
def index(db: Session = Depends(get_db)):
    """
    Lists every product.
    """
    products = product_service.list_products(db)
    return send_response(
        [ProductOut.model_validate(p) for p in products],
        "Products retrieved successfully.",
    )


@router.post("", name="products.store", response_model=ApiResponse[ProductOut])
def store(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Creates a product. Nothing is written unless the whole payload is valid.
    """
    result = validate_product_payload(payload, db)
    if not result.ok:
        return _invalid(result.errors)

    product = product_service.create_product(db, result.data)
    logger.info(f"Created product {product.id} for supplier {product.supplier_id}")

    return send_response(ProductOut.model_validate(product), "Product created successfully.")


@router.get("/{product_id}", name="products.show", response_model=ApiResponse[ProductOut])
def show(product_id: int, db: Session = Depends(get_db)):
    product = product_service.get_product(db, product_id)
    if product is None:
        return _not_found(product_id)

    return send_response(ProductOut.model_validate(product), "Product retrieved successfully.")


@router.put("/{product_id}", name="products.update", response_model=ApiResponse[ProductOut])
def update(product_id: int, payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Replaces name, description, price and supplier_id of an existing product.
    """
    product = product_service.get_product(db, product_id)
    if product is None:
        return _not_found(product_id)

    result = validate_product_payload(payload, db)
    if not result.ok:
        return _invalid(result.errors)

    product = product_service.update_product(db, product, result.data)
    logger.info(f"Updated product {product.id}")

    return send_response(ProductOut.model_validate(product), "Product updated successfully.")


@router.delete("/{product_id}", name="products.destroy", response_model=ApiResponse[List[Any]])
def destroy(product_id: int, db: Session = Depends(get_db)):
    product = product_service.get_product(db, product_id)
    if product is None:
        return _not_found(product_id)

    product_service.delete_product(db, product)
    logger.info(f"Deleted product {product_id}")

    return send_response([], "Product deleted successfully.")
