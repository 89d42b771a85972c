# catalog/services/products.py

from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from catalog.core.database import fits_integer_id
from catalog.models.product import Product
from catalog.schemas.product import ProductIn


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id.asc()).all()


def get_product(db: Session, product_id: int) -> Product | None:
    if not fits_integer_id(product_id):
        return None
    return db.query(Product).filter(Product.id == product_id).first()


def create_product(db: Session, payload: ProductIn) -> Product:
    product = Product(**payload.model_dump())

    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def update_product(db: Session, product: Product, payload: ProductIn) -> Product:
    # Full replace: every editable field comes from the payload
    for field, value in payload.model_dump().items():
        setattr(product, field, value)

    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product: Product) -> None:
    db.delete(product)
    db.commit()
