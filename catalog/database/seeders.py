# catalog/database/seeders.py

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from faker import Faker
from sqlalchemy.orm import Session

from catalog.core.config import settings
from catalog.core.database import SessionLocal, init_db
from catalog.database.factories import ProductFactory, SupplierFactory

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    supplier_ids: List[int] = field(default_factory=list)
    product_ids: List[int] = field(default_factory=list)


def pick_supplier_ids(supplier_ids: Sequence[int], count: int, rng: random.Random) -> List[int]:
    """One supplier id per product, uniform and with replacement."""
    if count > 0 and not supplier_ids:
        raise ValueError("Cannot assign products without any supplier ids")
    return [rng.choice(supplier_ids) for _ in range(count)]


def seed_products(
    db: Session,
    supplier_count: int = 10,
    product_count: int = 100,
    fake: Optional[Faker] = None,
    rng: Optional[random.Random] = None,
) -> SeedResult:
    """
    Create ``supplier_count`` suppliers, then ``product_count`` products that
    each reference one of those suppliers. Commits once at the end.
    """
    fake = fake or Faker()
    rng = rng or random.Random()  # noqa: S311

    suppliers = SupplierFactory(db, fake).create_many(supplier_count)
    supplier_ids = [s.id for s in suppliers]

    product_factory = ProductFactory(db, fake)
    products = [
        product_factory.create(supplier_id=supplier_id)
        for supplier_id in pick_supplier_ids(supplier_ids, product_count, rng)
    ]

    db.commit()

    result = SeedResult(supplier_ids=supplier_ids, product_ids=[p.id for p in products])
    logger.info(f"Seeded {len(result.supplier_ids)} suppliers and {len(result.product_ids)} products")
    return result


def seed_database(
    supplier_count: Optional[int] = None,
    product_count: Optional[int] = None,
    seed: Optional[int] = None,
) -> SeedResult:
    """Entry point used by the CLI: own session, tables created first."""
    supplier_count = settings.SEED_SUPPLIERS if supplier_count is None else supplier_count
    product_count = settings.SEED_PRODUCTS if product_count is None else product_count
    seed = settings.SEED_RANDOM_SEED if seed is None else seed

    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    init_db()
    db = SessionLocal()
    try:
        return seed_products(
            db,
            supplier_count=supplier_count,
            product_count=product_count,
            fake=fake,
            rng=random.Random(seed),  # noqa: S311
        )
    except Exception:
        db.rollback()
        logger.exception("Seeding failed, rolled back")
        raise
    finally:
        db.close()
