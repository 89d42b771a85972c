# catalog/database/factories.py
"""
Faker-backed model factories used by the seeders and the test-suite.

``make`` builds an unsaved instance, ``create`` persists it (flush only, the
caller owns the transaction).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from faker import Faker
from sqlalchemy.orm import Session

from catalog.models.product import Product
from catalog.models.supplier import Supplier
from catalog.models.user import User


class _Factory:
    def __init__(self, db: Session, fake: Optional[Faker] = None):
        self.db = db
        self.fake = fake or Faker()

    def _persist(self, instance):
        self.db.add(instance)
        self.db.flush()
        return instance


class SupplierFactory(_Factory):
    def definition(self) -> Dict[str, Any]:
        return {
            "name": self.fake.company(),
            "email": self.fake.company_email(),
            "phone": self.fake.phone_number()[:50],
            "address": self.fake.address(),
        }

    def make(self, **overrides) -> Supplier:
        return Supplier(**{**self.definition(), **overrides})

    def create(self, **overrides) -> Supplier:
        return self._persist(self.make(**overrides))

    def create_many(self, count: int, **overrides) -> List[Supplier]:
        return [self.create(**overrides) for _ in range(count)]


class ProductFactory(_Factory):
    def definition(self) -> Dict[str, Any]:
        return {
            "name": self.fake.unique.catch_phrase(),
            "description": self.fake.paragraph(nb_sentences=3),
            "price": float(self.fake.pydecimal(left_digits=4, right_digits=2, positive=True)),
        }

    def payload(self, **overrides) -> Dict[str, Any]:
        """Attributes of an unsaved product, shaped like an API request body."""
        attributes = {**self.definition(), **overrides}
        if "supplier_id" not in attributes:
            attributes["supplier_id"] = SupplierFactory(self.db, self.fake).create().id
        return attributes

    def make(self, **overrides) -> Product:
        return Product(**self.payload(**overrides))

    def create(self, **overrides) -> Product:
        return self._persist(self.make(**overrides))


class UserFactory(_Factory):
    def definition(self) -> Dict[str, Any]:
        return {
            "name": self.fake.name(),
            "email": self.fake.unique.email(),
        }

    def create(self, **overrides) -> User:
        return self._persist(User(**{**self.definition(), **overrides}))
