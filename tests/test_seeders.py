"""
Seeder and factory behaviour.
"""

import random

import pytest

from catalog.database.seeders import pick_supplier_ids, seed_products
from catalog.models.product import Product
from catalog.models.supplier import Supplier


class TestPickSupplierIds:
    def test_only_returns_given_ids(self):
        ids = [3, 7, 11]

        picked = pick_supplier_ids(ids, 50, random.Random(0))

        assert len(picked) == 50
        assert set(picked) <= set(ids)

    def test_same_seed_same_assignment(self):
        ids = list(range(1, 11))

        assert pick_supplier_ids(ids, 100, random.Random(7)) == pick_supplier_ids(ids, 100, random.Random(7))

    def test_zero_products_needs_no_suppliers(self):
        assert pick_supplier_ids([], 0, random.Random()) == []

    def test_products_without_suppliers_is_an_error(self):
        with pytest.raises(ValueError):
            pick_supplier_ids([], 1, random.Random())


class TestSeedProducts:
    def test_creates_ten_suppliers_and_hundred_products(self, db, seeded):
        assert len(seeded.supplier_ids) == 10
        assert len(seeded.product_ids) == 100
        assert db.query(Supplier).count() == 10
        assert db.query(Product).count() == 100

    def test_products_reference_seeded_suppliers(self, db, seeded):
        supplier_ids = set(seeded.supplier_ids)
        for product in db.query(Product).all():
            assert product.supplier_id in supplier_ids
            assert product.name
            assert product.price >= 0

    def test_only_new_suppliers_are_used(self, db, suppliers, fake):
        existing = suppliers.create()
        db.commit()

        result = seed_products(db, supplier_count=2, product_count=20, fake=fake, rng=random.Random(1))

        assert existing.id not in result.supplier_ids
        assert db.query(Product).filter(Product.supplier_id == existing.id).count() == 0


class TestProductFactory:
    def test_payload_creates_a_supplier_when_missing(self, db, products):
        payload = products.payload()

        assert db.get(Supplier, payload["supplier_id"]) is not None
        assert set(payload) == {"name", "description", "price", "supplier_id"}

    def test_overrides_win(self, db, products, suppliers):
        supplier = suppliers.create()

        product = products.create(name="Widget", supplier_id=supplier.id)

        assert product.id is not None
        assert product.name == "Widget"
        assert product.supplier_id == supplier.id
