"""
pytest fixtures: a fresh in-memory SQLite database per test, the FastAPI app
wired to it, and a bearer token for an authenticated user.
"""

import random

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.core.database import create_db_engine, get_db, init_db
from catalog.core.security import issue_token
from catalog.database.factories import ProductFactory, SupplierFactory, UserFactory
from catalog.database.seeders import seed_products
from main import app


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fake():
    fake = Faker()
    fake.seed_instance(1234)
    return fake


@pytest.fixture
def suppliers(db, fake):
    return SupplierFactory(db, fake)


@pytest.fixture
def products(db, fake):
    return ProductFactory(db, fake)


@pytest.fixture
def seeded(db, fake):
    return seed_products(db, supplier_count=10, product_count=100, fake=fake, rng=random.Random(42))


@pytest.fixture
def token(db, fake):
    user = UserFactory(db, fake).create()
    db.commit()
    return issue_token(db, user, "MyApp")


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def url():
    return app.url_path_for
