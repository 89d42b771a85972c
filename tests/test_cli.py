"""
Management commands run against the per-test database.
"""

import pytest

from catalog import cli
from catalog.core.database import init_db
from catalog.core.security import find_token
from catalog.database import seeders
from catalog.models.product import Product
from catalog.models.supplier import Supplier
from catalog.models.user import User


@pytest.fixture
def cli_database(monkeypatch, engine, session_factory):
    """Point the commands' own sessions and table creation at the test engine."""
    for module in (cli, seeders):
        monkeypatch.setattr(module, "SessionLocal", session_factory)
        monkeypatch.setattr(module, "init_db", lambda: init_db(bind=engine))
    return session_factory


class TestIssueTokenCommand:
    def test_creates_user_and_prints_working_token(self, cli_database, db, capsys, client, url):
        assert cli.main(["issue-token", "--email", "ops@example.com", "--token-name", "deploy"]) == 0

        plain_text = capsys.readouterr().out.strip()
        token = find_token(db, plain_text)
        assert token is not None
        assert token.name == "deploy"
        assert token.user.email == "ops@example.com"
        assert token.user.name == "ops"

        response = client.get(url("products.index"), headers={"Authorization": f"Bearer {plain_text}"})
        assert response.status_code == 200

    def test_reuses_existing_user(self, cli_database, db, capsys):
        cli.main(["issue-token", "--email", "ops@example.com"])
        cli.main(["issue-token", "--email", "ops@example.com"])

        first, second = capsys.readouterr().out.split()
        assert first != second
        assert db.query(User).filter(User.email == "ops@example.com").count() == 1
        assert find_token(db, first).user_id == find_token(db, second).user_id


class TestSeedCommand:
    def test_seed_database_uses_given_counts(self, cli_database, db):
        result = seeders.seed_database(supplier_count=3, product_count=7, seed=5)

        assert len(result.supplier_ids) == 3
        assert len(result.product_ids) == 7
        assert db.query(Supplier).count() == 3
        supplier_ids = set(result.supplier_ids)
        assert all(p.supplier_id in supplier_ids for p in db.query(Product).all())

    def test_seed_subcommand_defaults_to_ten_and_hundred(self, cli_database, db, capsys):
        assert cli.main(["seed", "--seed", "11"]) == 0

        assert "Seeded 10 suppliers and 100 products" in capsys.readouterr().out
        assert db.query(Supplier).count() == 10
        assert db.query(Product).count() == 100
