# catalog/core/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog.core.config import settings

# Largest id a signed 64-bit INTEGER column can hold
MAX_INTEGER_ID = 2**63 - 1


def create_db_engine(url: str, **kwargs) -> Engine:
    """Engine for ``url``; SQLite connections may cross FastAPI's worker threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, future=True, **kwargs)


def fits_integer_id(value: int) -> bool:
    return 0 < value <= MAX_INTEGER_ID


engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    module = type(dbapi_connection).__module__
    if module.startswith("sqlite3") or module.startswith("pysqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind=None) -> None:
    """Create every table registered on ``Base.metadata``."""
    # Importing the models registers them on Base.metadata
    from catalog.models import personal_access_token, product, supplier, user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
