# main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# Import the models so they register on Base.metadata
from catalog.models.supplier import Supplier  # noqa: F401
from catalog.models.product import Product  # noqa: F401
from catalog.models.user import User  # noqa: F401
from catalog.models.personal_access_token import PersonalAccessToken  # noqa: F401

from catalog.api.products import router as products_router
from catalog.core.config import settings
from catalog.core.database import init_db
from catalog.core.errors import setup_error_handling

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No migrations: tables are created from the models on startup
    init_db()
    logger.info("Database ready")
    yield


app = FastAPI(
    title="Supplier Catalog API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_error_handling(app)

app.include_router(products_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Supplier Catalog API on port {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
