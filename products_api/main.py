import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from products_api import db
from products_api.errors import register_exception_handlers
from products_api.logging_config import setup_logging
from products_api.routers import categories, products

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(os.environ.get("LOG_LEVEL", "INFO"), os.environ.get("LOG_FILE"))
    await db.connect()
    yield
    await db.dispose_engine()
    logger.info("Database connection closed")


app = FastAPI(title="Products API", lifespan=lifespan)
register_exception_handlers(app)
app.include_router(categories.router)
app.include_router(products.router)


@app.get("/")
def read_root() -> dict[str, str]:
    return {"status": "ok"}
