from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from products_api.errors import ServerError, ValidationError
from products_api.object_ids import is_valid_object_id

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_errors(action: str) -> AsyncIterator[None]:
    """Turn any failure raised by a store call into a ``ServerError``."""
    try:
        yield
    except Exception as exc:
        logger.exception("Error %s", action)
        raise ServerError() from exc


def require_object_id(value: object, detail: str) -> str:
    object_id = value.strip() if isinstance(value, str) else value
    if not is_valid_object_id(object_id):
        raise ValidationError(detail)
    return object_id
