from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from craftstore.domain.errors import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure as a domain InternalError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(
            "Store operation failed",
            exc_info=exc,
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        raise InternalError("Storage operation failed", operation=operation) from exc
