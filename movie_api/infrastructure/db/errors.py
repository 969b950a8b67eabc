from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from movie_api.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Turns connectivity failures into ``StoreUnavailableError``.

    Constraint violations stay as ``IntegrityError`` so repositories can map them.
    """
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.error("store: unavailable operation=%s error=%s", operation, exc.__class__.__name__)
        raise StoreUnavailableError(f"Store unavailable during {operation}.") from exc
