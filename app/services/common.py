import logging

from app.db import db
from app.errors import StorageError


logger = logging.getLogger(__name__)


def is_non_empty_string(value) -> bool:
    # Presence check only: whitespace-only strings count as present.
    return isinstance(value, str) and len(value) > 0


def storage_error(exc, action: str) -> StorageError:
    """Roll back the session and wrap a SQLAlchemy failure.

    The message is the driver's own text when available, so callers see
    e.g. ``no such table: blogs`` instead of the full statement dump.
    """
    db.session.rollback()
    logger.error("Storage failure while trying to %s", action, exc_info=exc)
    message = str(getattr(exc, "orig", None) or exc)
    return StorageError(message)


# SQLite and most SQL backends store integer keys as signed 64-bit values.
MAX_ROW_ID = 2 ** 63 - 1


def is_storable_id(value) -> bool:
    return isinstance(value, int) and 0 <= value <= MAX_ROW_ID
