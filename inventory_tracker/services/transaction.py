"""Transaction scope for one inbound or outbound movement.

Commits only when every step of the operation succeeded; any error, timeout or
cancellation rolls the whole batch back. There are no retries here: retryable
storage failures are surfaced with ``StorageError.retryable`` set.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_tracker.core.config import settings
from inventory_tracker.core.logging import get_logger
from inventory_tracker.domain.enums import MovementType
from inventory_tracker.models.movement import MovementDocument
from inventory_tracker.services.exceptions import StorageError

T = TypeVar("T")

logger = get_logger("inventory_tracker.transactions")

_UNSET = object()

# serialization_failure, deadlock_detected, lock_not_available
_RETRYABLE_SQLSTATES = {"40001", "40P01", "55P03"}


def _sqlstate(exc: DBAPIError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _is_document_collision(exc: SQLAlchemyError) -> bool:
    # Another request committed the same document number first.
    return isinstance(exc, IntegrityError) and MovementDocument.__tablename__ in (exc.statement or "")


def is_retryable(exc: SQLAlchemyError) -> bool:
    if not isinstance(exc, DBAPIError):
        return False
    if exc.connection_invalidated or _is_document_collision(exc):
        return True
    if _sqlstate(exc) in _RETRYABLE_SQLSTATES:
        return True
    return "database is locked" in str(exc.orig).lower()


def to_storage_error(exc: SQLAlchemyError) -> StorageError:
    retryable = is_retryable(exc)
    if _is_document_collision(exc):
        detail = "Document number was taken by a concurrent request; resubmit the request"
    elif retryable:
        detail = "Concurrent update conflict in the store; resubmit the request"
    else:
        detail = f"Storage error: {exc.__class__.__name__}"
    return StorageError(detail, retryable=retryable)


async def _rollback_quietly(db: AsyncSession, movement_type: MovementType) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        logger.exception("Rollback failed", extra={"movement_type": movement_type.value})


async def run_movement_transaction(
    db: AsyncSession,
    operation: Callable[[AsyncSession], Awaitable[T]],
    *,
    movement_type: MovementType,
    isolation_level: str | None = None,
    timeout: float | None | object = _UNSET,
) -> T:
    """Run ``operation`` in its own transaction on ``db`` and commit it.

    ``db`` must not have begun a transaction yet: the isolation level can only
    be applied when the connection is first procured.
    """
    movement_type = MovementType(movement_type)
    if db.in_transaction():
        raise RuntimeError("Movement transactions require a session without an open transaction")
    level = isolation_level or settings.movement_isolation_level
    if timeout is _UNSET:
        timeout = settings.MOVEMENT_TIMEOUT_SECONDS

    try:
        await db.connection(execution_options={"isolation_level": level})
        result = await asyncio.wait_for(operation(db), timeout)
        await db.commit()
    except asyncio.CancelledError:
        logger.warning("Movement cancelled, rolling back", extra={"movement_type": movement_type.value})
        await _rollback_quietly(db, movement_type)
        raise
    except asyncio.TimeoutError as exc:
        await _rollback_quietly(db, movement_type)
        raise StorageError(
            f"The {movement_type.value} movement timed out and was rolled back", retryable=True
        ) from exc
    except SQLAlchemyError as exc:
        await _rollback_quietly(db, movement_type)
        raise to_storage_error(exc) from exc
    except Exception:
        await _rollback_quietly(db, movement_type)
        raise

    logger.debug("Movement committed", extra={"movement_type": movement_type.value, "isolation_level": level})
    return result
