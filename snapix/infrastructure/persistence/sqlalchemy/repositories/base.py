"""Helpers shared by the SQLAlchemy repositories."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from snapix.config.logging import get_logger
from snapix.domain.shared import UpstreamError

logger = get_logger(__name__)


async def flush(session: AsyncSession, entity: str) -> None:
    """Flush pending writes, mapping database failures to UpstreamError.

    Raises:
        UpstreamError: If the database rejects the flush, e.g. a dropped
            connection or a unique index violated by a concurrent insert.
    """
    try:
        await session.flush()
    except SQLAlchemyError as e:
        logger.error("repository.flush_failed", entity=entity, error=str(e))
        raise UpstreamError(f"Database write failed for {entity}") from e
