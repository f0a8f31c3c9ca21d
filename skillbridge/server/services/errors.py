"""
Service-level errors.

Services raise these instead of ``HTTPException`` so they can be used outside
a request. Each carries the HTTP status it maps to; the exception handlers
render them like any other HTTP error.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillbridge.core.logging_config import get_logger

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


@asynccontextmanager
async def unique_violation_as(session: AsyncSession, message: str) -> AsyncIterator[None]:
    """
    Turn a unique-constraint failure inside the block into ``BadRequestError``.

    Covers writes that race past an existence check; the session is rolled back
    before the error is raised.
    """
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.info(f"Unique constraint rejected a write: {message}")
        raise BadRequestError(message) from e
