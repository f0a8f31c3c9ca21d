"""
Request Dependencies.

Provides the repository bundle, the authenticated user and role guards for
API endpoints.
"""

from typing import Annotated, Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from skillbridge.core.database import get_session
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle, build_repos
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import UserRole
from skillbridge.core.security import InvalidTokenError, decode_access_token

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_repos(session: AsyncSession = Depends(get_session)) -> RepoBundle:
    """Repositories bound to the request's session."""
    return build_repos(session)


ReposDep = Annotated[RepoBundle, Depends(get_repos)]


async def get_current_user(
    repos: ReposDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> User:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 when the token is missing, invalid, expired or
            refers to a deleted user; 403 when the account is banned.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")

    try:
        payload = decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.reason) from e

    user = await repos.users.get_by_id(payload.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    if user.is_banned:
        logger.info(f"Rejected request from banned user {user.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been banned. Please contact support.",
        )
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_roles(*roles: UserRole) -> Callable:
    """
    Build a dependency that admits only users holding one of ``roles``.

    Example:
        ``user: User = Depends(require_roles(UserRole.ADMIN))``
    """
    allowed = " or ".join(role.value for role in roles)

    async def guard(user: CurrentUserDep) -> User:
        if user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {allowed}",
            )
        return user

    return guard


StudentDep = Annotated[User, Depends(require_roles(UserRole.STUDENT))]
TutorDep = Annotated[User, Depends(require_roles(UserRole.TUTOR))]
AdminDep = Annotated[User, Depends(require_roles(UserRole.ADMIN))]
