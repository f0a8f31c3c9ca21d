"""
Account registration, login and self-service updates.
"""

from __future__ import annotations

from typing import Tuple

from skillbridge.core.database.entities.tutor_profiles import TutorProfile
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import UserRole
from skillbridge.core.models.io.auth import LoginRequest, RegisterRequest
from skillbridge.core.models.io.users import PasswordUpdate, UserProfileUpdate
from skillbridge.core.security import create_access_token, hash_password, verify_password

from .errors import BadRequestError, ForbiddenError, UnauthorizedError, unique_violation_as

logger = get_logger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"
TAKEN_EMAIL_MESSAGE = "Email is already taken by another user"


def issue_token(user: User) -> str:
    return create_access_token(user_id=user.id, email=user.email, role=UserRole(user.role).value)


async def register(repos: RepoBundle, data: RegisterRequest) -> Tuple[User, str]:
    """
    Create an account and sign it in.

    TUTOR accounts get an empty tutor profile in the same transaction.

    Raises:
        BadRequestError: the e-mail is already registered
    """
    if await repos.users.get_by_email(data.email) is not None:
        raise BadRequestError(DUPLICATE_EMAIL_MESSAGE)

    user = User(
        email=data.email,
        password=hash_password(data.password),
        name=data.name,
        role=UserRole(data.role),
    )
    async with unique_violation_as(repos.session, DUPLICATE_EMAIL_MESSAGE):
        await repos.users.stage(user)
        if user.role == UserRole.TUTOR:
            await repos.tutor_profiles.stage(TutorProfile(user_id=user.id))
        await repos.session.commit()
    await repos.session.refresh(user)

    logger.info(f"Registered {user.role.value} account {user.id}")
    return user, issue_token(user)


async def login(repos: RepoBundle, data: LoginRequest) -> Tuple[User, str]:
    """
    Verify credentials and issue a token.

    Raises:
        UnauthorizedError: unknown e-mail or wrong password
        ForbiddenError: the account is banned
    """
    user = await repos.users.get_by_email(data.email)
    if user is None:
        raise UnauthorizedError("Invalid email or password")
    if user.is_banned:
        raise ForbiddenError("Your account has been banned. Please contact support.")
    if not verify_password(data.password, user.password):
        logger.info(f"Failed login for user {user.id}")
        raise UnauthorizedError("Invalid email or password")
    return user, issue_token(user)


async def update_profile(repos: RepoBundle, user: User, data: UserProfileUpdate) -> User:
    """
    Raises:
        BadRequestError: the e-mail belongs to another account
    """
    other = await repos.users.get_by_email(data.email)
    if other is not None and other.id != user.id:
        raise BadRequestError(TAKEN_EMAIL_MESSAGE)
    user.name = data.name
    user.email = data.email
    async with unique_violation_as(repos.session, TAKEN_EMAIL_MESSAGE):
        return await repos.users.update(user)


async def change_password(repos: RepoBundle, user: User, data: PasswordUpdate) -> None:
    """
    Raises:
        UnauthorizedError: the current password does not match
    """
    if not verify_password(data.current_password, user.password):
        raise UnauthorizedError("Current password is incorrect")
    user.password = hash_password(data.new_password)
    await repos.users.update(user)
    logger.info(f"Password changed for user {user.id}")
