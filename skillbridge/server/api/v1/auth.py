"""
Authentication Endpoints.

Registration, login and the current-user lookup. Tokens are returned in the
response body and expected back as ``Authorization: Bearer <token>``.
"""

from fastapi import APIRouter, status

from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.io.auth import (
    AuthResponse,
    CurrentUser,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
)
from skillbridge.core.models.io.users import UserRead
from skillbridge.server.services import auth as auth_service
from skillbridge.server.services.deps import CurrentUserDep, ReposDep
from skillbridge.server.services.views import load_profile_view

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a STUDENT or TUTOR account and return a bearer token.",
    responses={400: {"description": "Invalid data or e-mail already registered"}},
)
async def register(data: RegisterRequest, repos: ReposDep) -> AuthResponse:
    user, token = await auth_service.register(repos, data)
    return AuthResponse(message="User registered successfully", user=UserRead.model_validate(user), token=token)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login",
    responses={
        401: {"description": "Invalid email or password"},
        403: {"description": "Account banned"},
    },
)
async def login(data: LoginRequest, repos: ReposDep) -> AuthResponse:
    user, token = await auth_service.login(repos, data)
    return AuthResponse(message="Login successful", user=UserRead.model_validate(user), token=token)


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Current User",
    description="The authenticated account, with its tutor profile when it has one.",
)
async def me(user: CurrentUserDep, repos: ReposDep) -> CurrentUserResponse:
    profile = await repos.tutor_profiles.get_by_user_id(user.id)
    return CurrentUserResponse(
        user=CurrentUser(
            **UserRead.model_validate(user).model_dump(),
            tutor_profile=await load_profile_view(repos, profile) if profile else None,
        )
    )
