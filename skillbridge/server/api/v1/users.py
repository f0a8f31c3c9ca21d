"""
Account Self-Service Endpoints.
"""

from fastapi import APIRouter

from skillbridge.core.models.io.users import MessageResponse, PasswordUpdate, UserProfileUpdate, UserRead, UserResponse
from skillbridge.server.services import auth as auth_service
from skillbridge.server.services.deps import CurrentUserDep, ReposDep

router = APIRouter(tags=["users"])


@router.put(
    "/profile",
    response_model=UserResponse,
    summary="Update Own Profile",
    responses={400: {"description": "E-mail taken by another user"}},
)
async def update_profile(data: UserProfileUpdate, user: CurrentUserDep, repos: ReposDep) -> UserResponse:
    user = await auth_service.update_profile(repos, user, data)
    return UserResponse(message="Profile updated successfully", user=UserRead.model_validate(user))


@router.put(
    "/password",
    response_model=MessageResponse,
    summary="Change Password",
    responses={401: {"description": "Current password is incorrect"}},
)
async def change_password(data: PasswordUpdate, user: CurrentUserDep, repos: ReposDep) -> MessageResponse:
    await auth_service.change_password(repos, user, data)
    return MessageResponse(message="Password updated successfully")
