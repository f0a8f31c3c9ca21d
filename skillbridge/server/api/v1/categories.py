"""
Category Endpoints.

Listing is public; changes require an admin.
"""

from fastapi import APIRouter, status

from skillbridge.core.models.io.categories import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithCount,
)
from skillbridge.core.models.io.users import MessageResponse
from skillbridge.server.services import categories as category_service
from skillbridge.server.services.deps import AdminDep, ReposDep

router = APIRouter(tags=["categories"])


@router.get("", response_model=CategoryListResponse, summary="List Categories")
async def list_categories(repos: ReposDep) -> CategoryListResponse:
    """All categories ordered by name, each with the number of tutors teaching it."""
    rows = await repos.categories.list_with_tutor_counts()
    categories = [
        CategoryWithCount(**CategoryRead.model_validate(category).model_dump(), tutor_count=count)
        for category, count in rows
    ]
    return CategoryListResponse(categories=categories, count=len(categories))


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    responses={400: {"description": "Invalid data or duplicate name/slug"}},
)
async def create_category(data: CategoryCreate, admin: AdminDep, repos: ReposDep) -> CategoryResponse:
    category = await category_service.create_category(repos, data)
    return CategoryResponse(message="Category created successfully", category=CategoryRead.model_validate(category))


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update Category",
    responses={400: {"description": "Duplicate name/slug"}, 404: {"description": "Category not found"}},
)
async def update_category(
    category_id: str, data: CategoryUpdate, admin: AdminDep, repos: ReposDep
) -> CategoryResponse:
    category = await category_service.update_category(repos, category_id, data)
    return CategoryResponse(message="Category updated successfully", category=CategoryRead.model_validate(category))


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete Category",
    responses={400: {"description": "Tutors still linked"}, 404: {"description": "Category not found"}},
)
async def delete_category(category_id: str, admin: AdminDep, repos: ReposDep) -> MessageResponse:
    await category_service.delete_category(repos, category_id)
    return MessageResponse(message="Category deleted successfully")
