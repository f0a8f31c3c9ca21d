"""
Category administration.
"""

from __future__ import annotations

from skillbridge.core.database.entities.categories import Category
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.io.categories import CategoryCreate, CategoryUpdate, slugify

from .errors import BadRequestError, NotFoundError, unique_violation_as

logger = get_logger(__name__)

DUPLICATE_MESSAGE = "Category with this name or slug already exists"
MIN_SLUG_LENGTH = 2


async def create_category(repos: RepoBundle, data: CategoryCreate) -> Category:
    """
    Raises:
        BadRequestError: the name or slug is taken, or no usable slug can be
            derived from the name
    """
    slug = data.slug or slugify(data.name)
    if len(slug) < MIN_SLUG_LENGTH:
        raise BadRequestError("Cannot derive a slug from the category name")
    if await repos.categories.find_conflict(name=data.name, slug=slug) is not None:
        raise BadRequestError(DUPLICATE_MESSAGE)

    async with unique_violation_as(repos.session, DUPLICATE_MESSAGE):
        category = await repos.categories.create(Category(name=data.name, slug=slug, description=data.description))
    logger.info(f"Category {category.slug} created")
    return category


async def update_category(repos: RepoBundle, category_id: str, data: CategoryUpdate) -> Category:
    """
    Raises:
        NotFoundError: no such category
        BadRequestError: the new name or slug belongs to another category
    """
    category = await repos.categories.get_by_id(category_id)
    if category is None:
        raise NotFoundError("Category not found")

    changes = data.model_dump(exclude_unset=True)
    if changes.get("name") is None:
        changes.pop("name", None)
    if changes.get("slug") is None:
        changes.pop("slug", None)
    clash = await repos.categories.find_conflict(
        name=changes.get("name"), slug=changes.get("slug"), exclude_id=category.id
    )
    if clash is not None:
        raise BadRequestError(DUPLICATE_MESSAGE)

    for field, value in changes.items():
        setattr(category, field, value)
    async with unique_violation_as(repos.session, DUPLICATE_MESSAGE):
        return await repos.categories.update(category)


async def delete_category(repos: RepoBundle, category_id: str) -> None:
    """
    Raises:
        NotFoundError: no such category
        BadRequestError: tutors are still linked to it
    """
    category = await repos.categories.get_by_id(category_id)
    if category is None:
        raise NotFoundError("Category not found")
    linked = await repos.categories.tutor_count(category_id)
    if linked:
        raise BadRequestError(f"Cannot delete category with {linked} associated tutors")
    await repos.categories.delete(category_id)
    logger.info(f"Category {category.slug} deleted")
