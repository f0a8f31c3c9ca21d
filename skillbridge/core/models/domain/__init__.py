"""
Domain models for the tutoring marketplace.

Only enums live here; persistence shapes are in ``skillbridge.core.database.entities``
and API shapes in ``skillbridge.core.models.io``.
"""

from .enums import BookingStatus, SortField, SortOrder, UserRole, UserStatus

__all__ = [
    "BookingStatus",
    "SortField",
    "SortOrder",
    "UserRole",
    "UserStatus",
]
