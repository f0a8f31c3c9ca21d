"""
Request and response schemas for the HTTP API.
"""

from .admin import AdminUserListResponse, AdminUserRead, PlatformStats, UserStatusUpdate
from .auth import AuthResponse, CurrentUser, CurrentUserResponse, LoginRequest, RegisterRequest
from .bookings import (
    BookingCreate,
    BookingDetail,
    BookingEnvelope,
    BookingListResponse,
    BookingRead,
    BookingResponse,
    BookingStatusUpdate,
    BookingTutor,
)
from .categories import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    CategorySummary,
    CategoryUpdate,
    CategoryWithCount,
    slugify,
)
from .errors import ClientErrorAck, ClientErrorReport, ErrorResponse, FieldError
from .reviews import ReviewCreate, ReviewRead, ReviewResponse, ReviewWithStudent, TutorReviewsResponse
from .tutors import (
    AvailabilityUpdate,
    TutorDetail,
    TutorDetailResponse,
    TutorListResponse,
    TutorProfileEnvelope,
    TutorProfileRead,
    TutorProfileResponse,
    TutorProfileSummary,
    TutorProfileUpdate,
    TutorRead,
    TutorReviewRead,
)
from .users import MessageResponse, PasswordUpdate, UserProfileUpdate, UserRead, UserResponse, UserSummary

__all__ = [
    "AdminUserListResponse",
    "AdminUserRead",
    "AuthResponse",
    "AvailabilityUpdate",
    "BookingCreate",
    "BookingDetail",
    "BookingEnvelope",
    "BookingListResponse",
    "BookingRead",
    "BookingResponse",
    "BookingStatusUpdate",
    "BookingTutor",
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryRead",
    "CategoryResponse",
    "CategorySummary",
    "CategoryUpdate",
    "CategoryWithCount",
    "ClientErrorAck",
    "ClientErrorReport",
    "CurrentUser",
    "CurrentUserResponse",
    "ErrorResponse",
    "FieldError",
    "LoginRequest",
    "MessageResponse",
    "PasswordUpdate",
    "PlatformStats",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewRead",
    "ReviewResponse",
    "ReviewWithStudent",
    "TutorDetail",
    "TutorDetailResponse",
    "TutorListResponse",
    "TutorProfileEnvelope",
    "TutorProfileRead",
    "TutorProfileResponse",
    "TutorProfileSummary",
    "TutorProfileUpdate",
    "TutorRead",
    "TutorReviewRead",
    "TutorReviewsResponse",
    "UserProfileUpdate",
    "UserRead",
    "UserResponse",
    "UserStatusUpdate",
    "UserSummary",
    "slugify",
]
