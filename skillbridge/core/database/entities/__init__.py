"""
Database entity models.

Each module represents a single database table:

- users: marketplace accounts (students, tutors, admins)
- tutor_profiles: tutor teaching details and the tutor/category link table
- categories: subject categories
- bookings: tutoring session bookings
- reviews: student reviews of completed bookings
"""

from .bookings import Booking
from .categories import Category
from .reviews import Review
from .tutor_profiles import TutorCategoryLink, TutorProfile
from .users import User

__all__ = [
    "Booking",
    "Category",
    "Review",
    "TutorCategoryLink",
    "TutorProfile",
    "User",
]
