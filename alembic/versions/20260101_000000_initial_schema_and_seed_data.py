"""Initial schema and seed data for SkillBridge

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

Creates the marketplace tables and seeds:
- the administrator account (admin@skillbridge.com)
- the default subject categories

Revision format: YYYYMMDD_HHMMSS_description

"""

import uuid
from datetime import datetime, timezone
from typing import Sequence, Union

import bcrypt
import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ADMIN_EMAIL = "admin@skillbridge.com"
ADMIN_PASSWORD = "Admin123!"

DEFAULT_CATEGORIES = [
    ("Mathematics", "mathematics", "Algebra, Calculus, Geometry, Statistics"),
    ("Science", "science", "Physics, Chemistry, Biology"),
    ("Programming", "programming", "Web Development, Mobile Apps, Data Science"),
    ("Languages", "languages", "English, Spanish, French, Mandarin"),
    ("Music", "music", "Piano, Guitar, Violin, Vocals"),
    ("Art", "art", "Drawing, Painting, Digital Art"),
    ("Business", "business", "Marketing, Finance, Management"),
]


def upgrade() -> None:
    """Create all tables and seed initial data."""

    users = op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_status", "users", ["status"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    categories = op.create_table(
        "categories",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("slug", sa.String(128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_categories_name", "categories", ["name"], unique=True)
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)

    op.create_table(
        "tutor_profiles",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("hourly_rate", sa.Float(), nullable=False),
        sa.Column("subjects", sa.JSON(), nullable=False),
        sa.Column("experience", sa.Integer(), nullable=False),
        sa.Column("availability", sa.JSON(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tutor_profiles_user_id", "tutor_profiles", ["user_id"], unique=True)
    op.create_index("ix_tutor_profiles_rating", "tutor_profiles", ["rating"])

    op.create_table(
        "tutor_categories",
        sa.Column("tutor_profile_id", sa.String(36), nullable=False),
        sa.Column("category_id", sa.String(36), nullable=False),
        sa.ForeignKeyConstraint(["tutor_profile_id"], ["tutor_profiles.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.PrimaryKeyConstraint("tutor_profile_id", "category_id"),
    )
    op.create_index("ix_tutor_categories_category_id", "tutor_categories", ["category_id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("student_id", sa.String(36), nullable=False),
        sa.Column("tutor_id", sa.String(36), nullable=False),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["student_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["tutor_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bookings_student_id", "bookings", ["student_id"])
    op.create_index("ix_bookings_tutor_id", "bookings", ["tutor_id"])
    op.create_index("ix_bookings_date_time", "bookings", ["date_time"])
    op.create_index("ix_bookings_status", "bookings", ["status"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("booking_id", sa.String(36), nullable=False),
        sa.Column("student_id", sa.String(36), nullable=False),
        sa.Column("tutor_id", sa.String(36), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        sa.ForeignKeyConstraint(["booking_id"], ["bookings.id"]),
        sa.ForeignKeyConstraint(["student_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["tutor_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("booking_id"),
    )
    op.create_index("ix_reviews_student_id", "reviews", ["student_id"])
    op.create_index("ix_reviews_tutor_id", "reviews", ["tutor_id"])
    op.create_index("ix_reviews_created_at", "reviews", ["created_at"])

    now = datetime.now(timezone.utc).replace(tzinfo=None)

    # Seed the administrator account
    password_hash = bcrypt.hashpw(ADMIN_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")
    op.bulk_insert(
        users,
        [
            {
                "id": str(uuid.uuid4()),
                "email": ADMIN_EMAIL,
                "password": password_hash,
                "name": "Admin User",
                "role": "ADMIN",
                "status": "ACTIVE",
                "created_at": now,
                "updated_at": now,
            }
        ],
    )

    # Seed default categories
    op.bulk_insert(
        categories,
        [
            {
                "id": str(uuid.uuid4()),
                "name": name,
                "slug": slug,
                "description": description,
                "created_at": now,
                "updated_at": now,
            }
            for name, slug, description in DEFAULT_CATEGORIES
        ],
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("reviews")
    op.drop_table("bookings")
    op.drop_table("tutor_categories")
    op.drop_table("tutor_profiles")
    op.drop_table("categories")
    op.drop_table("users")
