# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user information is stored in the database: one row per user with
# their email, names, age, and when the row was created and last changed.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table. The unique index on email is the authoritative
# guard for email uniqueness under concurrent requests.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM column types and constraints
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations/env.py and migrations/versions (schema generation)
# - app.shared.infrastructure.database.connection.create_tables

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Persisted user record

Ids are UUID4 strings stored in a String(36) column so the same schema
works on PostgreSQL and SQLite.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String

from app.shared.infrastructure.database.connection import Base


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for a user record.
    """
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("age >= 0", name="age_non_negative"),
    )

    id = Column(
        String(36),
        primary_key=True,
        nullable=False,
        comment="Unique identifier for each user (UUID4)"
    )
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User's email address, unique across users"
    )
    first_name = Column(
        String(100),
        nullable=False,
        comment="User's first name"
    )
    last_name = Column(
        String(100),
        nullable=False,
        comment="User's last name"
    )
    age = Column(
        Integer,
        nullable=False,
        comment="User's age in years"
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Row creation time"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Last successful update time"
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
