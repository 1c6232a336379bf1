"""
SQLAlchemy base class and common mixins.

Provides:
- Base: Declarative base for all models
- TimestampMixin: created_at/updated_at columns
- StateModelMixin: state_code column for rows that belong to a state
"""

from sqlalchemy import Column, String, DateTime, ForeignKey, func
from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamps.

    - created_at: Set automatically on insert
    - updated_at: Updated automatically on each update
    """

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True,
    )


class StateModelMixin:
    """
    Mixin for models that belong to a specific state.

    Adds a state_code foreign key (e.g., 'PA', 'OH', 'DC').
    """

    @declared_attr
    def state_code(cls):
        return Column(
            String(2),
            ForeignKey("states.code", ondelete="CASCADE"),
            nullable=False,
            index=True,
            comment="Two-letter state code (e.g., PA, OH, DC)",
        )
