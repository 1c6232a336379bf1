"""
State model - the 50 US states and the District of Columbia.

Rows are seeded once (see ``travel-assistant db seed-states``) and only read
afterwards. The URL slug of a state is derived from its name and never stored.
"""

from typing import List, TYPE_CHECKING

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import Mapped, relationship

from travel_assistant.core.models.base import Base

if TYPE_CHECKING:
    from travel_assistant.core.models.city import City


class State(Base):
    """A US state or federal district."""

    __tablename__ = "states"

    code = Column(
        String(2),
        primary_key=True,
        comment="Two-letter postal code (e.g., PA)",
    )
    name = Column(String(100), nullable=False, unique=True, comment="Display name")
    image = Column(String(255), nullable=True, comment="Banner image asset")
    district = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="True for a federal district (DC)",
    )

    cities: Mapped[List["City"]] = relationship(
        "City",
        back_populates="state",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<State {self.code}: {self.name}>"
