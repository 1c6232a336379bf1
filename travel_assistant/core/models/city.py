"""
City model - ride origins and destinations, each belonging to one state.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.orm import Mapped, relationship

from travel_assistant.core.models.base import Base, StateModelMixin

if TYPE_CHECKING:
    from travel_assistant.core.models.state import State


class City(Base, StateModelMixin):
    """A city rides can leave from or travel to."""

    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    latitude = Column(Float)
    longitude = Column(Float)

    state: Mapped["State"] = relationship("State", back_populates="cities")

    def __repr__(self) -> str:
        return f"<City {self.name}, {self.state_code}>"
