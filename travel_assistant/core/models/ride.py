"""
Ride posting models.

- RideNeed: a member asking for a ride between two cities
- RideShare: a member offering seats between two cities

A posting is active while it is unfulfilled and its window includes "now":
either it has not left yet, or it has left and its end date has not passed.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text, and_, or_
from sqlalchemy.orm import relationship

from travel_assistant.core.models.base import Base, TimestampMixin


class _RidePostingMixin:
    """Columns shared by needs and shares."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, index=True, comment="Posting member")
    leaving = Column(DateTime, nullable=False, index=True, comment="Departure time")
    end_date = Column(DateTime, nullable=False, comment="End of the travel window")
    notes = Column(Text)

    @classmethod
    def window_includes(cls, now: datetime):
        """SQL clause: the posting's active window includes ``now``."""
        return or_(
            cls.leaving > now,
            and_(cls.leaving <= now, cls.end_date > now),
        )


class RideNeed(_RidePostingMixin, TimestampMixin, Base):
    """A request for a ride."""

    __tablename__ = "ride_needs"

    from_city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    to_city_id = Column(Integer, ForeignKey("cities.id"), nullable=False)
    fulfilled = Column(Boolean, nullable=False, default=False)

    from_city = relationship("City", foreign_keys=[from_city_id])
    to_city = relationship("City", foreign_keys=[to_city_id])

    @classmethod
    def open_at(cls, now: datetime):
        """SQL clause: unfulfilled and inside its window."""
        return and_(cls.fulfilled == False, cls.window_includes(now))  # noqa: E712


class RideShare(_RidePostingMixin, TimestampMixin, Base):
    """An offer of seats in a ride."""

    __tablename__ = "ride_shares"

    from_city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    to_city_id = Column(Integer, ForeignKey("cities.id"), nullable=False)
    seats = Column(Integer, nullable=False, default=1)
    fulfilled = Column(Integer, nullable=False, default=0, comment="Seats already taken")

    from_city = relationship("City", foreign_keys=[from_city_id])
    to_city = relationship("City", foreign_keys=[to_city_id])

    @classmethod
    def open_at(cls, now: datetime):
        """SQL clause: seats left and inside its window."""
        return and_(cls.seats > cls.fulfilled, cls.window_includes(now))
