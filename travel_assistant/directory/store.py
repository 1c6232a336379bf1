"""
Region store - the data source the state directory reads from.

Supports:
- SQL database via a SQLAlchemy session
- In-memory fixtures (tests, CLI previews)
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_assistant.core.exceptions import RegionStoreError
from travel_assistant.core.models.city import City
from travel_assistant.core.models.ride import RideNeed, RideShare
from travel_assistant.core.models.state import State
from travel_assistant.directory.regions import ActivityCount, Region

logger = logging.getLogger(__name__)


class RegionStore(ABC):
    """Abstract region store interface."""

    @abstractmethod
    def list_all(self) -> Sequence[Region]:
        """Return every known region."""
        pass

    @abstractmethod
    def list_activity_counts(self, now: datetime) -> Sequence[ActivityCount]:
        """
        Count open postings per region at ``now``.

        Only regions with at least one open need or share are returned.
        """
        pass


class InMemoryRegionStore(RegionStore):
    """Region store backed by plain lists."""

    def __init__(
        self,
        regions: Iterable[Region],
        counts: Optional[Iterable[ActivityCount]] = None,
    ):
        self.regions = list(regions)
        self.counts = list(counts or [])

    def list_all(self) -> Sequence[Region]:
        return list(self.regions)

    def list_activity_counts(self, now: datetime) -> Sequence[ActivityCount]:
        return list(self.counts)


class SqlRegionStore(RegionStore):
    """Region store reading the states, cities and ride posting tables."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> Sequence[Region]:
        try:
            rows = self.db.execute(
                select(State.code, State.name, State.image, State.district)
            ).all()
        except SQLAlchemyError as e:
            raise RegionStoreError(f"Failed to load states: {e}") from e

        return [
            Region(code=code, name=name, image=image, is_district=bool(district))
            for code, name, image, district in rows
        ]

    def list_activity_counts(self, now: datetime) -> Sequence[ActivityCount]:
        try:
            needs = self._count_by_state(RideNeed, now)
            shares = self._count_by_state(RideShare, now)
        except SQLAlchemyError as e:
            raise RegionStoreError(f"Failed to count ride postings: {e}") from e

        logger.debug(f"Open postings at {now}: {sum(needs.values())} needs, {sum(shares.values())} shares")

        return [
            ActivityCount(
                code=code,
                need_count=needs.get(code, 0),
                share_count=shares.get(code, 0),
            )
            for code in sorted(set(needs) | set(shares))
        ]

    def _count_by_state(self, model, now: datetime) -> Dict[str, int]:
        """Open postings of ``model`` grouped by the state of the origin city."""
        result = self.db.execute(
            select(City.state_code, func.count(model.id))
            .select_from(model)
            .join(City, model.from_city_id == City.id)
            .where(model.open_at(now))
            .group_by(City.state_code)
        )
        return {code: count for code, count in result.all()}


def sorted_by_name(regions: Iterable[Region]) -> List[Region]:
    """Regions in display-name order."""
    return sorted(regions, key=lambda region: region.name)
