"""
State directory - lookups and listings over US states.

Capabilities:
- Listing state codes (PA, OH, NY, ...) for a selection widget
- Finding a state by the URL slug of its name
- Building the per-state listing of needed and available rides,
  split into columns

The directory holds no data of its own. Every call reads fresh data from the
injected RegionStore and returns derived values.

Usage:
    directory = StateDirectory(SqlRegionStore(db), LinkBuilder.from_settings())

    for code, selected in directory.list_codes("PA"):
        ...

    region = directory.find_by_slug("new-york")
    if isinstance(region, NotFound):
        raise HTTPException(status_code=404, detail=region.message)
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from travel_assistant.core.exceptions import InvalidArgument
from travel_assistant.directory.links import LinkBuilder
from travel_assistant.directory.regions import (
    CodeOptions,
    ListingColumn,
    ListingEntry,
    NotFound,
    Region,
    RegionActivity,
    StateListing,
)
from travel_assistant.directory.slugs import check_slug_collisions, derive_slug
from travel_assistant.directory.store import RegionStore, sorted_by_name

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_SIZE = 17
BROWSE_PREFIX = "browse/"


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def validate_column_size(column_size) -> int:
    """Return ``column_size`` if it is a positive integer, else raise InvalidArgument."""
    if isinstance(column_size, bool) or not isinstance(column_size, int):
        raise InvalidArgument(f"column_size must be an integer, got {column_size!r}")
    if column_size <= 0:
        raise InvalidArgument(f"column_size must be positive, got {column_size}")
    return column_size


class StateDirectory:
    """Read-only directory of regions backed by a RegionStore."""

    def __init__(self, store: RegionStore, links: Optional[LinkBuilder] = None):
        self.store = store
        self.links = links

    def list_codes(self, selected: Optional[str] = None) -> CodeOptions:
        """
        List every region code in ascending order.

        Args:
            selected: Code to mark as selected (exact, case-sensitive match)

        Returns:
            Re-iterable ``(code, is_selected)`` pairs
        """
        if selected is not None and not isinstance(selected, str):
            raise InvalidArgument(f"selected must be a state code string, got {selected!r}")

        codes = sorted(region.code for region in self.store.list_all())
        return CodeOptions(codes, selected)

    def find_by_slug(self, slug: str) -> Union[Region, NotFound]:
        """
        Find the region whose derived slug equals ``slug``.

        The slug of every region is derived again on each call.

        Returns:
            The matching Region, or a NotFound marker

        Raises:
            SlugCollisionError: if two known regions derive the same slug
        """
        if not isinstance(slug, str):
            raise InvalidArgument(f"slug must be a string, got {slug!r}")

        index = check_slug_collisions(self.store.list_all())
        region = index.get(slug)
        if region is None:
            logger.debug(f"No state for slug {slug!r}")
            return NotFound(slug)
        return region

    def exists(self, slug: str) -> Optional[Region]:
        """Return the region for ``slug``, or None when there is none."""
        region = self.find_by_slug(slug)
        if isinstance(region, NotFound):
            return None
        return region

    def render_activity_listing(
        self,
        rows: Iterable[RegionActivity],
        column_size: int = DEFAULT_COLUMN_SIZE,
    ) -> StateListing:
        """
        Split regions and their counts into columns of ``column_size`` entries.

        Rows keep the order they are given in; the last column may be shorter.
        """
        column_size = validate_column_size(column_size)

        entries = [self._entry(row) for row in rows]
        columns = tuple(
            ListingColumn(entries=tuple(entries[start:start + column_size]))
            for start in range(0, len(entries), column_size)
        )
        return StateListing(column_size=column_size, columns=columns)

    def activity_listing(
        self,
        now: Optional[datetime] = None,
        column_size: int = DEFAULT_COLUMN_SIZE,
    ) -> StateListing:
        """
        Build the listing of all regions with their open need/share counts.

        Regions without open postings are listed with zero counts.
        """
        column_size = validate_column_size(column_size)
        now = now or utc_now()

        counts = {count.code: count for count in self.store.list_activity_counts(now)}
        rows: List[RegionActivity] = []
        for region in sorted_by_name(self.store.list_all()):
            count = counts.get(region.code)
            rows.append(RegionActivity(
                region=region,
                need_count=count.need_count if count else 0,
                share_count=count.share_count if count else 0,
            ))

        return self.render_activity_listing(rows, column_size)

    def _entry(self, row: RegionActivity) -> ListingEntry:
        path = BROWSE_PREFIX + derive_slug(row.region.name)
        url = self.links.friendly_url(path) if self.links else path
        return ListingEntry(
            name=row.region.name,
            path=path,
            url=url,
            need_count=row.need_count,
            share_count=row.share_count,
        )
