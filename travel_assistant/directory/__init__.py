"""
State directory - region lookups, slugs and ride activity listings.
"""

from travel_assistant.directory.links import LinkBuilder
from travel_assistant.directory.regions import (
    ActivityCount,
    CodeOptions,
    ListingColumn,
    ListingEntry,
    NotFound,
    Region,
    RegionActivity,
    StateListing,
)
from travel_assistant.directory.slugs import check_slug_collisions, derive_slug
from travel_assistant.directory.state_directory import DEFAULT_COLUMN_SIZE, StateDirectory
from travel_assistant.directory.store import InMemoryRegionStore, RegionStore, SqlRegionStore

__all__ = [
    "ActivityCount",
    "CodeOptions",
    "DEFAULT_COLUMN_SIZE",
    "InMemoryRegionStore",
    "LinkBuilder",
    "ListingColumn",
    "ListingEntry",
    "NotFound",
    "Region",
    "RegionActivity",
    "RegionStore",
    "SqlRegionStore",
    "StateDirectory",
    "StateListing",
    "check_slug_collisions",
    "derive_slug",
]
