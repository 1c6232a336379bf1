"""
State directory schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from travel_assistant.directory import ListingEntry, Region, StateListing, derive_slug


class StateResponse(BaseModel):
    """State information."""
    code: str
    name: str
    slug: str
    image: Optional[str] = None
    is_district: bool = False

    @classmethod
    def from_region(cls, region: Region) -> "StateResponse":
        return cls(
            code=region.code,
            name=region.name,
            slug=derive_slug(region.name),
            image=region.image,
            is_district=region.is_district,
        )


class CodeOptionResponse(BaseModel):
    """One entry of the state code dropdown."""
    code: str
    selected: bool = False


class ListingEntryResponse(BaseModel):
    """A state with its open need and share counts."""
    name: str
    path: str
    url: str
    need_count: int
    needs_label: str
    needs_highlight: bool
    share_count: int
    shares_label: str
    shares_highlight: bool

    @classmethod
    def from_entry(cls, entry: ListingEntry) -> "ListingEntryResponse":
        return cls(
            name=entry.name,
            path=entry.path,
            url=entry.url,
            need_count=entry.need_count,
            needs_label=entry.needs_label,
            needs_highlight=entry.needs_highlight,
            share_count=entry.share_count,
            shares_label=entry.shares_label,
            shares_highlight=entry.shares_highlight,
        )


class ListingResponse(BaseModel):
    """State listing split into columns."""
    column_size: int
    columns: List[List[ListingEntryResponse]]
    total: int

    @classmethod
    def from_listing(cls, listing: StateListing) -> "ListingResponse":
        columns = [
            [ListingEntryResponse.from_entry(entry) for entry in column.entries]
            for column in listing.columns
        ]
        return cls(
            column_size=listing.column_size,
            columns=columns,
            total=sum(len(column) for column in columns),
        )
