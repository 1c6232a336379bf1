"""
Directory value types.

Region records are read from a RegionStore; everything else here is derived
per request and never persisted.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Region:
    """
    A US state or the District of Columbia.

    Attributes:
        code: Short unique identifier (e.g., "PA")
        name: Display name (e.g., "Pennsylvania")
        image: Optional banner asset reference
        is_district: True for a federal district rather than a state
    """
    code: str
    name: str
    image: Optional[str] = None
    is_district: bool = False


@dataclass(frozen=True)
class NotFound:
    """Marker returned when no region matches a slug."""
    slug: str

    @property
    def message(self) -> str:
        return f'The state URL "{self.slug}" does not exist.'

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class ActivityCount:
    """Open need/share postings for one region code."""
    code: str
    need_count: int = 0
    share_count: int = 0


@dataclass(frozen=True)
class RegionActivity:
    """A region paired with its open need and share counts."""
    region: Region
    need_count: int = 0
    share_count: int = 0


class CodeOptions:
    """
    Selectable region codes as ``(code, is_selected)`` pairs.

    Iterating is lazy and can be repeated; each pass yields the same pairs.
    """

    def __init__(self, codes: Sequence[str], selected: Optional[str] = None):
        self._codes = tuple(codes)
        self.selected = selected

    def __iter__(self) -> Iterator[Tuple[str, bool]]:
        for code in self._codes:
            yield code, code == self.selected

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"<CodeOptions {len(self._codes)} codes, selected={self.selected!r}>"


@dataclass(frozen=True)
class ListingEntry:
    """Presentation model for one region in the activity listing."""
    name: str
    path: str
    url: str
    need_count: int
    share_count: int

    @property
    def needs_highlight(self) -> bool:
        return self.need_count > 0

    @property
    def needs_label(self) -> str:
        return "Need" if self.need_count == 1 else "Needs"

    @property
    def shares_highlight(self) -> bool:
        return self.share_count > 0

    @property
    def shares_label(self) -> str:
        return "Ride" if self.share_count == 1 else "Rides"


@dataclass(frozen=True)
class ListingColumn:
    """One column of consecutive listing entries."""
    entries: Tuple[ListingEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class StateListing:
    """The activity listing, split into columns."""
    column_size: int
    columns: Tuple[ListingColumn, ...] = field(default_factory=tuple)

    @property
    def column_lengths(self) -> List[int]:
        return [len(column) for column in self.columns]

    @property
    def entries(self) -> List[ListingEntry]:
        return [entry for column in self.columns for entry in column.entries]
