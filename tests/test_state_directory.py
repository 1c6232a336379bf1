"""
Test the state directory over an in-memory region store.
"""

from datetime import datetime, timedelta, timezone

import pytest

from travel_assistant.core.exceptions import InvalidArgument, SlugCollisionError
from travel_assistant.directory import (
    ActivityCount,
    InMemoryRegionStore,
    LinkBuilder,
    NotFound,
    Region,
    RegionActivity,
    StateDirectory,
)
from travel_assistant.directory.state_directory import utc_now

PA = Region(code="PA", name="Pennsylvania")
OH = Region(code="OH", name="Ohio")
NY = Region(code="NY", name="New York")
DC = Region(code="DC", name="District of Columbia", is_district=True)


@pytest.fixture
def directory():
    return StateDirectory(InMemoryRegionStore([PA, OH, NY, DC]))


def make_rows(count):
    return [
        RegionActivity(region=Region(code=f"{i:02d}", name=f"State {i:02d}"))
        for i in range(count)
    ]


# list_codes

def test_list_codes_sorted_with_selection(directory):
    """Test that codes are ascending and only the selected one is marked."""
    options = list(directory.list_codes("OH"))
    assert options == [("DC", False), ("NY", False), ("OH", True), ("PA", False)]


def test_list_codes_unknown_selection(directory):
    options = list(directory.list_codes("TX"))
    assert [code for code, _ in options] == ["DC", "NY", "OH", "PA"]
    assert not any(selected for _, selected in options)


def test_list_codes_selection_is_case_sensitive(directory):
    assert not any(selected for _, selected in directory.list_codes("oh"))


def test_list_codes_without_selection(directory):
    assert not any(selected for _, selected in directory.list_codes())
    assert not any(selected for _, selected in directory.list_codes(""))


def test_list_codes_can_be_iterated_twice(directory):
    options = directory.list_codes("PA")
    assert list(options) == list(options)
    assert len(options) == 4


def test_list_codes_full_set(us_regions):
    directory = StateDirectory(InMemoryRegionStore(us_regions))
    options = list(directory.list_codes("OH"))

    codes = [code for code, _ in options]
    assert len(codes) == 51
    assert codes == sorted(set(codes))
    assert [code for code, selected in options if selected] == ["OH"]


def test_list_codes_rejects_non_string(directory):
    with pytest.raises(InvalidArgument):
        directory.list_codes(42)


# find_by_slug

def test_find_by_slug(directory):
    assert directory.find_by_slug("new-york") == NY
    assert directory.find_by_slug("district-of-columbia") == DC


def test_find_by_slug_not_found(directory):
    result = directory.find_by_slug("atlantis")
    assert isinstance(result, NotFound)
    assert result.slug == "atlantis"
    assert not result
    assert "atlantis" in result.message


def test_find_by_slug_is_case_sensitive(directory):
    assert isinstance(directory.find_by_slug("New-York"), NotFound)


def test_find_by_slug_collision():
    directory = StateDirectory(InMemoryRegionStore([
        Region(code="NY", name="New York"),
        Region(code="NX", name="New  York"),
    ]))
    with pytest.raises(SlugCollisionError):
        directory.find_by_slug("new-york")


def test_find_by_slug_sees_new_regions():
    """Test that slugs are derived from the store on every call."""
    store = InMemoryRegionStore([PA])
    directory = StateDirectory(store)
    assert isinstance(directory.find_by_slug("ohio"), NotFound)

    store.regions.append(OH)
    assert directory.find_by_slug("ohio") == OH


def test_exists(directory):
    assert directory.exists("ohio") == OH
    assert directory.exists("atlantis") is None


# render_activity_listing

@pytest.mark.parametrize("count,lengths", [
    (51, [17, 17, 17]),
    (50, [17, 17, 16]),
    (5, [5]),
    (17, [17]),
    (18, [17, 1]),
    (0, []),
])
def test_column_lengths(directory, count, lengths):
    listing = directory.render_activity_listing(make_rows(count), column_size=17)
    assert listing.column_lengths == lengths


def test_default_column_size(directory):
    listing = directory.render_activity_listing(make_rows(51))
    assert listing.column_size == 17
    assert listing.column_lengths == [17, 17, 17]


def test_listing_preserves_order(directory):
    rows = [RegionActivity(region=r) for r in (PA, NY, OH, DC)]
    listing = directory.render_activity_listing(rows, column_size=3)
    assert [entry.name for entry in listing.entries] == ["Pennsylvania", "New York", "Ohio", "District of Columbia"]
    assert [len(column) for column in listing.columns] == [3, 1]


@pytest.mark.parametrize("count,label,highlight", [
    (0, "Needs", False),
    (1, "Need", True),
    (2, "Needs", True),
])
def test_need_labels(directory, count, label, highlight):
    listing = directory.render_activity_listing([RegionActivity(region=PA, need_count=count)])
    entry = listing.entries[0]
    assert entry.needs_label == label
    assert entry.needs_highlight is highlight


@pytest.mark.parametrize("count,label,highlight", [
    (0, "Rides", False),
    (1, "Ride", True),
    (5, "Rides", True),
])
def test_share_labels(directory, count, label, highlight):
    listing = directory.render_activity_listing([RegionActivity(region=PA, share_count=count)])
    entry = listing.entries[0]
    assert entry.shares_label == label
    assert entry.shares_highlight is highlight


def test_entry_links_without_link_builder(directory):
    listing = directory.render_activity_listing([RegionActivity(region=NY)])
    entry = listing.entries[0]
    assert entry.path == "browse/new-york"
    assert entry.url == "browse/new-york"


def test_entry_links_with_link_builder():
    directory = StateDirectory(InMemoryRegionStore([NY]), LinkBuilder("https://rides.example.org/"))
    listing = directory.render_activity_listing([RegionActivity(region=NY)])
    assert listing.entries[0].url == "https://rides.example.org/browse/new-york/"


@pytest.mark.parametrize("column_size", [0, -1, -17, 1.5, "17", True, None])
def test_invalid_column_size(directory, column_size):
    rows = iter(make_rows(3))
    with pytest.raises(InvalidArgument):
        directory.render_activity_listing(rows, column_size=column_size)

    # Nothing was consumed
    assert next(rows).region.code == "00"


# activity_listing

def test_activity_listing_joins_counts():
    store = InMemoryRegionStore(
        [PA, OH, NY, DC],
        counts=[ActivityCount(code="PA", need_count=2, share_count=1)],
    )
    listing = StateDirectory(store).activity_listing(column_size=17)

    entries = listing.entries
    assert [entry.name for entry in entries] == ["District of Columbia", "New York", "Ohio", "Pennsylvania"]

    pennsylvania = entries[-1]
    assert pennsylvania.need_count == 2
    assert pennsylvania.needs_label == "Needs"
    assert pennsylvania.share_count == 1
    assert pennsylvania.shares_label == "Ride"

    assert all(entry.need_count == 0 and entry.share_count == 0 for entry in entries[:-1])


def test_activity_listing_all_states(us_regions):
    listing = StateDirectory(InMemoryRegionStore(us_regions)).activity_listing()
    assert listing.column_lengths == [17, 17, 17]
    assert listing.entries[0].name == "Alabama"
    assert listing.entries[-1].name == "Wyoming"


def test_activity_listing_rejects_bad_column_size(directory):
    with pytest.raises(InvalidArgument):
        directory.activity_listing(column_size=0)


def test_utc_now_is_naive_utc():
    now = utc_now()
    assert now.tzinfo is None
    assert abs(now - datetime.now(timezone.utc).replace(tzinfo=None)) < timedelta(seconds=5)
