"""
Test URL slug derivation.
"""

import pytest

from travel_assistant.core.exceptions import SlugCollisionError
from travel_assistant.directory import Region, check_slug_collisions, derive_slug


def test_two_word_name():
    """Test a name with a single space."""
    assert derive_slug("New York") == "new-york"


def test_single_word_name():
    assert derive_slug("Pennsylvania") == "pennsylvania"


def test_removes_punctuation():
    """Test that removed characters leave one hyphen behind."""
    assert derive_slug("O'Brien & Co.") == "obrien-co"


def test_double_spaces_collapse_once():
    """Test that each double hyphen is collapsed a single time."""
    assert derive_slug("  A  B  ") == "-a-b-"


def test_triple_hyphens_are_only_partly_collapsed():
    assert derive_slug("a   b") == "a--b"
    assert derive_slug("a---b") == "a--b"


def test_each_whitespace_character_becomes_a_hyphen():
    assert derive_slug("a\tb") == "a-b"
    assert derive_slug("a\t\nb") == "a-b"


def test_non_ascii_letters_are_removed():
    assert derive_slug("Bienvenue à Montréal") == "bienvenue-montral"


def test_non_ascii_whitespace_is_removed():
    assert derive_slug("New\u00a0York") == "newyork"


def test_keeps_digits_and_hyphens():
    assert derive_slug("Route-66 Diner") == "route-66-diner"


def test_empty_string():
    assert derive_slug("") == ""


def test_no_letters_or_digits():
    assert derive_slug("&*!") == ""


def test_deterministic():
    name = "District of Columbia"
    assert derive_slug(name) == derive_slug(name) == "district-of-columbia"


def test_all_us_state_slugs_are_unique(us_regions):
    index = check_slug_collisions(us_regions)
    assert len(index) == 51
    assert index["west-virginia"].code == "WV"


def test_collision_detected():
    regions = [
        Region(code="NY", name="New York"),
        Region(code="NX", name="New-York"),
        Region(code="PA", name="Pennsylvania"),
    ]
    with pytest.raises(SlugCollisionError) as exc_info:
        check_slug_collisions(regions)

    assert exc_info.value.collisions == {"new-york": ["NY", "NX"]}
    assert "new-york" in str(exc_info.value)
