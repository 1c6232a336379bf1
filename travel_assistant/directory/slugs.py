"""
URL slug derivation for region names.

A slug is the lowercase, hyphenated, URL-safe projection of a display name,
used as the path segment of a state page (``browse/<slug>``).

Existing links depend on the exact output, including one quirk: the
double-hyphen collapse runs once and is not repeated, so runs of three or
more hyphens survive partially ("a   b" -> "a--b").
"""

import re
from typing import Dict, Iterable, List, TYPE_CHECKING

from travel_assistant.core.exceptions import SlugCollisionError

if TYPE_CHECKING:
    from travel_assistant.directory.regions import Region

_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s\-]", re.ASCII)
_WHITESPACE = re.compile(r"\s", re.ASCII)


def derive_slug(name: str) -> str:
    """
    Purify a region name for use in a URL.

    Examples:
        derive_slug("New York")        -> "new-york"
        derive_slug("O'Brien & Co.")   -> "obrien-co"
        derive_slug("  A  B  ")        -> "-a-b-"
    """
    slug = _DISALLOWED.sub("", name)
    slug = _WHITESPACE.sub("-", slug)
    slug = slug.replace("--", "-")  # left by removed characters, e.g. " & "
    return slug.lower()


def check_slug_collisions(regions: Iterable["Region"]) -> Dict[str, "Region"]:
    """
    Index regions by derived slug.

    Raises:
        SlugCollisionError: if two regions derive the same slug
    """
    index: Dict[str, "Region"] = {}
    collisions: Dict[str, List[str]] = {}

    for region in regions:
        slug = derive_slug(region.name)
        if slug in index:
            collisions.setdefault(slug, [index[slug].code]).append(region.code)
            continue
        index[slug] = region

    if collisions:
        raise SlugCollisionError(collisions)

    return index
