"""
HTML markup for directory models.

The <select> wrapper of the dropdown is left to each page so it can be
styled as needed; only the <option> elements are built here.
"""

from html import escape
from typing import Iterable, List, Tuple

from travel_assistant.directory.regions import ListingEntry, StateListing


def build_dropdown(options: Iterable[Tuple[str, bool]]) -> str:
    """Build one <option> element per ``(code, is_selected)`` pair."""
    lines: List[str] = []
    for code, selected in options:
        value = escape(code, quote=True)
        if selected:
            lines.append(f'<option selected value="{value}">{value}</option>')
        else:
            lines.append(f'<option value="{value}">{value}</option>')
    return "\n".join(lines)


def _entry_html(entry: ListingEntry) -> str:
    needed_class = "needed highlight" if entry.needs_highlight else "needed"
    shares_class = "shares highlight" if entry.shares_highlight else "shares"
    return (
        "<li>\n"
        f'<a href="{escape(entry.url, quote=True)}">\n'
        f"<h3>{escape(entry.name)}</h3>\n"
        f'<p class="{needed_class}">{entry.need_count} <span>{entry.needs_label}</span></p>\n'
        f'<p class="{shares_class}">{entry.share_count} <span>{entry.shares_label}</span></p>\n'
        "</a>\n"
        "</li>\n"
    )


def render_listing_html(listing: StateListing) -> str:
    """
    Render the state listing as nested lists, one inner <ul> per column.

    <ul class="states">
    <li><ul> ...entries... </ul></li>
    ...
    </ul>
    """
    columns = [
        "<li>\n<ul>\n" + "".join(_entry_html(entry) for entry in column.entries) + "</ul>\n</li>"
        for column in listing.columns
    ]
    if not columns:
        columns = ["<li>\n<ul>\n</ul>\n</li>"]
    return '<ul class="states">\n' + "\n\n".join(columns) + "\n</ul>"
