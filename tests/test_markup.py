"""
Test dropdown and listing markup.
"""

from travel_assistant.directory import (
    InMemoryRegionStore,
    LinkBuilder,
    Region,
    RegionActivity,
    StateDirectory,
)
from travel_assistant.directory.markup import build_dropdown, render_listing_html


def test_build_dropdown():
    html = build_dropdown([("OH", False), ("PA", True)])
    assert html == (
        '<option value="OH">OH</option>\n'
        '<option selected value="PA">PA</option>'
    )


def test_build_dropdown_escapes_values():
    html = build_dropdown([('A"&', False)])
    assert html == '<option value="A&quot;&amp;">A&quot;&amp;</option>'


def test_build_dropdown_empty():
    assert build_dropdown([]) == ""


def test_build_dropdown_from_directory():
    directory = StateDirectory(InMemoryRegionStore([
        Region(code="PA", name="Pennsylvania"),
        Region(code="NY", name="New York"),
    ]))
    html = build_dropdown(directory.list_codes("PA"))
    assert html.splitlines() == [
        '<option value="NY">NY</option>',
        '<option selected value="PA">PA</option>',
    ]


def test_render_listing_html():
    directory = StateDirectory(InMemoryRegionStore([]), LinkBuilder("https://rides.example.org"))
    rows = [
        RegionActivity(region=Region(code="NY", name="New York"), need_count=1, share_count=0),
        RegionActivity(region=Region(code="OH", name="Ohio"), need_count=0, share_count=3),
    ]
    html = render_listing_html(directory.render_activity_listing(rows, column_size=1))

    assert html.startswith('<ul class="states">\n<li>\n<ul>\n<li>\n')
    assert html.endswith("</ul>\n</li>\n</ul>")
    # one inner list per column
    assert html.count("<ul>") == 2
    assert "</ul>\n</li>\n\n<li>\n<ul>\n" in html

    assert '<a href="https://rides.example.org/browse/new-york/">' in html
    assert "<h3>New York</h3>" in html
    assert '<p class="needed highlight">1 <span>Need</span></p>' in html
    assert '<p class="shares">0 <span>Rides</span></p>' in html
    assert '<p class="needed">0 <span>Needs</span></p>' in html
    assert '<p class="shares highlight">3 <span>Rides</span></p>' in html


def test_render_listing_html_escapes_names():
    directory = StateDirectory(InMemoryRegionStore([]))
    rows = [RegionActivity(region=Region(code="XX", name="<Fake>"))]
    html = render_listing_html(directory.render_activity_listing(rows))
    assert "<h3>&lt;Fake&gt;</h3>" in html


def test_render_empty_listing():
    directory = StateDirectory(InMemoryRegionStore([]))
    html = render_listing_html(directory.render_activity_listing([]))
    assert html == '<ul class="states">\n<li>\n<ul>\n</ul>\n</li>\n</ul>'
