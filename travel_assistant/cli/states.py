"""State directory CLI commands."""

import click

from travel_assistant.core.config import get_settings
from travel_assistant.core.database import get_db_session
from travel_assistant.core.exceptions import InvalidArgument, RegionStoreError, SlugCollisionError
from travel_assistant.directory import (
    LinkBuilder,
    NotFound,
    SqlRegionStore,
    StateDirectory,
    check_slug_collisions,
    derive_slug,
)
from travel_assistant.directory.markup import build_dropdown, render_listing_html

# Reported as CLI errors instead of tracebacks
DIRECTORY_ERRORS = (InvalidArgument, SlugCollisionError, RegionStoreError)


@click.group()
def states():
    """State directory commands."""
    pass


@states.command("slug")
@click.argument("name")
def slug(name: str):
    """Print the URL slug for a state NAME."""
    click.echo(derive_slug(name))


@states.command("codes")
@click.option("--selected", "-s", default=None, help="Code to mark as selected")
@click.option("--html", "as_html", is_flag=True, help="Print <option> markup")
def codes(selected, as_html: bool):
    """List state codes."""
    try:
        with get_db_session() as session:
            options = StateDirectory(SqlRegionStore(session)).list_codes(selected)
    except DIRECTORY_ERRORS as e:
        raise click.ClickException(str(e)) from e

    if as_html:
        click.echo(build_dropdown(options))
        return

    for code, is_selected in options:
        click.echo(f"{code} *" if is_selected else code)


@states.command("find")
@click.argument("slug")
def find(slug: str):
    """Look up a state by URL SLUG."""
    try:
        with get_db_session() as session:
            region = StateDirectory(SqlRegionStore(session)).find_by_slug(slug)
    except DIRECTORY_ERRORS as e:
        raise click.ClickException(str(e)) from e

    if isinstance(region, NotFound):
        raise click.ClickException(region.message)

    kind = "district" if region.is_district else "state"
    click.echo(f"{region.code}: {region.name} ({kind})")


@states.command("listing")
@click.option("--column-size", "-c", type=int, default=None, help="States per column")
@click.option("--html", "as_html", is_flag=True, help="Print HTML markup")
def listing(column_size, as_html: bool):
    """Show open ride needs and shares per state."""
    settings = get_settings()
    if column_size is None:
        column_size = settings.column_size

    try:
        with get_db_session() as session:
            directory = StateDirectory(SqlRegionStore(session), LinkBuilder.from_settings())
            result = directory.activity_listing(column_size=column_size)
    except DIRECTORY_ERRORS as e:
        raise click.ClickException(str(e)) from e

    if as_html:
        click.echo(render_listing_html(result))
        return

    for number, column in enumerate(result.columns, start=1):
        click.echo(f"\nColumn {number}:")
        for entry in column.entries:
            click.echo(
                f"  {entry.name:<22} {entry.need_count:>3} {entry.needs_label:<5} "
                f"{entry.share_count:>3} {entry.shares_label:<5} {entry.url}"
            )


@states.command("check-slugs")
def check_slugs():
    """Verify that no two states derive the same URL slug."""
    try:
        with get_db_session() as session:
            regions = SqlRegionStore(session).list_all()
        index = check_slug_collisions(regions)
    except DIRECTORY_ERRORS as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{len(index)} states, all slugs unique.")
