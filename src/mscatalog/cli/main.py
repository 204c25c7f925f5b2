"""Command-line interface for mscatalog.

Provides CLI commands for browsing a catalog directory.
"""

import asyncio
import importlib.metadata
import json
import sys
from pathlib import Path
from typing import Any

import click

from mscatalog.models import MANUSCRIPT_FIELDS, DateRange, FilterCriteria
from mscatalog.query import DEFAULT_PAGE_SIZE, FILTER_TYPES, SEARCH_FIELDS, SORTABLE_FIELDS

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("mscatalog")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_FILTER_LABELS = {ft.field: ft.label for ft in FILTER_TYPES}

_data_dir_argument = click.argument(
    "data_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
_log_file_option = click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append JSONL load events to this file",
)


def _parse_filters(
    filters: tuple[str, ...],
    death_min: str | None,
    death_max: str | None,
) -> FilterCriteria:
    """Build criteria from repeated FIELD=VALUE options and date bounds."""
    values: dict[str, Any] = {}
    for item in filters:
        field, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected FIELD=VALUE, got {item!r}", param_hint="--filter")
        values[field.strip()] = value

    if death_min or death_max:
        values["death_date_range"] = DateRange(min=death_min, max=death_max)

    try:
        return FilterCriteria.from_mapping(values)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--filter") from e


def _run(coro: Any, log_catalog: Any = None) -> Any:
    try:
        return asyncio.run(coro)
    finally:
        if log_catalog is not None and log_catalog.audit_logger is not None:
            log_catalog.audit_logger.close()


def _format_row(manuscript: Any) -> str:
    parts = [manuscript.unique_id, manuscript.display_title or "-"]
    if manuscript.author:
        parts.append(manuscript.author)
    if manuscript.death_date:
        parts.append(f"d. {manuscript.death_date}")
    return "  ".join(parts)


@click.group()
@click.version_option(version=__version__, prog_name="mscatalog")
def cli() -> None:
    """Browse a manuscript catalog stored as CSV tables.

    DATA_DIR holds manuscript_metadata.csv and chunks/locations_N.csv.
    Use 'mscatalog COMMAND --help' for command-specific help.
    """


@cli.command()
@_data_dir_argument
@click.argument("term", required=False, default="")
@click.option(
    "--field",
    "-f",
    "fields",
    multiple=True,
    type=click.Choice(SEARCH_FIELDS),
    help="Restrict the search term to this field (repeatable)",
)
@click.option(
    "--filter",
    "filters",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Filter on a field (repeatable): categories, century, titles, "
    "shuhras, author, unique_id, death_date",
)
@click.option("--death-min", default=None, help="Lowest death date (inclusive)")
@click.option("--death-max", default=None, help="Highest death date (inclusive)")
@click.option("--sort", "sort_key", type=click.Choice(SORTABLE_FIELDS), default=None)
@click.option("--desc", is_flag=True, help="Sort descending")
@click.option("--page", "page_index", type=click.IntRange(min=1), default=1, help="Page number")
@click.option(
    "--page-size", type=click.IntRange(min=1), default=DEFAULT_PAGE_SIZE, help="Rows per page"
)
@click.option("--json", "as_json", is_flag=True, help="Print the page as JSON")
@_log_file_option
def search(
    data_dir: Path,
    term: str,
    fields: tuple[str, ...],
    filters: tuple[str, ...],
    death_min: str | None,
    death_max: str | None,
    sort_key: str | None,
    desc: bool,
    page_index: int,
    page_size: int,
    as_json: bool,
    log_file: Path | None,
) -> None:
    """Search manuscripts in DATA_DIR matching TERM and filters.

    Examples
    --------
        mscatalog search data/ "ibn"
        mscatalog search data/ --filter century=5 --death-min 400 --sort death_date
        mscatalog search data/ fiqh -f categories --page 2 --json
    """
    from mscatalog import open_catalog

    criteria = _parse_filters(filters, death_min, death_max)

    try:
        catalog = open_catalog(data_dir, event_log_path=log_file)
        results = _run(catalog.search(term, fields, criteria), catalog)
        page = catalog.page(
            results,
            sort_key=sort_key,
            descending=desc,
            page_index=page_index - 1,
            page_size=page_size,
        )
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "total": page.total,
            "page": page_index,
            "page_count": page.page_count,
            "items": [m.to_dict() for m in page.items],
        }
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for manuscript in page.items:
        click.echo(_format_row(manuscript))
    click.secho(
        f"Page {page_index} of {max(page.page_count, 1)} ({page.total} matching records)",
        fg="green",
        err=True,
    )


@cli.command()
@_data_dir_argument
@click.argument("manuscript_id")
@click.option("--json", "as_json", is_flag=True, help="Print details as JSON")
@_log_file_option
def show(data_dir: Path, manuscript_id: str, as_json: bool, log_file: Path | None) -> None:
    """Show metadata and known locations of MANUSCRIPT_ID."""
    from mscatalog import open_catalog

    try:
        catalog = open_catalog(data_dir, event_log_path=log_file)
        details = _run(catalog.get_details(manuscript_id), catalog)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if details is None:
        click.secho(f"Manuscript not found: {manuscript_id}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(details.to_dict(), ensure_ascii=False, indent=2))
        return

    ms = details.manuscript
    click.echo(f"ID:         {ms.unique_id}")
    click.echo(f"Title:      {ms.display_title or '-'}")
    for title in ms.alternate_titles:
        click.echo(f"            {title}")
    click.echo(f"Author:     {ms.author or '-'}")
    click.echo(f"Shuhra:     {', '.join(ms.shuhras) or '-'}")
    click.echo(f"Subject:    {', '.join(ms.categories) or '-'}")
    click.echo(f"Death date: {ms.death_date or '-'}")
    click.echo(f"Century:    {ms.century or '-'}")
    _echo_locations(details.locations)


def _echo_locations(locations: tuple) -> None:
    if not locations:
        click.echo("No known locations.")
        return

    click.echo(f"Locations ({len(locations)}):")
    for loc in locations:
        place = ", ".join(p for p in (loc.city, loc.country) if p) or "-"
        number = f" #{loc.catalog_num}" if loc.catalog_num else ""
        click.echo(f"  - {loc.library or '-'} ({place}){number}")


@cli.command()
@_data_dir_argument
@click.argument("manuscript_id")
@_log_file_option
def locations(data_dir: Path, manuscript_id: str, log_file: Path | None) -> None:
    """List known locations of MANUSCRIPT_ID without consulting the metadata table."""
    from mscatalog import open_catalog

    try:
        catalog = open_catalog(data_dir, event_log_path=log_file)
        found = _run(catalog.resolve_locations(manuscript_id), catalog)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    _echo_locations(found)


@cli.command()
@_data_dir_argument
@click.argument("field", type=click.Choice(MANUSCRIPT_FIELDS))
@_log_file_option
def facets(data_dir: Path, field: str, log_file: Path | None) -> None:
    """List the distinct values of FIELD, sorted."""
    from mscatalog import open_catalog

    try:
        catalog = open_catalog(data_dir, event_log_path=log_file)
        values = _run(catalog.unique_values(field), catalog)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    for value in values:
        click.echo(value)
    label = _FILTER_LABELS.get(field, field)
    click.secho(f"{len(values)} distinct value(s) for {label}", fg="green", err=True)


if __name__ == "__main__":
    cli()
