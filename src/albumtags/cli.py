"""CLI entrypoint for albumtags."""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from albumtags.config import load_config
from albumtags.log import setup_logging
from albumtags.models import MULTI_FIELDS

app = typer.Typer(
    name="albumtags",
    help="Inspect embedded tags across a folder-per-album music library",
    no_args_is_help=True,
)


class AggregateTag(str, Enum):
    genres = "genres"
    artists = "artists"
    composers = "composers"


@app.command()
def show(
    directory: Optional[Path] = typer.Argument(None, help="Directory to read metadata from"),
    tag: Optional[AggregateTag] = typer.Option(None, "--tag", "-t", help="Tag to read per album"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print more information"),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar while scanning"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to TOML config file"),
) -> None:
    """Print the distinct values of a tag for every album in a library."""
    cfg = load_config(config)
    setup_logging(verbose=verbose or cfg.verbose)

    library_dir = directory if directory is not None else cfg.library
    if library_dir is None:
        typer.echo("Error: no library directory given", err=True)
        raise typer.Exit(1)
    library_dir = Path(library_dir).expanduser()
    if not library_dir.is_dir():
        typer.echo(f"Error: {library_dir} is not a directory", err=True)
        raise typer.Exit(1)

    attribute = tag.value if tag is not None else cfg.tag
    if attribute not in MULTI_FIELDS:
        typer.echo(f"Error: cannot aggregate tag {attribute!r}", err=True)
        raise typer.Exit(1)

    from albumtags.formatting import KeyValueFormatter
    from albumtags.scan import build_library

    library = build_library(library_dir, progress=progress)
    if not len(library):
        logger.error("No albums found.")
        return

    keys = library.keys()
    fmt = KeyValueFormatter(
        key_padding=cfg.key_padding if cfg.key_padding is not None else max(len(k) for k in keys),
        multi_delimiter=cfg.multi_delimiter,
        value_delimiter=cfg.value_delimiter,
    )
    for key in keys:
        typer.echo(fmt.format_multi(key, library.get(key).values(attribute)))


@app.command()
def track(
    file: Path = typer.Argument(..., help="Audio file to read"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print more information"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to TOML config file"),
) -> None:
    """Print the tags read from a single audio file."""
    cfg = load_config(config)
    setup_logging(verbose=verbose or cfg.verbose)

    from albumtags.errors import LibraryError
    from albumtags.formatting import KeyValueFormatter
    from albumtags.tags import read_track

    try:
        t = read_track(file)
    except LibraryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    fields = list(t.fields())
    fmt = KeyValueFormatter(
        key_padding=cfg.key_padding if cfg.key_padding is not None else max(len(name) for name, _ in fields),
        single_delimiter=cfg.single_delimiter,
        multi_delimiter=cfg.multi_delimiter,
        value_delimiter=cfg.value_delimiter,
    )
    for name, value in fields:
        if isinstance(value, list):
            typer.echo(fmt.format_multi(name, value))
        else:
            typer.echo(fmt.format_single(name, "" if value is None else value))
    if t.discarded:
        typer.echo(fmt.format_multi("discarded", t.discarded))


if __name__ == "__main__":
    app()
