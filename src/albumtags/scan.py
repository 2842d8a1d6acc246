"""Scan a music library directory and collect tags per album."""

import os
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from tqdm import tqdm

from albumtags.errors import LibraryError
from albumtags.library import Album, Library
from albumtags.models import Codec

ErrorHandler = Callable[[str, LibraryError], None]


def _log_error(key: str, error: LibraryError) -> None:
    logger.error("{}: {}", key, error)


def scan_album(directory: str | Path) -> Album:
    """Read every audio file directly inside *directory*.

    Files are read in name order.  Subdirectories and files without a known
    audio extension are skipped; extraction errors propagate.
    """
    album = Album(directory)
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            continue
        if Codec.from_path(entry) is not None:
            album.add_track(entry)
    return album


def _walk_directories(root: Path) -> list[Path]:
    directories = []
    for dirpath, dirnames, _ in os.walk(root, onerror=lambda err: logger.warning("{}", err)):
        dirnames.sort()
        directories.append(Path(dirpath))
    return directories


def build_library(
    root: str | Path,
    on_error: ErrorHandler | None = None,
    progress: bool = False,
) -> Library:
    """Build a Library from every album directory beneath and including *root*.

    An album that fails to scan is left out and reported through *on_error*
    (logged by default); the remaining albums are still read.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    report = on_error or _log_error
    library = Library(root)

    directories = _walk_directories(root)
    for directory in tqdm(directories, desc="Scanning albums", unit="dir", disable=not progress):
        key = library.key_relative(directory)
        logger.debug("read {}", key)
        try:
            album = scan_album(directory)
        except LibraryError as exc:
            library.failures[key] = exc
            report(key, exc)
            continue
        if not album.is_empty():
            library.add(key, album)

    return library
