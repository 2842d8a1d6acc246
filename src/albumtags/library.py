"""Albums and libraries: tracks grouped by directory.

Expected directory layout::

    <root>/
        song.flac            -> album "."
        Artist A/
            Album 1/
                01.flac      -> album "Artist A/Album 1"
        Compilation/
            01.flac          -> album "Compilation"

Every directory holding at least one readable audio file is an album, keyed by
its path relative to the library root.  Keys are always handed out in sorted
order so output does not depend on filesystem traversal order.
"""

from collections.abc import Iterator
from pathlib import Path

from albumtags.errors import LibraryError
from albumtags.models import MULTI_FIELDS, Track
from albumtags.tags import read_track


class Album:
    """The tracks found directly inside one directory."""

    def __init__(self, path: str | Path, tracks: list[Track] | None = None) -> None:
        self._path = Path(path)
        self.tracks: list[Track] = list(tracks) if tracks else []

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __repr__(self) -> str:
        return f"Album({str(self._path)!r}, tracks={len(self.tracks)})"

    def is_empty(self) -> bool:
        return not self.tracks

    def add_track(self, path: str | Path) -> None:
        self.tracks.append(read_track(path))

    def values(self, attribute: str) -> list[str]:
        """Sorted distinct values of a multi-valued field across all tracks."""
        if attribute not in MULTI_FIELDS:
            raise ValueError(f"not a multi-valued field: {attribute}")
        return sorted({v for track in self.tracks for v in getattr(track, attribute)})

    def genres(self) -> list[str]:
        return self.values("genres")

    def artists(self) -> list[str]:
        return self.values("artists")

    def composers(self) -> list[str]:
        return self.values("composers")


class Library:
    """All albums below a root directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._albums: dict[str, Album] = {}
        self.failures: dict[str, LibraryError] = {}

    @property
    def root(self) -> Path:
        return self._root

    def __len__(self) -> int:
        return len(self._albums)

    def __contains__(self, key: object) -> bool:
        return key in self._albums

    def add(self, key: str, album: Album) -> None:
        self._albums[key] = album

    def get(self, key: str) -> Album | None:
        return self._albums.get(key)

    def collection(self) -> dict[str, Album]:
        return self._albums

    def keys(self) -> list[str]:
        """Album keys in ascending lexical order."""
        return sorted(self._albums)

    def albums(self) -> list[Album]:
        """Albums in the same order as :meth:`keys`."""
        return [self._albums[key] for key in self.keys()]

    def key_relative(self, path: str | Path) -> str:
        """Return the album key for *path*; the root itself is ``"."``.

        Raises ValueError when *path* is not beneath the root.
        """
        return Path(path).relative_to(self._root).as_posix()
