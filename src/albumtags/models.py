"""Data models for codecs and tracks."""

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Codec(Enum):
    FLAC = "flac"
    OPUS = "opus"
    M4A = "m4a"
    MP3 = "mp3"

    @classmethod
    def from_path(cls, path: str | Path) -> "Codec | None":
        """Classify a file by its (case-insensitive) extension alone."""
        suffix = Path(path).suffix.lower().lstrip(".")
        return _EXTENSIONS.get(suffix)

    @property
    def extractable(self) -> bool:
        """Whether tags can be read from files of this codec."""
        return self is Codec.FLAC


_EXTENSIONS = {
    "flac": Codec.FLAC,
    "opus": Codec.OPUS,
    "m4a": Codec.M4A,
    "aac": Codec.M4A,
    "mp3": Codec.MP3,
}

classify = Codec.from_path

SINGLE_FIELDS = ("title", "album", "album_artist", "www", "copyright", "encoded_by", "comment")
NUMBER_FIELDS = ("track_number", "track_total", "disc_number", "disc_total", "date")
MULTI_FIELDS = ("artists", "composers", "genres")
TAG_ATTRIBUTES = frozenset(SINGLE_FIELDS + NUMBER_FIELDS + MULTI_FIELDS)


@dataclass
class Track:
    path: Path | None = None
    codec: Codec | None = None

    title: str | None = None
    album: str | None = None
    artists: list[str] = field(default_factory=list)
    album_artist: str | None = None
    composers: list[str] = field(default_factory=list)
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    date: int | None = None
    www: str | None = None
    genres: list[str] = field(default_factory=list)
    copyright: str | None = None
    encoded_by: str | None = None
    comment: str | None = None

    # Set once any tag field changes after construction; nothing here writes
    # the change back to the file.
    modified: bool = False
    # Tags that held several values where only the first one was kept.
    discarded: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_loaded", True)

    def __setattr__(self, name: str, value: object) -> None:
        object.__setattr__(self, name, value)
        if name in TAG_ATTRIBUTES and getattr(self, "_loaded", False):
            object.__setattr__(self, "modified", True)

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in SINGLE_FIELDS + NUMBER_FIELDS) and not any(
            getattr(self, name) for name in MULTI_FIELDS
        )

    def is_modified(self) -> bool:
        return self.modified

    def fields(self) -> Iterator[tuple[str, object]]:
        """Tag fields with their values, in declaration order."""
        for f in dataclasses.fields(self):
            if f.name in TAG_ATTRIBUTES:
                yield f.name, getattr(self, f.name)
