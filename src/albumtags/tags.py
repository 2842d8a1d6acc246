"""Extract track metadata from embedded audio tags."""

import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from mutagen import MutagenError
from mutagen.flac import FLAC

from albumtags.errors import InvalidFormatError, TagFormatError, UnsupportedCodecError
from albumtags.models import Codec, Track

SINGLE = "single"
MULTI = "multi"
NUMBER = "number"

# Vorbis comment name -> (Track attribute, value shape)
TAG_FIELDS: dict[str, tuple[str, str]] = {
    "TITLE": ("title", SINGLE),
    "ALBUM": ("album", SINGLE),
    "ARTIST": ("artists", MULTI),
    "ALBUMARTIST": ("album_artist", SINGLE),
    "COMPOSER": ("composers", MULTI),
    "TRACKNUMBER": ("track_number", NUMBER),
    "TRACKTOTAL": ("track_total", NUMBER),
    "DISCNUMBER": ("disc_number", NUMBER),
    "DISCTOTAL": ("disc_total", NUMBER),
    "DATE": ("date", NUMBER),
    "CONTACT": ("www", SINGLE),
    "GENRE": ("genres", MULTI),
    "COPYRIGHT": ("copyright", SINGLE),
    "ENCODED-BY": ("encoded_by", SINGLE),
    "DESCRIPTION": ("comment", SINGLE),
}

_NUMBER_RE = re.compile(r"\+?[0-9]+")


class CommentReader:
    """Read typed values out of a tag name -> value list mapping.

    Single-valued reads keep the first value and remember the tag name in
    ``discarded`` when more values were present.
    """

    def __init__(self, comments: Mapping[str, Sequence[str]]) -> None:
        self._comments = comments
        self.discarded: list[str] = []

    def single(self, key: str) -> str | None:
        values = self._comments.get(key)
        if not values:
            return None
        if len(values) > 1:
            self.discarded.append(key)
        return str(values[0])

    def multi(self, key: str) -> list[str]:
        return [str(v) for v in self._comments.get(key) or []]

    def number(self, key: str) -> int | None:
        raw = self.single(key)
        if raw is None or not _NUMBER_RE.fullmatch(raw):
            return None
        return int(raw)

    def track(self, path: Path | None = None, codec: Codec | None = None) -> Track:
        readers = {SINGLE: self.single, MULTI: self.multi, NUMBER: self.number}
        values = {attr: readers[shape](key) for key, (attr, shape) in TAG_FIELDS.items()}
        return Track(path=path, codec=codec, discarded=list(self.discarded), **values)


def read_track(path: str | Path) -> Track:
    """Create a Track from an audio file with a supported codec."""
    path = Path(path)
    codec = Codec.from_path(path)
    if codec is None:
        raise InvalidFormatError(path)
    if not codec.extractable:
        raise UnsupportedCodecError(codec)
    return read_flac(path)


def read_flac(path: Path) -> Track:
    try:
        audio = FLAC(path)
    except (MutagenError, OSError) as exc:
        raise TagFormatError(path, exc) from exc

    # A FLAC file without a VORBIS_COMMENT block simply carries no tags.
    if audio.tags is None:
        return Track(path=path, codec=Codec.FLAC)
    return CommentReader(audio.tags).track(path, Codec.FLAC)
