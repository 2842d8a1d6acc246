"""Exceptions raised while reading tags from an audio library."""

from pathlib import Path


class LibraryError(Exception):
    """Base exception for all albumtags errors."""


class UnsupportedCodecError(LibraryError):
    """The file's codec is recognised but tags cannot be read from it yet."""

    def __init__(self, codec) -> None:
        self.codec = codec
        super().__init__(f"codec not supported: {codec.name}")


class InvalidFormatError(LibraryError):
    """The file extension does not belong to any known codec."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"file format invalid: {self.path}")


class TagFormatError(LibraryError):
    """The tag container is malformed or could not be read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"error reading tags from {self.path}: {cause}")
