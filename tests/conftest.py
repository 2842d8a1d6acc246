"""Shared pytest fixtures for albumtags tests."""

import struct
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger

STREAMINFO = 0
VORBIS_COMMENT = 4


def _block(code: int, data: bytes, last: bool) -> bytes:
    header = bytes([(0x80 if last else 0x00) | code]) + len(data).to_bytes(3, "big")
    return header + data


def _streaminfo() -> bytes:
    # 44.1 kHz, stereo, 16 bit, no samples
    packed = (44100 << 44) | (1 << 41) | (15 << 36)
    return struct.pack(">HH", 4096, 4096) + bytes(6) + packed.to_bytes(8, "big") + bytes(16)


def _vorbis_comment(comments: list[tuple[str, str]]) -> bytes:
    vendor = b"albumtags tests"
    data = struct.pack("<I", len(vendor)) + vendor + struct.pack("<I", len(comments))
    for key, value in comments:
        entry = f"{key}={value}".encode("utf-8")
        data += struct.pack("<I", len(entry)) + entry
    return data


def write_flac(path: Path, comments: list[tuple[str, str]] | None = None) -> Path:
    """Write a minimal FLAC file: STREAMINFO plus an optional VORBIS_COMMENT block."""
    blocks = _block(STREAMINFO, _streaminfo(), last=comments is None)
    if comments is not None:
        blocks += _block(VORBIS_COMMENT, _vorbis_comment(comments), last=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"fLaC" + blocks)
    return path


@pytest.fixture
def flac() -> Callable[..., Path]:
    return write_flac


@pytest.fixture
def corrupt_flac() -> Callable[[Path], Path]:
    def _write(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"this is not a flac stream")
        return path

    return _write


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
