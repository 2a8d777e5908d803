"""The supplemental information list (``LIST INFO``) of a SoundFont file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import MissingChunk, MissingChunkError, UnexpectedChunkError
from .riff import Chunk, ChunkId

_VERSION = struct.Struct("<HH")

_STRING_FIELDS = {
    ChunkId.isng: "sound_engine",
    ChunkId.INAM: "bank_name",
    ChunkId.irom: "rom_name",
    ChunkId.ICRD: "creation_date",
    ChunkId.IENG: "engineers",
    ChunkId.IPRD: "product",
    ChunkId.ICOP: "copyright",
    ChunkId.ICMT: "comments",
    ChunkId.ISFT: "software",
}

_VERSION_FIELDS = {
    ChunkId.ifil: "version",
    ChunkId.iver: "rom_version",
}


def _decode_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8")


@dataclass(frozen=True)
class Version:
    """A major/minor version pair."""

    major: int
    minor: int

    @classmethod
    def parse(cls, data: bytes) -> Version:
        """Decode a version from the first four bytes of ``data``."""
        if len(data) < _VERSION.size:
            raise ValueError(
                f"version record needs {_VERSION.size} bytes, got {len(data)}"
            )
        major, minor = _VERSION.unpack_from(data, 0)
        return cls(major=major, minor=minor)


@dataclass(frozen=True)
class Info:
    """Supplemental information about a SoundFont bank."""

    version: Version
    sound_engine: str = ""
    bank_name: str = ""
    rom_name: Optional[str] = None
    rom_version: Optional[Version] = None
    creation_date: Optional[str] = None
    engineers: Optional[str] = None
    product: Optional[str] = None
    copyright: Optional[str] = None
    comments: Optional[str] = None
    software: Optional[str] = None

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> Info:
        """Read an ``INFO`` list chunk.

        Sound engine and bank name are required by the format but often
        missing, so they default to empty strings.
        """
        if chunk.id != ChunkId.LIST:
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != ChunkId.INFO:
            raise ValueError(f"expected an INFO list, got {form!r}")

        fields: dict[str, object] = {}
        for child in chunk.children(stream):
            if child.id in _VERSION_FIELDS:
                fields[_VERSION_FIELDS[child.id]] = Version.parse(
                    child.read_contents(stream)
                )
            elif child.id in _STRING_FIELDS:
                fields[_STRING_FIELDS[child.id]] = _decode_string(
                    child.read_contents(stream)
                )
            else:
                raise UnexpectedChunkError("INFO", child)

        if "version" not in fields:
            raise MissingChunkError(MissingChunk.VERSION)
        return cls(**fields)