"""Sample header records of the SoundFont hydra (``shdr`` chunk)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

from .errors import InvalidChunkSizeError, UnknownSampleTypeError
from .riff import Chunk, ChunkId

_RECORD = struct.Struct("<20sIIIIIBbHH")


class SampleLink(IntEnum):
    """The kind of a sample and how it links to others."""

    NONE = 0

    MONO_SAMPLE = 0x1
    RIGHT_SAMPLE = 0x2
    LEFT_SAMPLE = 0x4
    LINKED_SAMPLE = 0x8

    ROM_MONO_SAMPLE = 0x8001
    ROM_RIGHT_SAMPLE = 0x8002
    ROM_LEFT_SAMPLE = 0x8004
    ROM_LINKED_SAMPLE = 0x8008

    VORBIS_MONO_SAMPLE = 0x11
    VORBIS_RIGHT_SAMPLE = 0x12
    VORBIS_LEFT_SAMPLE = 0x14
    VORBIS_LINKED_SAMPLE = 0x18

    def is_mono(self) -> bool:
        return self in (
            SampleLink.MONO_SAMPLE,
            SampleLink.ROM_MONO_SAMPLE,
            SampleLink.VORBIS_MONO_SAMPLE,
        )

    def is_right(self) -> bool:
        return self in (
            SampleLink.RIGHT_SAMPLE,
            SampleLink.ROM_RIGHT_SAMPLE,
            SampleLink.VORBIS_RIGHT_SAMPLE,
        )

    def is_left(self) -> bool:
        return self in (
            SampleLink.LEFT_SAMPLE,
            SampleLink.ROM_LEFT_SAMPLE,
            SampleLink.VORBIS_LEFT_SAMPLE,
        )

    def is_linked(self) -> bool:
        return self in (
            SampleLink.LINKED_SAMPLE,
            SampleLink.ROM_LINKED_SAMPLE,
            SampleLink.VORBIS_LINKED_SAMPLE,
        )

    def is_rom(self) -> bool:
        return self in (
            SampleLink.ROM_MONO_SAMPLE,
            SampleLink.ROM_RIGHT_SAMPLE,
            SampleLink.ROM_LEFT_SAMPLE,
            SampleLink.ROM_LINKED_SAMPLE,
        )

    def is_vorbis(self) -> bool:
        return self in (
            SampleLink.VORBIS_MONO_SAMPLE,
            SampleLink.VORBIS_RIGHT_SAMPLE,
            SampleLink.VORBIS_LEFT_SAMPLE,
            SampleLink.VORBIS_LINKED_SAMPLE,
        )


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8").rstrip()


@dataclass(frozen=True)
class SampleHeader:
    """Where a sample lies in the sample data and how it is to be played."""

    name: str
    start: int
    end: int
    loop_start: int
    loop_end: int
    sample_rate: int
    origpitch: int
    pitchadj: int
    sample_link: int
    sample_type: SampleLink

    @classmethod
    def parse(cls, data: bytes) -> SampleHeader:
        """Decode a sample header from its 46-byte record."""
        if len(data) != _RECORD.size:
            raise ValueError(
                f"sample record must be {_RECORD.size} bytes, got {len(data)}"
            )
        (
            raw_name,
            start,
            end,
            loop_start,
            loop_end,
            sample_rate,
            origpitch,
            pitchadj,
            sample_link,
            raw_type,
        ) = _RECORD.unpack(data)
        try:
            sample_type = SampleLink(raw_type)
        except ValueError:
            raise UnknownSampleTypeError(raw_type) from None
        return cls(
            name=_decode_name(raw_name),
            start=start,
            end=end,
            loop_start=loop_start,
            loop_end=loop_end,
            sample_rate=sample_rate,
            origpitch=origpitch,
            pitchadj=pitchadj,
            sample_link=sample_link,
            sample_type=sample_type,
        )


def read_sample_headers(chunk: Chunk, stream: BinaryIO) -> list[SampleHeader]:
    """Read every record of an ``shdr`` chunk."""
    if chunk.id != ChunkId.shdr:
        raise ValueError(f"expected an shdr chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD.size != 0:
        raise InvalidChunkSizeError("sample", size)
    data = chunk.read_contents(stream)
    return [
        SampleHeader.parse(data[offset : offset + _RECORD.size])
        for offset in range(0, size, _RECORD.size)
    ]