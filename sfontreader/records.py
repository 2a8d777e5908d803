"""Bag, instrument header and preset header records of the SoundFont hydra."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .errors import InvalidChunkSizeError
from .riff import Chunk, ChunkId

_BAG = struct.Struct("<HH")
_INSTRUMENT = struct.Struct("<20sH")
_PRESET = struct.Struct("<20sHHHIII")


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8").rstrip()


def _check_length(data: bytes, layout: struct.Struct, what: str) -> None:
    if len(data) != layout.size:
        raise ValueError(f"{what} record must be {layout.size} bytes, got {len(data)}")


def _record_slices(
    chunk: Chunk, stream: BinaryIO, size: int, kind: str
) -> Iterator[bytes]:
    length = chunk.length
    if length == 0 or length % size != 0:
        raise InvalidChunkSizeError(kind, length)
    data = chunk.read_contents(stream)
    return (data[offset : offset + size] for offset in range(0, length, size))


@dataclass(frozen=True)
class Bag:
    """A zone index: where a zone's generators and modulators begin."""

    generator_id: int
    modulator_id: int

    @classmethod
    def parse(cls, data: bytes) -> Bag:
        """Decode a bag from its 4-byte record."""
        _check_length(data, _BAG, "bag")
        generator_id, modulator_id = _BAG.unpack(data)
        return cls(generator_id=generator_id, modulator_id=modulator_id)


def read_bags(chunk: Chunk, stream: BinaryIO) -> list[Bag]:
    """Read every record of a ``pbag`` or ``ibag`` chunk."""
    if chunk.id not in (ChunkId.pbag, ChunkId.ibag):
        raise ValueError(f"expected a pbag or ibag chunk, got {chunk.id!r}")
    return [Bag.parse(record) for record in _record_slices(chunk, stream, _BAG.size, "bag")]


@dataclass(frozen=True)
class InstrumentHeader:
    """An instrument name and the index of its first zone."""

    name: str
    bag_id: int

    @classmethod
    def parse(cls, data: bytes) -> InstrumentHeader:
        """Decode an instrument header from its 22-byte record."""
        _check_length(data, _INSTRUMENT, "instrument")
        raw_name, bag_id = _INSTRUMENT.unpack(data)
        return cls(name=_decode_name(raw_name), bag_id=bag_id)


def read_instrument_headers(chunk: Chunk, stream: BinaryIO) -> list[InstrumentHeader]:
    """Read every record of an ``inst`` chunk."""
    if chunk.id != ChunkId.inst:
        raise ValueError(f"expected an inst chunk, got {chunk.id!r}")
    return [
        InstrumentHeader.parse(record)
        for record in _record_slices(chunk, stream, _INSTRUMENT.size, "instrument")
    ]


@dataclass(frozen=True)
class PresetHeader:
    """A preset's name, MIDI preset and bank numbers and first zone index."""

    name: str
    preset: int
    bank: int
    bag_id: int
    library: int
    genre: int
    morphology: int

    @classmethod
    def parse(cls, data: bytes) -> PresetHeader:
        """Decode a preset header from its 38-byte record."""
        _check_length(data, _PRESET, "preset")
        raw_name, preset, bank, bag_id, library, genre, morphology = _PRESET.unpack(data)
        return cls(
            name=_decode_name(raw_name),
            preset=preset,
            bank=bank,
            bag_id=bag_id,
            library=library,
            genre=genre,
            morphology=morphology,
        )


def read_preset_headers(chunk: Chunk, stream: BinaryIO) -> list[PresetHeader]:
    """Read every record of a ``phdr`` chunk."""
    if chunk.id != ChunkId.phdr:
        raise ValueError(f"expected a phdr chunk, got {chunk.id!r}")
    return [
        PresetHeader.parse(record)
        for record in _record_slices(chunk, stream, _PRESET.size, "preset")
    ]