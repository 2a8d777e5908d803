"""The preset, instrument and sample header list (``LIST pdta``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Callable

from .errors import MissingChunk, MissingChunkError, UnexpectedChunkError
from .generator import Generator, read_generators
from .modulator import Modulator, read_modulators
from .records import (
    Bag,
    InstrumentHeader,
    PresetHeader,
    read_bags,
    read_instrument_headers,
    read_preset_headers,
)
from .riff import Chunk, ChunkId
from .sample import SampleHeader, read_sample_headers

_Reader = Callable[[Chunk, BinaryIO], list]

_MEMBERS: dict[ChunkId, tuple[str, _Reader]] = {
    ChunkId.phdr: ("preset_headers", read_preset_headers),
    ChunkId.pbag: ("preset_bags", read_bags),
    ChunkId.pmod: ("preset_modulators", read_modulators),
    ChunkId.pgen: ("preset_generators", read_generators),
    ChunkId.inst: ("instrument_headers", read_instrument_headers),
    ChunkId.ibag: ("instrument_bags", read_bags),
    ChunkId.imod: ("instrument_modulators", read_modulators),
    ChunkId.igen: ("instrument_generators", read_generators),
    ChunkId.shdr: ("sample_headers", read_sample_headers),
}

_REQUIRED = (
    ("preset_headers", MissingChunk.PRESET_HEADERS),
    ("preset_bags", MissingChunk.PRESET_BAGS),
    ("preset_modulators", MissingChunk.PRESET_MODULATORS),
    ("preset_generators", MissingChunk.PRESET_GENERATORS),
    ("instrument_headers", MissingChunk.INSTRUMENT_HEADERS),
    ("instrument_bags", MissingChunk.INSTRUMENT_BAGS),
    ("instrument_modulators", MissingChunk.INSTRUMENT_MODULATORS),
    ("instrument_generators", MissingChunk.INSTRUMENT_GENERATORS),
    ("sample_headers", MissingChunk.SAMPLE_HEADERS),
)


@dataclass(frozen=True)
class Hydra:
    """All records of the ``pdta`` list, as stored in the file."""

    preset_headers: list[PresetHeader]
    preset_bags: list[Bag]
    preset_modulators: list[Modulator]
    preset_generators: list[Generator]

    instrument_headers: list[InstrumentHeader]
    instrument_bags: list[Bag]
    instrument_modulators: list[Modulator]
    instrument_generators: list[Generator]

    sample_headers: list[SampleHeader]

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> Hydra:
        """Read a ``pdta`` list chunk; all nine sub-chunks are required."""
        if chunk.id != ChunkId.LIST:
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != ChunkId.pdta:
            raise ValueError(f"expected a pdta list, got {form!r}")

        found: dict[str, list] = {}
        for child in chunk.children(stream):
            member = _MEMBERS.get(child.id)
            if member is None:
                raise UnexpectedChunkError("pdta", child)
            field, reader = member
            found[field] = reader(child, stream)

        for field, missing in _REQUIRED:
            if field not in found:
                raise MissingChunkError(missing)
        return cls(**found)