"""The sample data list (``LIST sdta``) of a SoundFont file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import UnexpectedChunkError
from .riff import Chunk, ChunkId


@dataclass(frozen=True)
class SampleChunk:
    """Location of raw sample bytes: ``length`` bytes starting at ``offset``."""

    offset: int
    length: int

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> SampleChunk:
        """Describe the contents of ``chunk``."""
        return cls(offset=chunk.content_offset(), length=chunk.length)


@dataclass(frozen=True)
class SampleData:
    """The ``smpl`` (upper 16 bits) and ``sm24`` (lower 8 bits) sample pools."""

    smpl: Optional[SampleChunk] = None
    sm24: Optional[SampleChunk] = None

    @classmethod
    def read(cls, chunk: Chunk, stream: BinaryIO) -> SampleData:
        """Read an ``sdta`` list chunk, locating its sample pools."""
        if chunk.id != ChunkId.LIST:
            raise ValueError(f"expected a LIST chunk, got {chunk.id!r}")
        form = chunk.read_type(stream)
        if form != ChunkId.sdta:
            raise ValueError(f"expected an sdta list, got {form!r}")

        smpl = None
        sm24 = None
        for child in chunk.children(stream):
            if child.id == ChunkId.smpl:
                smpl = SampleChunk.from_chunk(child)
            elif child.id == ChunkId.sm24:
                sm24 = SampleChunk.from_chunk(child)
            else:
                raise UnexpectedChunkError("sdta", child)
        return cls(smpl=smpl, sm24=sm24)