"""Low-level reading of a whole SoundFont file, with no post-processing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .errors import MissingChunk, MissingChunkError, UnexpectedChunkError
from .hydra import Hydra
from .info import Info
from .riff import Chunk, ChunkId
from .sample_data import SampleData


@dataclass(frozen=True)
class RawSoundFontData:
    """The three top-level lists of a SoundFont file, as stored in it."""

    info: Info
    sample_data: SampleData
    hydra: Hydra

    @classmethod
    def load(cls, stream: BinaryIO) -> RawSoundFontData:
        """Read a SoundFont file from a seekable binary stream."""
        sfbk = Chunk.read(stream, 0)
        if sfbk.id != ChunkId.RIFF:
            raise ValueError(f"expected a RIFF chunk, got {sfbk.id!r}")
        form = sfbk.read_type(stream)
        if form != ChunkId.sfbk:
            raise ValueError(f"expected an sfbk form, got {form!r}")

        info = None
        sample_data = None
        hydra = None

        for child in sfbk.children(stream):
            if child.id != ChunkId.LIST:
                raise ValueError(f"expected a LIST chunk, got {child.id!r}")
            child_form = child.read_type(stream)
            if child_form == ChunkId.INFO:
                info = Info.read(child, stream)
            elif child_form == ChunkId.sdta:
                sample_data = SampleData.read(child, stream)
            elif child_form == ChunkId.pdta:
                hydra = Hydra.read(child, stream)
            else:
                raise UnexpectedChunkError("root", child)

        if info is None:
            raise MissingChunkError(MissingChunk.INFO)
        if sample_data is None:
            raise MissingChunkError(MissingChunk.SAMPLE_DATA)
        if hydra is None:
            raise MissingChunkError(MissingChunk.HYDRA)
        return cls(info=info, sample_data=sample_data, hydra=hydra)