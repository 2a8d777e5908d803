"""Reading of RIFF-structured streams."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

_HEADER = struct.Struct("<4sI")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class ChunkId:
    """A four-character chunk identifier (FourCC)."""

    code: bytes

    def __post_init__(self) -> None:
        code = self.code
        if isinstance(code, str):
            code = code.encode("ascii")
        code = bytes(code)
        if len(code) != 4:
            raise ValueError(f"chunk id must be 4 bytes long, got {len(code)}")
        object.__setattr__(self, "code", code)

    def __str__(self) -> str:
        try:
            return self.code.decode("utf-8")
        except UnicodeDecodeError:
            return repr(self.code)

    def __repr__(self) -> str:
        try:
            return f"ChunkId({self.code.decode('utf-8')!r})"
        except UnicodeDecodeError:
            return f"ChunkId({self.code!r})"


# General RIFF structure
ChunkId.RIFF = ChunkId(b"RIFF")
ChunkId.LIST = ChunkId(b"LIST")

# RIFF form header
ChunkId.sfbk = ChunkId(b"sfbk")

# Members of RIFF(sfbk)
ChunkId.INFO = ChunkId(b"INFO")
ChunkId.sdta = ChunkId(b"sdta")
ChunkId.pdta = ChunkId(b"pdta")

# Members of LIST(INFO)
ChunkId.ifil = ChunkId(b"ifil")
ChunkId.isng = ChunkId(b"isng")
ChunkId.INAM = ChunkId(b"INAM")
ChunkId.irom = ChunkId(b"irom")
ChunkId.iver = ChunkId(b"iver")
ChunkId.ICRD = ChunkId(b"ICRD")
ChunkId.IENG = ChunkId(b"IENG")
ChunkId.IPRD = ChunkId(b"IPRD")
ChunkId.ICOP = ChunkId(b"ICOP")
ChunkId.ICMT = ChunkId(b"ICMT")
ChunkId.ISFT = ChunkId(b"ISFT")

# Members of LIST(sdta)
ChunkId.smpl = ChunkId(b"smpl")
ChunkId.sm24 = ChunkId(b"sm24")

# Members of LIST(pdta)
ChunkId.phdr = ChunkId(b"phdr")
ChunkId.pbag = ChunkId(b"pbag")
ChunkId.pmod = ChunkId(b"pmod")
ChunkId.pgen = ChunkId(b"pgen")
ChunkId.inst = ChunkId(b"inst")
ChunkId.ibag = ChunkId(b"ibag")
ChunkId.imod = ChunkId(b"imod")
ChunkId.igen = ChunkId(b"igen")
ChunkId.shdr = ChunkId(b"shdr")


@dataclass(frozen=True)
class Chunk:
    """A RIFF chunk header located at ``pos`` in a stream."""

    pos: int
    id: ChunkId
    length: int

    @classmethod
    def read(cls, stream: BinaryIO, pos: int) -> Chunk:
        """Read the chunk header found at ``pos``."""
        stream.seek(pos)
        fourcc, length = _HEADER.unpack(_read_exact(stream, _HEADER.size))
        return cls(pos=pos, id=ChunkId(fourcc), length=length)

    def content_offset(self) -> int:
        """Offset of the chunk's contents from the start of the stream."""
        return self.pos + 8

    def read_type(self, stream: BinaryIO) -> ChunkId:
        """Read the form type of a RIFF or LIST chunk."""
        stream.seek(self.content_offset())
        return ChunkId(_read_exact(stream, 4))

    def read_contents(self, stream: BinaryIO) -> bytes:
        """Read the whole contents of the chunk."""
        stream.seek(self.content_offset())
        return _read_exact(stream, self.length)

    def children(self, stream: BinaryIO) -> Iterator[Chunk]:
        """Yield the sub-chunks of a RIFF or LIST chunk in order."""
        cur = self.pos + 12
        end = self.pos + 4 + self.length
        while cur < end:
            chunk = Chunk.read(stream, cur)
            cur += chunk.length + 8 + chunk.length % 2
            yield chunk