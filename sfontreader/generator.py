"""Generator records of the SoundFont hydra (``pgen`` and ``igen`` chunks)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Union

from .errors import InvalidChunkSizeError, UnknownGeneratorTypeError
from .riff import Chunk, ChunkId

_RECORD_SIZE = 4
_ID = struct.Struct("<H")
_RANGE = struct.Struct("<BB")
_UWORD = struct.Struct("<H")
_SWORD = struct.Struct("<h")


class GeneratorType(IntEnum):
    """The generator operators defined by the SoundFont format."""

    START_ADDRS_OFFSET = 0
    END_ADDRS_OFFSET = 1
    STARTLOOP_ADDRS_OFFSET = 2
    ENDLOOP_ADDRS_OFFSET = 3
    START_ADDRS_COARSE_OFFSET = 4
    MOD_LFO_TO_PITCH = 5
    VIB_LFO_TO_PITCH = 6
    MOD_ENV_TO_PITCH = 7
    INITIAL_FILTER_FC = 8
    INITIAL_FILTER_Q = 9
    MOD_LFO_TO_FILTER_FC = 10
    MOD_ENV_TO_FILTER_FC = 11
    END_ADDRS_COARSE_OFFSET = 12
    MOD_LFO_TO_VOLUME = 13
    UNUSED1 = 14
    CHORUS_EFFECTS_SEND = 15
    REVERB_EFFECTS_SEND = 16
    PAN = 17
    UNUSED2 = 18
    UNUSED3 = 19
    UNUSED4 = 20
    DELAY_MOD_LFO = 21
    FREQ_MOD_LFO = 22
    DELAY_VIB_LFO = 23
    FREQ_VIB_LFO = 24
    DELAY_MOD_ENV = 25
    ATTACK_MOD_ENV = 26
    HOLD_MOD_ENV = 27
    DECAY_MOD_ENV = 28
    SUSTAIN_MOD_ENV = 29
    RELEASE_MOD_ENV = 30
    KEYNUM_TO_MOD_ENV_HOLD = 31
    KEYNUM_TO_MOD_ENV_DECAY = 32
    DELAY_VOL_ENV = 33
    ATTACK_VOL_ENV = 34
    HOLD_VOL_ENV = 35
    DECAY_VOL_ENV = 36
    SUSTAIN_VOL_ENV = 37
    RELEASE_VOL_ENV = 38
    KEYNUM_TO_VOL_ENV_HOLD = 39
    KEYNUM_TO_VOL_ENV_DECAY = 40
    INSTRUMENT = 41
    RESERVED1 = 42
    KEY_RANGE = 43
    VEL_RANGE = 44
    STARTLOOP_ADDRS_COARSE_OFFSET = 45
    KEYNUM = 46
    VELOCITY = 47
    INITIAL_ATTENUATION = 48
    RESERVED2 = 49
    ENDLOOP_ADDRS_COARSE_OFFSET = 50
    COARSE_TUNE = 51
    FINE_TUNE = 52
    SAMPLE_ID = 53
    SAMPLE_MODES = 54
    RESERVED3 = 55
    SCALE_TUNING = 56
    EXCLUSIVE_CLASS = 57
    OVERRIDING_ROOT_KEY = 58
    UNUSED5 = 59
    END_OPER = 60

    @classmethod
    def from_raw(cls, value: int) -> GeneratorType:
        """Return the generator type with id ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownGeneratorTypeError(value) from None


@dataclass(frozen=True)
class GeneratorAmountRange:
    """A low/high byte pair, used by key and velocity ranges."""

    low: int
    high: int


GeneratorAmount = Union[int, GeneratorAmountRange]


@dataclass(frozen=True)
class Generator:
    """One generator record.

    ``ty`` is a :class:`GeneratorType` when the id is known, otherwise the raw id.
    ``amount`` is a :class:`GeneratorAmountRange` for range generators and an
    integer (unsigned for instrument and sample ids, signed otherwise) for the rest.
    """

    ty: GeneratorType | int
    amount: GeneratorAmount

    @classmethod
    def parse(cls, data: bytes) -> Generator:
        """Decode a generator from its 4-byte record."""
        if len(data) != _RECORD_SIZE:
            raise ValueError(
                f"generator record must be {_RECORD_SIZE} bytes, got {len(data)}"
            )
        (raw_id,) = _ID.unpack_from(data, 0)
        try:
            ty: GeneratorType | int = GeneratorType.from_raw(raw_id)
        except UnknownGeneratorTypeError:
            ty = raw_id

        amount: GeneratorAmount
        if ty in (GeneratorType.KEY_RANGE, GeneratorType.VEL_RANGE):
            low, high = _RANGE.unpack_from(data, 2)
            amount = GeneratorAmountRange(low=low, high=high)
        elif ty in (GeneratorType.INSTRUMENT, GeneratorType.SAMPLE_ID):
            (amount,) = _UWORD.unpack_from(data, 2)
        else:
            (amount,) = _SWORD.unpack_from(data, 2)
        return cls(ty=ty, amount=amount)

    def raw_type(self) -> int:
        """The generator id as stored in the file."""
        return int(self.ty)

    def known_type(self) -> GeneratorType:
        """The generator type, or :class:`UnknownGeneratorTypeError` if unknown."""
        if isinstance(self.ty, GeneratorType):
            return self.ty
        raise UnknownGeneratorTypeError(self.ty)


def read_generators(chunk: Chunk, stream: BinaryIO) -> list[Generator]:
    """Read every generator record of a ``pgen`` or ``igen`` chunk."""
    if chunk.id not in (ChunkId.pgen, ChunkId.igen):
        raise ValueError(f"expected a pgen or igen chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD_SIZE != 0:
        raise InvalidChunkSizeError("generator", size)
    data = chunk.read_contents(stream)
    return [
        Generator.parse(data[offset : offset + _RECORD_SIZE])
        for offset in range(0, size, _RECORD_SIZE)
    ]