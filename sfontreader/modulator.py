"""Modulator records of the SoundFont hydra (``pmod`` and ``imod`` chunks)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import BinaryIO, Union

from .errors import InvalidChunkSizeError, UnknownModulatorTransformError
from .generator import GeneratorType
from .riff import Chunk, ChunkId

_RECORD = struct.Struct("<HHhHH")


class GeneralPalette(IntEnum):
    """Controller sources of the general controller palette."""

    NO_CONTROLLER = 0
    NOTE_ON_VELOCITY = 2
    NOTE_ON_KEY_NUMBER = 3
    POLY_PRESSURE = 10
    CHANNEL_PRESSURE = 13
    PITCH_WHEEL = 14
    PITCH_WHEEL_SENSITIVITY = 16
    LINK = 127

    @classmethod
    def from_raw(cls, value: int) -> GeneralPalette | int:
        """Return the palette entry for ``value``, or ``value`` itself if unknown."""
        try:
            return cls(value)
        except ValueError:
            return value


class PaletteKind(Enum):
    """Which controller palette a modulator source selects."""

    GENERAL = "general"
    MIDI = "midi"


@dataclass(frozen=True)
class ControllerPalette:
    """A controller palette selection.

    For :attr:`PaletteKind.GENERAL` ``value`` is a :class:`GeneralPalette`
    (or the raw index when unknown); for :attr:`PaletteKind.MIDI` it is the
    MIDI continuous controller number.
    """

    kind: PaletteKind
    value: GeneralPalette | int


class SourceDirection(Enum):
    """Direction in which a controller moves between minimum and maximum."""

    POSITIVE = 0
    NEGATIVE = 1


class SourcePolarity(Enum):
    """Output range of a controller: 0..1 or -1..1."""

    UNIPOLAR = 0
    BIPOLAR = 1


class SourceType(IntEnum):
    """Continuity of a controller's mapping curve."""

    LINEAR = 0
    CONCAVE = 1
    CONVEX = 2
    SWITCH = 3

    @classmethod
    def from_raw(cls, value: int) -> SourceType | int:
        """Return the source type for ``value``, or ``value`` itself if unknown."""
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class ModulatorSource:
    """A decoded modulator source enumerator."""

    index: int
    controller_palette: ControllerPalette
    direction: SourceDirection
    polarity: SourcePolarity
    ty: Union[SourceType, int]

    @classmethod
    def from_raw(cls, value: int) -> ModulatorSource:
        """Decode a 16-bit source enumerator."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"modulator source must fit in 16 bits, got {value}")
        index = value & 0x7F
        if value & (1 << 7):
            palette = ControllerPalette(PaletteKind.MIDI, index)
        else:
            palette = ControllerPalette(PaletteKind.GENERAL, GeneralPalette.from_raw(index))
        direction = (
            SourceDirection.NEGATIVE if value & (1 << 8) else SourceDirection.POSITIVE
        )
        polarity = (
            SourcePolarity.BIPOLAR if value & (1 << 9) else SourcePolarity.UNIPOLAR
        )
        ty = SourceType.from_raw((value >> 10) & 0x3F)
        return cls(
            index=index,
            controller_palette=palette,
            direction=direction,
            polarity=polarity,
            ty=ty,
        )

    def is_linear(self) -> bool:
        return self.ty == SourceType.LINEAR

    def is_concave(self) -> bool:
        return self.ty == SourceType.CONCAVE

    def is_convex(self) -> bool:
        return self.ty == SourceType.CONVEX

    def is_switch(self) -> bool:
        return self.ty == SourceType.SWITCH

    def is_unipolar(self) -> bool:
        return self.polarity is SourcePolarity.UNIPOLAR

    def is_bipolar(self) -> bool:
        return self.polarity is SourcePolarity.BIPOLAR

    def is_positive(self) -> bool:
        return self.direction is SourceDirection.POSITIVE

    def is_negative(self) -> bool:
        return self.direction is SourceDirection.NEGATIVE

    def is_cc(self) -> bool:
        """True when the source is a MIDI continuous controller."""
        return self.controller_palette.kind is PaletteKind.MIDI

    def is_gc(self) -> bool:
        """True when the source comes from the general controller palette."""
        return self.controller_palette.kind is PaletteKind.GENERAL


class ModulatorTransform(IntEnum):
    """Transform applied to a modulator's output."""

    LINEAR = 0
    ABSOLUTE = 2

    @classmethod
    def from_raw(cls, value: int) -> ModulatorTransform:
        """Return the transform for ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownModulatorTransformError(value) from None


@dataclass(frozen=True)
class Modulator:
    """One modulator record."""

    src: ModulatorSource
    dest: GeneratorType
    amount: int
    amt_src: ModulatorSource
    transform: ModulatorTransform

    @classmethod
    def parse(cls, data: bytes, terminal: bool) -> Modulator:
        """Decode a modulator from its 10-byte record.

        The terminal record is read as all zeros whatever it holds.
        """
        if len(data) != _RECORD.size:
            raise ValueError(
                f"modulator record must be {_RECORD.size} bytes, got {len(data)}"
            )
        src, dest, amount, amt_src, transform = _RECORD.unpack(data)
        if terminal:
            src = dest = amount = amt_src = transform = 0
        return cls(
            src=ModulatorSource.from_raw(src),
            dest=GeneratorType.from_raw(dest),
            amount=amount,
            amt_src=ModulatorSource.from_raw(amt_src),
            transform=ModulatorTransform.from_raw(transform),
        )


def read_modulators(chunk: Chunk, stream: BinaryIO) -> list[Modulator]:
    """Read every modulator record of a ``pmod`` or ``imod`` chunk."""
    if chunk.id not in (ChunkId.pmod, ChunkId.imod):
        raise ValueError(f"expected a pmod or imod chunk, got {chunk.id!r}")
    size = chunk.length
    if size == 0 or size % _RECORD.size != 0:
        raise InvalidChunkSizeError("modulator", size)
    data = chunk.read_contents(stream)
    last = size - _RECORD.size
    return [
        Modulator.parse(data[offset : offset + _RECORD.size], offset == last)
        for offset in range(0, size, _RECORD.size)
    ]


def _source(
    index: int,
    palette: ControllerPalette,
    direction: SourceDirection,
    polarity: SourcePolarity,
    ty: SourceType,
) -> ModulatorSource:
    return ModulatorSource(
        index=index,
        controller_palette=palette,
        direction=direction,
        polarity=polarity,
        ty=ty,
    )


def _general(entry: GeneralPalette) -> ControllerPalette:
    return ControllerPalette(PaletteKind.GENERAL, entry)


def _midi(cc: int) -> ControllerPalette:
    return ControllerPalette(PaletteKind.MIDI, cc)


_POS = SourceDirection.POSITIVE
_NEG = SourceDirection.NEGATIVE
_UNI = SourcePolarity.UNIPOLAR
_BI = SourcePolarity.BIPOLAR

NO_CONTROLLER_SRC = _source(
    0, _general(GeneralPalette.NO_CONTROLLER), _POS, _UNI, SourceType.LINEAR
)


def _default(
    dest: GeneratorType, amount: int, src: ModulatorSource
) -> Modulator:
    return Modulator(
        src=src,
        dest=dest,
        amount=amount,
        amt_src=NO_CONTROLLER_SRC,
        transform=ModulatorTransform.LINEAR,
    )


# MIDI note-on velocity to initial attenuation
DEFAULT_VEL2ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(2, _general(GeneralPalette.NOTE_ON_VELOCITY), _NEG, _UNI, SourceType.CONCAVE),
)

# MIDI note-on velocity to filter cutoff (amount source 0x0, as in SF2.04)
DEFAULT_VEL2FILTER_MOD = _default(
    GeneratorType.INITIAL_FILTER_FC,
    -2400,
    _source(2, _general(GeneralPalette.NOTE_ON_VELOCITY), _NEG, _UNI, SourceType.LINEAR),
)

# MIDI channel pressure to vibrato LFO pitch depth
DEFAULT_AT2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _source(13, _general(GeneralPalette.CHANNEL_PRESSURE), _POS, _UNI, SourceType.LINEAR),
)

# MIDI CC 1 (modulation wheel) to vibrato LFO pitch depth
DEFAULT_MOD2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _source(1, _midi(1), _POS, _UNI, SourceType.LINEAR),
)

# MIDI CC 7 (channel volume) to initial attenuation
DEFAULT_ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(7, _midi(7), _NEG, _UNI, SourceType.CONCAVE),
)

# MIDI CC 10 (pan) to pan position; 500 tenths of a percent is the centre
DEFAULT_PAN_MOD = _default(
    GeneratorType.PAN,
    500,
    _source(10, _midi(10), _POS, _BI, SourceType.LINEAR),
)

# MIDI CC 11 (expression) to initial attenuation
DEFAULT_EXPR_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(11, _midi(11), _NEG, _UNI, SourceType.CONCAVE),
)

# MIDI CC 91 (effects 1 depth) to reverb send
DEFAULT_REVERB_MOD = _default(
    GeneratorType.REVERB_EFFECTS_SEND,
    200,
    _source(91, _midi(91), _POS, _UNI, SourceType.LINEAR),
)

# MIDI CC 93 (effects 3 depth) to chorus send
DEFAULT_CHORUS_MOD = _default(
    GeneratorType.CHORUS_EFFECTS_SEND,
    200,
    _source(93, _midi(93), _POS, _UNI, SourceType.LINEAR),
)


def default_pitch_bend_mod(dest: GeneratorType) -> Modulator:
    """Pitch wheel modulator scaled by pitch wheel sensitivity, aimed at ``dest``.

    Initial pitch is not a standard generator, so the caller picks the destination.
    """
    return Modulator(
        src=_source(14, _general(GeneralPalette.PITCH_WHEEL), _POS, _BI, SourceType.LINEAR),
        dest=dest,
        amount=12700,
        amt_src=_source(
            16,
            _general(GeneralPalette.PITCH_WHEEL_SENSITIVITY),
            _POS,
            _UNI,
            SourceType.LINEAR,
        ),
        transform=ModulatorTransform.LINEAR,
    )