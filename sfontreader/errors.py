"""Exceptions raised while reading SoundFont files."""

from __future__ import annotations

from enum import Enum


class MissingChunk(Enum):
    """A chunk that a SoundFont file must contain, named by its FourCC."""

    INFO = "INFO"
    SAMPLE_DATA = "sdta"
    HYDRA = "pdta"
    VERSION = "ifil"

    PRESET_HEADERS = "phdr"
    PRESET_BAGS = "pbag"
    PRESET_MODULATORS = "pmod"
    PRESET_GENERATORS = "pgen"

    INSTRUMENT_HEADERS = "inst"
    INSTRUMENT_BAGS = "ibag"
    INSTRUMENT_MODULATORS = "imod"
    INSTRUMENT_GENERATORS = "igen"

    SAMPLE_HEADERS = "shdr"


class SoundFontError(Exception):
    """Base class of all errors reported for malformed SoundFont data."""


class InvalidChunkSizeError(SoundFontError):
    """A record chunk whose size is zero or not a multiple of its record size."""

    def __init__(self, kind: str, size: int) -> None:
        super().__init__(f"invalid {kind} chunk size: {size}")
        self.kind = kind
        self.size = size


class UnknownGeneratorTypeError(SoundFontError):
    """A generator id outside the range the format defines."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown generator type: {value}")
        self.value = value


class UnknownSampleTypeError(SoundFontError):
    """A sample link type the format does not define."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown sample type: {value:#x}")
        self.value = value


class UnknownModulatorTransformError(SoundFontError):
    """A modulator transform the format does not define."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown modulator transform: {value}")
        self.value = value


class UnexpectedChunkError(SoundFontError):
    """A chunk found where the format does not allow it."""

    def __init__(self, parent: str, chunk: object) -> None:
        super().__init__(f"unexpected member of {parent}: {chunk!r}")
        self.parent = parent
        self.chunk = chunk


class MissingChunkError(SoundFontError):
    """A required chunk that the file does not contain."""

    def __init__(self, missing: MissingChunk) -> None:
        super().__init__(f"missing chunk {missing.value!r} ({missing.name})")
        self.missing = missing