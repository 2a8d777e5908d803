"""A SoundFont organised into presets and instruments with their zones."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import BinaryIO, Optional, Sequence

from .generator import Generator, GeneratorAmount, GeneratorAmountRange, GeneratorType
from .info import Info
from .modulator import Modulator
from .raw import RawSoundFontData
from .records import Bag, InstrumentHeader, PresetHeader
from .sample import SampleHeader
from .sample_data import SampleData


@dataclass(frozen=True)
class Zone:
    """The modulators and generators that make up one zone."""

    mod_list: list[Modulator]
    gen_list: list[Generator]

    def _find(self, ty: GeneratorType) -> Optional[GeneratorAmount]:
        return next((g.amount for g in self.gen_list if g.ty == ty), None)

    def key_range(self) -> Optional[GeneratorAmountRange]:
        """The zone's key range, if it sets one."""
        return self._find(GeneratorType.KEY_RANGE)

    def vel_range(self) -> Optional[GeneratorAmountRange]:
        """The zone's velocity range, if it sets one."""
        return self._find(GeneratorType.VEL_RANGE)

    def instrument(self) -> Optional[int]:
        """The index of the instrument the zone refers to, if any."""
        return self._find(GeneratorType.INSTRUMENT)

    def sample(self) -> Optional[int]:
        """The index of the sample the zone refers to, if any."""
        return self._find(GeneratorType.SAMPLE_ID)


@dataclass(frozen=True)
class Preset:
    """A preset header with its zones."""

    header: PresetHeader
    zones: list[Zone]


@dataclass(frozen=True)
class Instrument:
    """An instrument header with its zones."""

    header: InstrumentHeader
    zones: list[Zone]


def _zones(
    bags: Sequence[Bag],
    modulators: Sequence[Modulator],
    generators: Sequence[Generator],
    start: int,
    end: int,
) -> list[Zone]:
    zones = []
    for j in range(start, end):
        curr = bags[j]
        following = bags[j + 1] if j + 1 < len(bags) else None
        mod_end = following.modulator_id if following is not None else len(bags)
        gen_end = following.generator_id if following is not None else len(bags)
        zones.append(
            Zone(
                mod_list=list(modulators[curr.modulator_id : mod_end]),
                gen_list=list(generators[curr.generator_id : gen_end]),
            )
        )
    return zones


def _bag_ranges(headers: Sequence, bag_count: int):
    """Yield each header with the bag range it owns."""
    for position, header in enumerate(headers):
        end = headers[position + 1].bag_id if position + 1 < len(headers) else bag_count
        yield header, header.bag_id, end


@dataclass(frozen=True)
class SoundFont2:
    """A SoundFont with its presets and instruments resolved into zones."""

    info: Info
    presets: list[Preset]
    instruments: list[Instrument]
    sample_headers: list[SampleHeader]
    sample_data: SampleData

    @classmethod
    def load(cls, stream: BinaryIO) -> SoundFont2:
        """Read a SoundFont file from a seekable binary stream."""
        return cls.from_raw(RawSoundFontData.load(stream))

    @classmethod
    def from_raw(cls, data: RawSoundFontData) -> SoundFont2:
        """Group the raw records into presets and instruments, dropping terminators."""
        hydra = data.hydra

        instruments = []
        for header, start, end in _bag_ranges(
            hydra.instrument_headers, len(hydra.instrument_bags)
        ):
            zones = _zones(
                hydra.instrument_bags,
                hydra.instrument_modulators,
                hydra.instrument_generators,
                start,
                end,
            )
            if header.name != "EOS":
                instruments.append(Instrument(header=header, zones=zones))

        presets = []
        for header, start, end in _bag_ranges(
            hydra.preset_headers, len(hydra.preset_bags)
        ):
            zones = _zones(
                hydra.preset_bags,
                hydra.preset_modulators,
                hydra.preset_generators,
                start,
                end,
            )
            if header.name != "EOP":
                presets.append(Preset(header=header, zones=zones))

        return cls(
            info=data.info,
            presets=presets,
            instruments=instruments,
            sample_headers=[h for h in hydra.sample_headers if h.name != "EOS"],
            sample_data=data.sample_data,
        )

    def sort_presets(self) -> SoundFont2:
        """Return a copy with presets ordered by bank, then preset number."""
        ordered = sorted(
            self.presets, key=lambda p: (p.header.bank << 16) | p.header.preset
        )
        return replace(self, presets=ordered)