"""Command that lists the presets of a SoundFont file and their instruments."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .errors import SoundFontError
from .soundfont import SoundFont2

_DEFAULT_PATH = "./testdata/sin.sf2"


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def describe_presets(soundfont: SoundFont2) -> str:
    """Describe each preset: its name and its instruments with their sample counts."""
    lines = []
    for preset in soundfont.presets:
        instruments = []
        for zone in preset.zones:
            instrument_id = zone.instrument()
            if instrument_id is None:
                continue
            instrument = soundfont.instruments[instrument_id]
            samples = [
                soundfont.sample_headers[sample_id]
                for sample_id in (z.sample() for z in instrument.zones)
                if sample_id is not None
            ]
            instruments.append((instrument.header.name, len(samples)))
        listed = ", ".join(f"({_quote(name)}, {count})" for name, count in instruments)
        lines.append("====== Preset =======")
        lines.append(f"Name: {preset.header.name}")
        lines.append(f"Instruments: [{listed}]")
        lines.append("")
    return "".join(line + "\n" for line in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List the presets of a SoundFont file."""
    parser = argparse.ArgumentParser(
        prog="sfontreader", description="List the presets of a SoundFont file."
    )
    parser.add_argument("path", nargs="?", default=_DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        with open(args.path, "rb") as stream:
            soundfont = SoundFont2.load(stream)
    except (OSError, EOFError, ValueError, SoundFontError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    sys.stdout.write(describe_presets(soundfont))
    return 0


if __name__ == "__main__":
    sys.exit(main())