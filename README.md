# sfontreader

A pure-Python reader for SoundFont 2 (`.sf2`) files. It needs only the
standard library.

It reads a file in two layers:

- **Raw layer** (`sfontreader.raw`): `RawSoundFontData.load(stream)` returns the
  file's contents as stored, with no post-processing. You get the `INFO` list as
  `Info`, the sample pool locations as `SampleData` and the `pdta` list as
  `Hydra`. `Hydra` holds the preset headers, instrument headers, bags,
  generators, modulators and sample headers.
- **High-level layer** (`sfontreader.soundfont`): `SoundFont2` groups the hydra
  records into `Preset` and `Instrument` objects, each with a list of `Zone`s.
  It drops the terminator records: presets named `EOP`, and instruments and
  sample headers named `EOS`.

## Installation

```
pip install .
```

## Library use

```python
from sfontreader.soundfont import SoundFont2

with open("sin.sf2", "rb") as f:
    sf2 = SoundFont2.load(f)

for preset in sf2.presets:
    print(preset.header.name, preset.header.bank, preset.header.preset)
    for zone in preset.zones:
        instrument_id = zone.instrument()
        if instrument_id is not None:
            instrument = sf2.instruments[instrument_id]
            samples = [
                sf2.sample_headers[sample_id]
                for z in instrument.zones
                if (sample_id := z.sample()) is not None
            ]
            print("  ", instrument.header.name, len(samples))
```

Each `Zone` has `mod_list` and `gen_list`. It also has helpers that return the
amount of the first matching generator, or `None` if the zone has none:

- `key_range()` and `vel_range()` return a `GeneratorAmountRange` with `low`
  and `high`.
- `instrument()` and `sample()` return an index.

`SoundFont2.sort_presets()` returns a copy with the presets ordered by bank,
then by preset number.

`sfontreader.riff` holds the chunk-level reader: `Chunk.read(stream, pos)`,
`read_type`, `read_contents` and `children`, plus the `ChunkId` constants.

### Records

- `GeneratorType` (an `IntEnum`) and `Generator` are in
  `sfontreader.generator`. A generator whose id is not known keeps the raw
  integer in `Generator.ty`; `Generator.known_type()` raises
  `UnknownGeneratorTypeError` for it.
- `ModulatorSource`, `ModulatorTransform` and `Modulator` are in
  `sfontreader.modulator`. The last modulator record of a chunk is read as
  all zeros.
- `SampleHeader` and `SampleLink` are in `sfontreader.sample`. `SampleLink` has
  `is_mono()`, `is_left()`, `is_rom()`, `is_vorbis()` and the like.
- `Bag`, `InstrumentHeader` and `PresetHeader` are in `sfontreader.records`.

### Sample data

The sample data is not loaded into memory. `sf2.sample_data.smpl` and
`sf2.sample_data.sm24` are `SampleChunk`s, or `None` when the chunk is absent.
Each `SampleChunk` has an `offset` and a `length`. To get the raw bytes, seek to
`offset` in the file and read `length` bytes.

### Default modulators

`sfontreader.modulator` defines the default modulators of the SoundFont 2.04
specification. These are `DEFAULT_VEL2ATT_MOD`, `DEFAULT_VEL2FILTER_MOD`,
`DEFAULT_AT2VIBLFO_MOD`, `DEFAULT_MOD2VIBLFO_MOD`, `DEFAULT_ATT_MOD`,
`DEFAULT_PAN_MOD`, `DEFAULT_EXPR_MOD`, `DEFAULT_REVERB_MOD` and
`DEFAULT_CHORUS_MOD`. `default_pitch_bend_mod(dest)` builds the pitch-wheel
modulator for a destination you choose.

### Errors

Errors in the SoundFont content raise a subclass of `SoundFontError` from
`sfontreader.errors`:

| Error | Raised for |
| --- | --- |
| `InvalidChunkSizeError` | a record chunk that is empty or not a multiple of its record size |
| `UnknownGeneratorTypeError` | a modulator destination outside the known generator ids |
| `UnknownSampleTypeError` | a sample type that is not known |
| `UnknownModulatorTransformError` | a modulator transform that is not known |
| `UnexpectedChunkError` | a chunk that does not belong in its list |
| `MissingChunkError` | a required chunk that is missing, named by a `MissingChunk` value |

Other problems raise ordinary Python exceptions:

- A truncated stream raises `EOFError`.
- A file whose RIFF or LIST structure is not a SoundFont raises `ValueError`.
  Examples are a missing `RIFF`/`sfbk` header and a top-level member that is
  not a `LIST`.

## Command line

```
sfontreader path/to/file.sf2
```

For each preset, this prints its name and a list of its instruments. Each
instrument is shown with the number of samples its zones refer to. When no
path is given, the command reads `./testdata/sin.sf2`. If the file cannot be
read, it prints an error and exits with status 1.

## What it does not do

- It does not decode audio. It does not combine `smpl` with `sm24`, and it
  does not decompress Vorbis samples.
- It cannot write or modify SoundFont files.
- It does not synthesize sound.