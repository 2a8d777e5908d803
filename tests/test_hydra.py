import io
import struct

import pytest

from sfontreader.errors import (
    InvalidChunkSizeError,
    MissingChunk,
    MissingChunkError,
    UnexpectedChunkError,
)
from sfontreader.generator import GeneratorType
from sfontreader.hydra import Hydra
from sfontreader.modulator import ModulatorTransform
from sfontreader.riff import Chunk
from sfontreader.sample import SampleLink


def _chunk(fourcc, data):
    pad = b"\0" if len(data) % 2 else b""
    return fourcc + struct.pack("<I", len(data)) + data + pad


def _list(form, children):
    body = form + b"".join(children)
    return b"LIST" + struct.pack("<I", len(body)) + body


def _preset(name, bag):
    return struct.pack("<20sHHHIII", name, 0, 0, bag, 0, 0, 0)


def _inst(name, bag):
    return struct.pack("<20sH", name, bag)


def _shdr(name, ty):
    return struct.pack("<20sIIIIIBbHH", name, 0, 100, 10, 90, 44100, 60, 0, 0, ty)


def _bags():
    return struct.pack("<HH", 0, 0) + struct.pack("<HH", 1, 1)


_MEMBERS = {
    b"phdr": _preset(b"Piano", 0) + _preset(b"EOP", 1),
    b"pbag": _bags(),
    b"pmod": b"\0" * 10,
    b"pgen": struct.pack("<HH", 41, 0) + struct.pack("<HH", 0, 0),
    b"inst": _inst(b"Sine", 0) + _inst(b"EOI", 1),
    b"ibag": _bags(),
    b"imod": b"\0" * 10,
    b"igen": struct.pack("<HH", 53, 0) + struct.pack("<HH", 0, 0),
    b"shdr": _shdr(b"Sine", 1) + _shdr(b"EOS", 0),
}


def _read(omit=(), extra=(), form=b"pdta", overrides=None):
    members = dict(_MEMBERS, **(overrides or {}))
    children = [_chunk(k, v) for k, v in members.items() if k not in omit]
    children.extend(extra)
    stream = io.BytesIO(_list(form, children))
    return Hydra.read(Chunk.read(stream, 0), stream)


def test_reads_all_members():
    hydra = _read()
    assert [h.name for h in hydra.preset_headers] == ["Piano", "EOP"]
    assert [b.generator_id for b in hydra.preset_bags] == [0, 1]
    assert hydra.preset_modulators[0].transform is ModulatorTransform.LINEAR
    assert hydra.preset_generators[0].ty is GeneratorType.INSTRUMENT
    assert [h.name for h in hydra.instrument_headers] == ["Sine", "EOI"]
    assert [b.modulator_id for b in hydra.instrument_bags] == [0, 1]
    assert len(hydra.instrument_modulators) == 1
    assert hydra.instrument_generators[0].ty is GeneratorType.SAMPLE_ID
    assert hydra.instrument_generators[0].amount == 0
    assert hydra.sample_headers[0].sample_type is SampleLink.MONO_SAMPLE
    assert hydra.sample_headers[1].name == "EOS"


@pytest.mark.parametrize(
    "fourcc, missing",
    [
        (b"phdr", MissingChunk.PRESET_HEADERS),
        (b"pbag", MissingChunk.PRESET_BAGS),
        (b"pmod", MissingChunk.PRESET_MODULATORS),
        (b"pgen", MissingChunk.PRESET_GENERATORS),
        (b"inst", MissingChunk.INSTRUMENT_HEADERS),
        (b"ibag", MissingChunk.INSTRUMENT_BAGS),
        (b"imod", MissingChunk.INSTRUMENT_MODULATORS),
        (b"igen", MissingChunk.INSTRUMENT_GENERATORS),
        (b"shdr", MissingChunk.SAMPLE_HEADERS),
    ],
)
def test_missing_member(fourcc, missing):
    with pytest.raises(MissingChunkError) as err:
        _read(omit=(fourcc,))
    assert err.value.missing is missing


def test_first_missing_reported_in_order():
    with pytest.raises(MissingChunkError) as err:
        _read(omit=(b"shdr", b"pbag"))
    assert err.value.missing is MissingChunk.PRESET_BAGS


def test_unexpected_member():
    with pytest.raises(UnexpectedChunkError) as err:
        _read(extra=[_chunk(b"smpl", b"\0\0")])
    assert err.value.parent == "pdta"


def test_wrong_list_type():
    with pytest.raises(ValueError):
        _read(form=b"INFO")