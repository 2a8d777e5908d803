import io
import struct

import pytest

from sfontreader.errors import MissingChunk, MissingChunkError, UnexpectedChunkError
from sfontreader.generator import GeneratorType
from sfontreader.raw import RawSoundFontData
from sfontreader.sample import SampleLink


def _chunk(fourcc: bytes, data: bytes) -> bytes:
    pad = b"\0" if len(data) % 2 else b""
    return fourcc + struct.pack("<I", len(data)) + data + pad


def _list(form: bytes, *children: bytes) -> bytes:
    return _chunk(b"LIST", form + b"".join(children))


def _riff(*children: bytes) -> bytes:
    return _chunk(b"RIFF", b"sfbk" + b"".join(children))


def _name(text: str) -> bytes:
    return text.encode().ljust(20, b"\0")


def _info() -> bytes:
    return _list(
        b"INFO",
        _chunk(b"ifil", struct.pack("<HH", 2, 1)),
        _chunk(b"INAM", b"Test\0\0"),
    )


def _sdta() -> bytes:
    return _list(b"sdta", _chunk(b"smpl", b"\0" * 100))


def _pdta() -> bytes:
    phdr = b"".join(
        _name(n) + struct.pack("<HHHIII", 0, 0, bag, 0, 0, 0)
        for n, bag in (("Piano", 0), ("EOP", 1))
    )
    pbag = struct.pack("<HHHH", 0, 0, 1, 0)
    pmod = b"\0" * 10
    pgen = struct.pack("<Hh", 41, 0) + struct.pack("<Hh", 0, 0)
    inst = _name("Sine") + struct.pack("<H", 0) + _name("EOS") + struct.pack("<H", 1)
    ibag = struct.pack("<HHHH", 0, 0, 2, 0)
    imod = b"\0" * 10
    igen = (
        struct.pack("<HBB", 43, 0, 127)
        + struct.pack("<HH", 53, 0)
        + struct.pack("<Hh", 0, 0)
    )
    shdr = _name("Sine") + struct.pack("<IIIIIBbHH", 0, 50, 10, 40, 44100, 60, 0, 0, 1)
    shdr += _name("EOS") + struct.pack("<IIIIIBbHH", 0, 0, 0, 0, 0, 0, 0, 0, 0)
    return _list(
        b"pdta",
        _chunk(b"phdr", phdr),
        _chunk(b"pbag", pbag),
        _chunk(b"pmod", pmod),
        _chunk(b"pgen", pgen),
        _chunk(b"inst", inst),
        _chunk(b"ibag", ibag),
        _chunk(b"imod", imod),
        _chunk(b"igen", igen),
        _chunk(b"shdr", shdr),
    )


def test_load_reads_all_three_lists():
    raw = RawSoundFontData.load(io.BytesIO(_riff(_info(), _sdta(), _pdta())))
    assert raw.info.version.major == 2
    assert raw.info.version.minor == 1
    assert raw.info.bank_name == "Test"
    assert raw.sample_data.smpl.length == 100
    assert raw.sample_data.sm24 is None
    assert [h.name for h in raw.hydra.preset_headers] == ["Piano", "EOP"]
    assert [h.name for h in raw.hydra.instrument_headers] == ["Sine", "EOS"]
    assert raw.hydra.sample_headers[0].sample_type is SampleLink.MONO_SAMPLE
    assert raw.hydra.instrument_generators[0].ty is GeneratorType.KEY_RANGE


def test_sample_offset_points_into_stream():
    data = _riff(_info(), _sdta(), _pdta())
    raw = RawSoundFontData.load(io.BytesIO(data))
    offset = raw.sample_data.smpl.offset
    assert data[offset - 8 : offset - 4] == b"smpl"


def test_not_riff_is_rejected():
    data = _riff(_info(), _sdta(), _pdta())
    with pytest.raises(ValueError):
        RawSoundFontData.load(io.BytesIO(b"RIFX" + data[4:]))


def test_wrong_form_is_rejected():
    data = _chunk(b"RIFF", b"WAVE" + _info())
    with pytest.raises(ValueError):
        RawSoundFontData.load(io.BytesIO(data))


@pytest.mark.parametrize(
    "parts, missing",
    [
        ((_sdta(), _pdta()), MissingChunk.INFO),
        ((_info(), _pdta()), MissingChunk.SAMPLE_DATA),
        ((_info(), _sdta()), MissingChunk.HYDRA),
    ],
)
def test_missing_list(parts, missing):
    with pytest.raises(MissingChunkError) as excinfo:
        RawSoundFontData.load(io.BytesIO(_riff(*parts)))
    assert excinfo.value.missing is missing


def test_unexpected_list_form():
    data = _riff(_info(), _sdta(), _pdta(), _list(b"junk", b""))
    with pytest.raises(UnexpectedChunkError) as excinfo:
        RawSoundFontData.load(io.BytesIO(data))
    assert excinfo.value.parent == "root"


def test_non_list_member_is_rejected():
    data = _riff(_info(), _chunk(b"abcd", b"xy"), _sdta(), _pdta())
    with pytest.raises(ValueError):
        RawSoundFontData.load(io.BytesIO(data))