import io
import struct

import pytest

from sfontreader.errors import InvalidChunkSizeError, UnknownGeneratorTypeError
from sfontreader.generator import (
    Generator,
    GeneratorAmountRange,
    GeneratorType,
    read_generators,
)
from sfontreader.riff import Chunk


def _chunk(fourcc: bytes, payload: bytes):
    stream = io.BytesIO(fourcc + struct.pack("<I", len(payload)) + payload)
    return Chunk.read(stream, 0), stream


def test_gen_enum():
    assert GeneratorType.from_raw(59) is GeneratorType.UNUSED5
    assert GeneratorType.from_raw(60) is GeneratorType.END_OPER
    assert int(GeneratorType.from_raw(59)) == 59
    assert int(GeneratorType.from_raw(60)) == 60


def test_from_raw_known():
    assert GeneratorType.from_raw(43) is GeneratorType.KEY_RANGE
    assert GeneratorType.from_raw(60) is GeneratorType.END_OPER


def test_from_raw_unknown():
    with pytest.raises(UnknownGeneratorTypeError) as info:
        GeneratorType.from_raw(61)
    assert info.value.value == 61


def test_parse_key_range():
    gen = Generator.parse(struct.pack("<HBB", 43, 10, 20))
    assert gen.ty is GeneratorType.KEY_RANGE
    assert gen.amount == GeneratorAmountRange(low=10, high=20)


def test_parse_vel_range():
    gen = Generator.parse(struct.pack("<HBB", 44, 0, 127))
    assert gen.known_type() is GeneratorType.VEL_RANGE
    assert gen.amount == GeneratorAmountRange(low=0, high=127)


def test_parse_instrument_is_unsigned():
    gen = Generator.parse(struct.pack("<HH", 41, 65535))
    assert gen.ty is GeneratorType.INSTRUMENT
    assert gen.amount == 65535


def test_parse_sample_id_is_unsigned():
    gen = Generator.parse(struct.pack("<HH", 53, 40000))
    assert gen.ty is GeneratorType.SAMPLE_ID
    assert gen.amount == 40000


def test_parse_other_is_signed():
    gen = Generator.parse(struct.pack("<Hh", 17, -500))
    assert gen.ty is GeneratorType.PAN
    assert gen.amount == -500


def test_parse_unknown_type_keeps_raw_id():
    gen = Generator.parse(struct.pack("<Hh", 100, -1))
    assert gen.raw_type() == 100
    assert gen.amount == -1
    with pytest.raises(UnknownGeneratorTypeError) as info:
        gen.known_type()
    assert info.value.value == 100


def test_raw_type_of_known():
    gen = Generator.parse(struct.pack("<Hh", 48, 960))
    assert gen.raw_type() == 48
    assert gen.amount == 960


def test_parse_wrong_length():
    with pytest.raises(ValueError):
        Generator.parse(b"\x00\x00\x00")


def test_read_generators_in_order():
    payload = (
        struct.pack("<HBB", 43, 0, 60)
        + struct.pack("<HH", 53, 7)
        + struct.pack("<Hh", 60, 0)
    )
    chunk, stream = _chunk(b"igen", payload)
    gens = read_generators(chunk, stream)
    assert [g.ty for g in gens] == [
        GeneratorType.KEY_RANGE,
        GeneratorType.SAMPLE_ID,
        GeneratorType.END_OPER,
    ]
    assert gens[0].amount == GeneratorAmountRange(low=0, high=60)
    assert gens[1].amount == 7


def test_read_generators_pgen():
    chunk, stream = _chunk(b"pgen", struct.pack("<HH", 41, 3))
    assert read_generators(chunk, stream) == [Generator(GeneratorType.INSTRUMENT, 3)]


@pytest.mark.parametrize("size", [0, 6])
def test_read_generators_bad_size(size):
    chunk, stream = _chunk(b"pgen", b"\x00" * size)
    with pytest.raises(InvalidChunkSizeError) as info:
        read_generators(chunk, stream)
    assert info.value.size == size


def test_read_generators_wrong_chunk():
    chunk, stream = _chunk(b"pbag", b"\x00" * 4)
    with pytest.raises(ValueError):
        read_generators(chunk, stream)