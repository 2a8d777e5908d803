import pytest

from sfontreader.errors import (
    InvalidChunkSizeError,
    MissingChunk,
    MissingChunkError,
    SoundFontError,
    UnexpectedChunkError,
    UnknownGeneratorTypeError,
    UnknownModulatorTransformError,
    UnknownSampleTypeError,
)
from sfontreader.riff import Chunk, ChunkId


def test_invalid_chunk_size_keeps_kind_and_size():
    err = InvalidChunkSizeError("bag", 7)
    assert err.kind == "bag"
    assert err.size == 7
    assert "bag" in str(err) and "7" in str(err)
    assert isinstance(err, SoundFontError)


@pytest.mark.parametrize(
    "cls, value",
    [
        (UnknownGeneratorTypeError, 61),
        (UnknownSampleTypeError, 0x8010),
        (UnknownModulatorTransformError, 1),
    ],
)
def test_unknown_value_errors_keep_value(cls, value):
    err = cls(value)
    assert err.value == value
    assert isinstance(err, SoundFontError)


def test_unknown_generator_message_names_value():
    err = UnknownGeneratorTypeError(61)
    assert "61" in str(err)


def test_unexpected_chunk_keeps_parent_and_chunk():
    chunk = Chunk(pos=12, id=ChunkId(b"junk"), length=4)
    err = UnexpectedChunkError("hydra", chunk)
    assert err.parent == "hydra"
    assert err.chunk is chunk
    assert "junk" in str(err)
    assert "hydra" in str(err)


def test_missing_chunk_error_keeps_member():
    err = MissingChunkError(MissingChunk.PRESET_HEADERS)
    assert err.missing is MissingChunk.PRESET_HEADERS
    assert "phdr" in str(err)


def test_missing_chunk_lookup_by_fourcc():
    assert MissingChunk("pdta") is MissingChunk.HYDRA
    assert MissingChunk("sdta") is MissingChunk.SAMPLE_DATA
    assert MissingChunk("ifil") is MissingChunk.VERSION


@pytest.mark.parametrize("member", list(MissingChunk))
def test_missing_chunk_error_names_each_fourcc(member):
    err = MissingChunkError(member)
    assert err.missing is member
    assert MissingChunk(member.value) is member
    assert member.value in str(err)