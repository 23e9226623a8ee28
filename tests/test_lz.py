import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from vinac.lz import compress, compress_fast, decompress

CODERS = [compress, compress_fast]

small_alphabet = st.lists(st.sampled_from(b"ab\x00c"), max_size=300).map(bytes)
any_bytes = st.binary(max_size=300)


def test_empty_input_gives_empty_output():
    assert compress(b"") == b""
    assert compress_fast(b"") == b""


def test_decompress_empty():
    assert decompress(b"") == b""


def test_single_byte_uses_lowest_unused_value_as_marker():
    assert compress(b"a") == b"\x00a"
    assert compress_fast(b"a") == b"\x00a"


def test_marker_skips_value_that_occurs():
    assert compress(b"\x00") == b"\x01\x00"
    assert compress_fast(b"\x00") == b"\x01\x00"


def test_simple_repeat_is_coded_as_reference():
    assert compress(b"abcdabcd") == b"\x00abcd\x00\x04\x04"
    assert compress_fast(b"abcdabcd") == b"\x00abcd\x00\x04\x04"


def test_unused_byte_value_makes_literals_verbatim():
    data = bytes(range(1, 256))
    slow = compress(data)
    fast = compress_fast(data)
    assert slow[0] == 0
    assert slow[1:] == data
    assert fast[0] == 0
    assert fast[1:] == data


@pytest.mark.parametrize("coder", CODERS)
def test_marker_in_data_is_escaped(coder):
    data = bytes(range(256))
    out = coder(data)
    assert out[0] == 0
    assert out[1:3] == b"\x00\x00"
    assert len(out) == len(data) + 2
    assert decompress(out) == data


def test_decompress_reference():
    assert decompress(b"\xffabcd\xff\x04\x04") == b"abcdabcd"


def test_decompress_overlapping_reference():
    assert decompress(b"\xffa\xff\x05\x01") == b"a" * 6


def test_decompress_escaped_marker():
    assert decompress(b"\xffx\xff\x00") == b"x\xff"


def test_decompress_two_byte_length():
    assert decompress(b"\xffab\xff\x81\x48\x02") == b"ab" * 101


@pytest.mark.parametrize(
    "stream",
    [
        b"\xff",
        b"\xffa\xff",
        b"\xffa\xff\x84",
        b"\xffa\xff\x04",
        b"\xffa\xff\x04\x05",
        b"\xffab\xff\x04\x00",
    ],
)
def test_decompress_rejects_malformed_stream(stream):
    with pytest.raises(ValueError):
        decompress(stream)


@pytest.mark.parametrize("coder", CODERS)
def test_long_run_compresses_well(coder):
    data = b"a" * 1000
    out = coder(data)
    assert len(out) < 60
    assert decompress(out) == data


@pytest.mark.parametrize("coder", CODERS)
def test_repetitive_text_shrinks(coder):
    data = b"the quick brown fox jumps over the lazy dog. " * 20
    out = coder(data)
    assert len(out) < len(data) // 4
    assert decompress(out) == data


@pytest.mark.parametrize("coder", CODERS)
def test_accepts_bytes_like_inputs(coder):
    data = b"hello hello hello hello"
    assert coder(bytearray(data)) == coder(data)
    assert coder(memoryview(data)) == coder(data)
    assert decompress(bytearray(coder(data))) == data


def test_fast_coder_round_trips_larger_input():
    rng = random.Random(1234)
    words = [b"alpha", b"beta", b"gamma", b"delta", b"\x00", b"\xff\xfe"]
    data = b" ".join(rng.choice(words) for _ in range(1500))
    out = compress_fast(data)
    assert len(out) < len(data)
    assert decompress(out) == data


@settings(max_examples=60, deadline=None)
@given(st.one_of(any_bytes, small_alphabet))
def test_compress_round_trip(data):
    assert decompress(compress(data)) == data


@settings(max_examples=60, deadline=None)
@given(st.one_of(any_bytes, small_alphabet))
def test_compress_fast_round_trip(data):
    assert decompress(compress_fast(data)) == data


@settings(max_examples=60, deadline=None)
@given(st.one_of(any_bytes, small_alphabet))
def test_both_coders_agree_below_max_offset(data):
    assert compress_fast(data) == compress(data)


@settings(max_examples=60, deadline=None)
@given(st.one_of(any_bytes, small_alphabet))
def test_output_within_worst_case_bound(data):
    out = compress_fast(data)
    assert len(out) * 256 <= 257 * len(data) + 256


@settings(max_examples=40, deadline=None)
@given(st.binary(min_size=1, max_size=200))
def test_first_byte_is_least_common_value(data):
    marker = compress(data)[0]
    assert all(data.count(marker) <= data.count(value) for value in range(256))
    assert all(data.count(value) > data.count(marker) for value in range(marker))