import struct

import pytest

from lz77kit.codec import LZ77, Match

SAMPLES = [
    b"a",
    b"abracadabra!",
    b"aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa\n",
    b"the quick brown fox jumps over the lazy dog; the quick brown fox.\x00",
    bytes(range(256)),
    b"\xff\xfe\xfd\xff\xfe\xfd\xff\xfe\xfd\x01",
]


@pytest.fixture
def codec():
    return LZ77(4096, 32)


def test_empty_input_encodes_to_nothing(codec):
    assert codec.encode(b"") == b""
    assert codec.decode(b"") == b""


def test_single_byte_is_one_literal_token(codec):
    assert codec.encode(b"x") == struct.pack("<iiB", 0, 0, ord("x"))


def test_find_longest_match_overlapping_run():
    match = LZ77(4, 4).find_longest_match(b"aaaa", 1)
    assert match == Match(offset=1, length=3, next_byte=ord("a"))


def test_find_longest_match_without_history(codec):
    assert codec.find_longest_match(b"hello", 0) == Match(0, 0, ord("h"))


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip_when_last_byte_is_unique(codec, data):
    assert codec.decode(codec.encode(data)) == data


@pytest.mark.parametrize("data", SAMPLES + [b"abab", b"xyzxyz", b"aaaa"])
def test_tokens_are_whole(codec, data):
    assert len(codec.encode(data)) % 9 == 0


@pytest.mark.parametrize("data", [b"abab", b"xyzxyz", b"aaaa", b"hello hello"])
def test_match_reaching_end_repeats_stale_byte(codec, data):
    decoded = codec.decode(codec.encode(data))
    assert decoded.startswith(data)
    assert len(decoded) == len(data) + 1


def test_stale_byte_example(codec):
    assert codec.decode(codec.encode(b"abab")) == b"ababa"


def test_zero_lookahead_emits_only_literals():
    data = b"aaaaabbbbb!"
    encoded = LZ77(100, 0).encode(data)
    tokens = list(struct.iter_unpack("<iiB", encoded))
    assert len(tokens) == len(data)
    assert all(offset == 0 and length == 0 for offset, length, _ in tokens)
    assert bytes(byte for _, _, byte in tokens) == data


def test_zero_window_emits_only_literals():
    data = b"abcabcabc!"
    encoded = LZ77(0, 16).encode(data)
    assert len(encoded) == 9 * len(data)
    assert LZ77(0, 0).decode(encoded) == data


def test_lookahead_caps_match_length():
    encoded = LZ77(1000, 3).encode(b"a" * 40 + b"!")
    lengths = [length for _, length, _ in struct.iter_unpack("<iiB", encoded)]
    assert max(lengths) <= 3


def test_window_caps_offset():
    data = b"abcdefgh" * 10 + b"!"
    encoded = LZ77(5, 16).encode(data)
    offsets = [offset for offset, _, _ in struct.iter_unpack("<iiB", encoded)]
    assert max(offsets) <= 5
    assert LZ77(0, 0).decode(encoded) == data


def test_repetitive_input_shrinks(codec):
    data = b"abc" * 500 + b"!"
    encoded = codec.encode(data)
    assert len(encoded) < len(data)
    assert codec.decode(encoded) == data


def test_decode_rejects_truncated_stream(codec):
    encoded = codec.encode(b"hello!")
    with pytest.raises(ValueError):
        codec.decode(encoded[:-1])


def test_decode_rejects_offset_beyond_history(codec):
    bad = struct.pack("<iiB", 0, 0, ord("a")) + struct.pack("<iiB", 5, 2, ord("b"))
    with pytest.raises(ValueError):
        codec.decode(bad)


def test_decode_rejects_zero_offset_with_length(codec):
    bad = struct.pack("<iiB", 0, 0, ord("a")) + struct.pack("<iiB", 0, 1, ord("b"))
    with pytest.raises(ValueError):
        codec.decode(bad)


def test_decode_rejects_negative_length(codec):
    with pytest.raises(ValueError):
        codec.decode(struct.pack("<iiB", 1, -1, ord("a")))


def test_file_round_trip(tmp_path, codec):
    source = tmp_path / "input.txt"
    packed = tmp_path / "packed.lz77"
    restored = tmp_path / "restored.txt"
    data = b"to be or not to be, that is the question.\n"
    source.write_bytes(data)

    codec.compress(source, packed)
    assert packed.read_bytes() == codec.encode(data)

    LZ77(0, 0).decompress(packed, restored)
    assert restored.read_bytes() == data


def test_compress_missing_input_raises(tmp_path, codec):
    with pytest.raises(FileNotFoundError):
        codec.compress(tmp_path / "missing.txt", tmp_path / "out.lz77")


def test_decompress_missing_input_raises(tmp_path, codec):
    with pytest.raises(FileNotFoundError):
        codec.decompress(tmp_path / "missing.lz77", tmp_path / "out.txt")