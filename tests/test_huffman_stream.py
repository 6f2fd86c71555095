import io
import random

import pytest

from bytepress.errors import MalformedHeader, MalformedInput
from bytepress.huffman_stream import HuffmanCompressor
from bytepress.RLE import RLECompressor


def test_known_vector():
    data = b"AAABBCCCC"
    encoded = HuffmanCompressor.encode(data)
    assert encoded == bytes(
        [0, 0, 0, 9]
        + [0, 9, 0x41, 2, 0xC0, 0x42, 2, 0x80, 0x43, 1, 0x00]
        + [0xFE, 0x80]
    )
    assert HuffmanCompressor.decode(encoded) == data


def test_single_symbol():
    encoded = HuffmanCompressor.encode(b"AAAA")
    assert encoded == bytes([0, 0, 0, 4, 0, 2, 0x41, 0])
    assert HuffmanCompressor.decode(encoded) == b"AAAA"


def test_empty_input():
    encoded = HuffmanCompressor.encode(b"")
    assert encoded == bytes(6)
    assert HuffmanCompressor.decode(encoded) == b""


@pytest.mark.parametrize(
    "data",
    [
        b"A",
        b"AB",
        b"\x00",
        bytes(range(256)),
        b"This is a test" * 100,
        b"\xff" * 10000,
        random.Random(10).randbytes(10 * 1024),
        bytes(b % 8 for b in random.Random(3).randbytes(777)),
    ],
)
def test_roundtrip(data):
    assert HuffmanCompressor.decode(HuffmanCompressor.encode(data)) == data


def test_skewed_input_compresses():
    data = b"a" * 900 + b"b" * 90 + b"c" * 10
    encoded = HuffmanCompressor.encode(data)
    assert len(encoded) < len(data) // 4
    assert HuffmanCompressor.decode(encoded) == data


@pytest.mark.parametrize("data", [b"", b"AAAA", b"AAABBCCCC", b"Hello World" * 50])
def test_every_truncation_fails(data):
    encoded = HuffmanCompressor.encode(data)
    for cut in range(len(encoded)):
        with pytest.raises(MalformedInput):
            HuffmanCompressor.decode(encoded[:cut])


def test_trailing_bytes_fail():
    encoded = HuffmanCompressor.encode(b"AAABBCCCC")
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(encoded + b"\x00")


def test_trailing_bytes_after_single_symbol_fail():
    encoded = HuffmanCompressor.encode(b"AAAA")
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(encoded + b"\x00")


def test_nonzero_padding_fails():
    encoded = bytearray(HuffmanCompressor.encode(b"AAABBCCCC"))
    encoded[-1] |= 0x01
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(bytes(encoded))


def test_declared_length_beyond_payload_fails():
    encoded = bytearray(HuffmanCompressor.encode(b"AAABBCCCC"))
    encoded[3] = 200
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(bytes(encoded))


def test_duplicate_symbol_in_stream_header():
    stream = bytes([0, 0, 0, 1, 0, 6, 0x41, 1, 0x00, 0x41, 1, 0x80, 0x00])
    with pytest.raises(MalformedHeader):
        HuffmanCompressor.decode(stream)


def test_ambiguous_table_in_stream_header():
    stream = bytes([0, 0, 0, 1, 0, 6, 0x41, 1, 0x00, 0x42, 2, 0x00, 0x00])
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(stream)


def test_empty_table_with_length_fails():
    with pytest.raises(MalformedInput):
        HuffmanCompressor.decode(bytes([0, 0, 0, 3, 0, 0]))


def test_stream_interface_and_logs():
    out = io.BytesIO()
    log_info = HuffmanCompressor().compress(io.BytesIO(b"AAAA"), out)
    assert log_info == "Size increased by 4 bytes"
    restored = io.BytesIO()
    log_info = HuffmanCompressor().decompress(io.BytesIO(out.getvalue()), restored)
    assert restored.getvalue() == b"AAAA"
    assert log_info == "Restored 4 bytes from 8 bytes"


def test_file_helpers(tmp_path):
    src = tmp_path / "in.txt"
    packed = tmp_path / "in.huff"
    restored = tmp_path / "out.txt"
    src.write_bytes(b"mississippi river" * 20)

    log_info = HuffmanCompressor.compress_file(str(src), str(packed))
    assert log_info.startswith("Size reduced by")
    HuffmanCompressor.decompress_file(str(packed), str(restored))
    assert restored.read_bytes() == src.read_bytes()


def test_nonzero_header_padding_fails():
    encoded = bytearray(HuffmanCompressor.encode(b"AAABBCCCC"))
    # code byte of 'A' is 0xC0: two code bits, six pad bits
    assert encoded[8] == 0xC0
    encoded[8] = 0xFF
    with pytest.raises(MalformedHeader):
        HuffmanCompressor.decode(bytes(encoded))


@pytest.mark.parametrize("codec", [HuffmanCompressor, RLECompressor])
def test_failed_decompress_keeps_existing_output(tmp_path, codec):
    bad = tmp_path / "bad.bin"
    out = tmp_path / "out.bin"
    bad.write_bytes(b"\x01\x02\x03")
    out.write_bytes(b"precious")

    with pytest.raises(MalformedInput):
        codec.decompress_file(str(bad), str(out))
    assert out.read_bytes() == b"precious"
