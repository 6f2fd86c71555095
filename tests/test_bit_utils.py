import pytest
from bitarray import bitarray

from bytepress.bit_utils.bit_reader import BitReader
from bytepress.bit_utils.bit_writer import BitWriter


def test_writer_packs_msb_first_and_pads():
    writer = BitWriter()
    writer.write_code(bitarray("101"))
    writer.write_code(bitarray("11"))
    assert writer.to_bytes() == bytes([0b10111000])


def test_writer_starts_new_byte_after_eight_bits():
    writer = BitWriter()
    writer.write_code(bitarray("11111111"))
    writer.write_code(bitarray("1"))
    assert writer.to_bytes() == b"\xff\x80"


def test_writer_empty_stream():
    assert BitWriter().to_bytes() == b""


def test_reader_reads_from_offset():
    reader = BitReader(b"\x00\xa5\x0f", offset=1)
    assert [reader.read_bit() for _ in range(5)] == [1, 0, 1, 0, 0]
    assert reader.remainder().to01() == "101" + "00001111"


def test_reader_eof():
    reader = BitReader(b"\x80")
    assert [reader.read_bit() for _ in range(8)] == [1, 0, 0, 0, 0, 0, 0, 0]
    assert len(reader.remainder()) == 0
    with pytest.raises(EOFError):
        reader.read_bit()
    with pytest.raises(EOFError):
        BitReader(b"").read_bit()
