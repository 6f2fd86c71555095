"""
Huffman stream header.

Layout, all integers big-endian:
    4 bytes   original uncompressed length
    2 bytes   code table length in bytes, counted after this field
    entries   symbol (1 byte), code bit length (1 byte),
              ceil(bit length / 8) bytes of code bits, MSB-first, zero-padded
"""
import struct

from bitarray import bitarray

from bytepress.errors import EncodingOverflow, MalformedHeader, MalformedInput

ORIGINAL_SIZE_FORMAT = ">I"
HEADER_LENGTH_FORMAT = ">H"
ORIGINAL_SIZE_BYTES = struct.calcsize(ORIGINAL_SIZE_FORMAT)
HEADER_LENGTH_BYTES = struct.calcsize(HEADER_LENGTH_FORMAT)
MAX_CODE_LENGTH = 255


class HuffmanHeader:
    """Serialization of the original length and the code table"""

    @staticmethod
    def pack_original_size(size: int) -> bytes:
        if not 0 <= size <= 0xFFFFFFFF:
            raise EncodingOverflow(f"input of {size} bytes does not fit a 32-bit length field")
        return struct.pack(ORIGINAL_SIZE_FORMAT, size)

    @staticmethod
    def unpack_original_size(data: bytes) -> int:
        if len(data) < ORIGINAL_SIZE_BYTES:
            raise MalformedInput(
                f"stream of {len(data)} bytes is too short for the original length field"
            )
        return struct.unpack_from(ORIGINAL_SIZE_FORMAT, data, 0)[0]

    @staticmethod
    def serialize(codes: dict[int, bitarray]) -> bytes:
        """
        Serialize a code table, prefixed with its own length.

        Args:
            codes: Dictionary {symbol: code bits}

        Returns:
            Length field followed by one entry per symbol, in symbol order

        Raises:
            EncodingOverflow: If a code is longer than 255 bits or the
                table does not fit the 2-byte length field
        """
        body = bytearray()
        for symbol, code in sorted(codes.items()):
            if len(code) > MAX_CODE_LENGTH:
                raise EncodingOverflow(
                    f"code of symbol {symbol} is {len(code)} bits, limit is {MAX_CODE_LENGTH}"
                )
            packed = bitarray(code, endian="big")
            body.append(symbol)
            body.append(len(packed))
            body.extend(packed.tobytes())

        if len(body) > 0xFFFF:
            raise EncodingOverflow(f"code table of {len(body)} bytes does not fit its length field")
        return struct.pack(HEADER_LENGTH_FORMAT, len(body)) + bytes(body)

    @staticmethod
    def deserialize(data: bytes, offset: int = 0) -> tuple[dict[int, bitarray], int]:
        """
        Read a code table written by serialize.

        Args:
            data: Buffer holding the header
            offset: Position of the 2-byte length field

        Returns:
            Tuple (code table, offset of the first byte after the header)

        Raises:
            MalformedInput: If the length field itself is missing
            MalformedHeader: If an entry runs past the declared length,
                the data ends early, a symbol repeats, or a code byte
                carries non-zero padding bits
        """
        if len(data) < offset + HEADER_LENGTH_BYTES:
            raise MalformedInput("stream ends before the header length field")
        (length,) = struct.unpack_from(HEADER_LENGTH_FORMAT, data, offset)
        pos = offset + HEADER_LENGTH_BYTES
        end = pos + length
        if end > len(data):
            raise MalformedHeader(
                f"header declares {length} bytes but only {len(data) - pos} are present"
            )

        codes = {}
        while pos < end:
            if pos + 2 > end:
                raise MalformedHeader(f"truncated entry at header offset {pos - offset}")
            symbol, bit_length = data[pos], data[pos + 1]
            pos += 2
            n_bytes = (bit_length + 7) // 8
            if pos + n_bytes > end:
                raise MalformedHeader(
                    f"code of symbol {symbol} runs past the header boundary"
                )
            if symbol in codes:
                raise MalformedHeader(f"symbol {symbol} appears twice in the header")
            code = bitarray(endian="big")
            code.frombytes(bytes(data[pos:pos + n_bytes]))
            if code[bit_length:].any():
                raise MalformedHeader(f"non-zero padding bits in the code of symbol {symbol}")
            codes[symbol] = code[:bit_length]
            pos += n_bytes
        return codes, end
