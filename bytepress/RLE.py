"""
Run-Length Encoding (RLE) Compression Module

Stream layout: flat sequence of (count: 1 byte, symbol: 1 byte) records,
no header.
"""
from typing import BinaryIO

from bytepress.compressor_ABC import Compressor
from bytepress.errors import MalformedInput

MAX_RUN_LENGTH = 255


class RLECompressor(Compressor):
    """Class for RLE compression and decompression"""

    @staticmethod
    def runs(data: bytes) -> list[tuple[int, int]]:
        """
        Split data into runs of identical bytes.

        Args:
            data: Input data as bytes

        Returns:
            List of (count, symbol) tuples, count never above 255
        """
        if not data:
            return []

        result = []
        current_byte = data[0]
        count = 1

        for byte in data[1:]:
            if byte == current_byte and count < MAX_RUN_LENGTH:
                count += 1
            else:
                result.append((count, current_byte))
                current_byte = byte
                count = 1

        # Add the last run
        result.append((count, current_byte))

        return result

    @staticmethod
    def expand(runs: list[tuple[int, int]]) -> bytes:
        """
        Expand (count, symbol) tuples back into bytes.

        Args:
            runs: List of (count, symbol) tuples

        Returns:
            Decompressed data as bytes
        """
        result = bytearray()
        for count, symbol in runs:
            result.extend(bytes([symbol]) * count)
        return bytes(result)

    @staticmethod
    def encode(data: bytes) -> bytes:
        """
        Compress data using RLE.

        Args:
            data: Input data as bytes

        Returns:
            Two bytes per run, always even length
        """
        out = bytearray()
        for count, symbol in RLECompressor.runs(data):
            out.append(count)
            out.append(symbol)
        return bytes(out)

    @staticmethod
    def decode(data: bytes) -> bytes:
        """
        Decompress RLE data.

        Args:
            data: Sequence of (count, symbol) records

        Returns:
            Decompressed data as bytes

        Raises:
            MalformedInput: If data does not consist of whole records
        """
        if len(data) % 2 != 0:
            raise MalformedInput(
                f"RLE stream must have even length, got {len(data)} bytes"
            )
        runs = [(data[pos], data[pos + 1]) for pos in range(0, len(data), 2)]
        return RLECompressor.expand(runs)

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        data = input_stream.read()
        encoded = self.encode(data)
        output_stream.write(encoded)
        return self.size_log(len(data), len(encoded))

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        blob = input_stream.read()
        data = self.decode(blob)
        output_stream.write(data)
        return self.restore_log(len(blob), len(data))
