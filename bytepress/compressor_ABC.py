from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface describing compression and decompression of byte streams
    with one of the available codecs.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads all bytes from the input stream, compresses them and writes
        the compressed data to the output stream.

        Args:
            input_stream: Input stream with the original data
            output_stream: Output stream for the compressed data

        Returns:
            Log information about the operation
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads all bytes from the compressed stream, restores the original
        data and writes it to the output stream.

        Args:
            input_stream: Input stream with the compressed data
            output_stream: Output stream for the restored data

        Returns:
            Log information about the operation
        """
        pass

    @staticmethod
    def size_log(original_size: int, compressed_size: int) -> str:
        """
        Builds the log line describing how the size changed.

        Args:
            original_size: Size of the uncompressed data in bytes
            compressed_size: Size of the compressed data in bytes

        Returns:
            Log information about compression
        """
        diff = original_size - compressed_size
        if diff > 0:
            ratio = diff / original_size * 100
            return f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)"
        return f"Size increased by {-diff} bytes"

    @staticmethod
    def restore_log(compressed_size: int, restored_size: int) -> str:
        return f"Restored {restored_size} bytes from {compressed_size} bytes"

    @classmethod
    def compress_file(cls, input_file: str, output_file: str) -> str:
        """
        Helper method for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Log information about compression
        """
        with open(input_file, 'rb') as in_file:
            data, log_info = cls.compress_bytes(in_file.read())
        # output is opened only once the codec has succeeded
        with open(output_file, 'wb') as out_file:
            out_file.write(data)
        return log_info

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str) -> str:
        """
        Helper method for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Log information about decompression
        """
        with open(input_file, 'rb') as in_file:
            data, log_info = cls.decompress_bytes(in_file.read())
        with open(output_file, 'wb') as out_file:
            out_file.write(data)
        return log_info

    @classmethod
    def compress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Helper method for compressing bytes.

        Args:
            data: Input data to compress

        Returns:
            Tuple (compressed data, log information)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Helper method for decompressing bytes.

        Args:
            data: Compressed data

        Returns:
            Tuple (restored data, log information)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
