"""
Huffman compression of whole byte buffers:
original length + code table header + bit-packed payload
"""
from typing import BinaryIO

from bytepress.bit_utils.bit_reader import BitReader
from bytepress.bit_utils.bit_writer import BitWriter
from bytepress.compressor_ABC import Compressor
from bytepress.errors import MalformedInput
from bytepress.huffman_coding import HuffmanTree
from bytepress.huffman_header import ORIGINAL_SIZE_BYTES, HuffmanHeader


class HuffmanCompressor(Compressor):
    """Class for Huffman compression and decompression"""

    @staticmethod
    def encode(data: bytes) -> bytes:
        """
        Compress data with a static Huffman code built for it.

        Args:
            data: Input data as bytes

        Returns:
            Size field, code table header and packed payload concatenated

        Raises:
            EncodingOverflow: If a field of the header overflows
        """
        tree = HuffmanTree(data)
        codes = tree.res_codes

        out = bytearray(HuffmanHeader.pack_original_size(len(data)))
        out.extend(HuffmanHeader.serialize(codes))

        # a single symbol has an empty code, the length field is enough
        if len(codes) > 1:
            writer = BitWriter()
            for byte in data:
                writer.write_code(codes[byte])
            out.extend(writer.to_bytes())
        return bytes(out)

    @staticmethod
    def decode(data: bytes) -> bytes:
        """
        Restore data produced by encode.

        Args:
            data: Compressed stream

        Returns:
            Original bytes

        Raises:
            MalformedInput: If the stream is truncated, corrupted or
                carries bytes after the payload
            MalformedHeader: If the code table is invalid
        """
        original_size = HuffmanHeader.unpack_original_size(data)
        codes, payload_start = HuffmanHeader.deserialize(data, ORIGINAL_SIZE_BYTES)
        trie = HuffmanTree.from_codes(codes)

        reader = BitReader(data, payload_start)
        out = trie.decode_symbols(reader, original_size)

        left = reader.remainder()
        if len(left) >= 8:
            raise MalformedInput(f"{len(left) // 8} unexpected bytes after the payload")
        if left.any():
            raise MalformedInput("non-zero padding bits after the payload")
        return out

    @staticmethod
    def tree_for(data: bytes) -> HuffmanTree:
        """Frequency tree the encoder would build for data."""
        return HuffmanTree(data)

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
