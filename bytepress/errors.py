"""
Exceptions raised by the RLE and Huffman codecs
"""


class CompressionError(ValueError):
    """Base class for every codec failure."""


class MalformedInput(CompressionError):
    """
    Compressed stream is structurally invalid: odd-length RLE data,
    truncated stream, payload exhausted before the original length
    was reached.
    """


class MalformedHeader(MalformedInput):
    """
    Code table header is invalid: duplicate symbols, entries running
    past the declared header length, codes that are not prefix-free.
    """


class EncodingOverflow(CompressionError):
    """A value does not fit into its fixed-width field."""
