from bitarray import bitarray


class BitReader:
    """
    A class for reading bits from an in-memory byte buffer, MSB-first.
    """

    def __init__(self, data: bytes, offset: int = 0) -> None:
        """
        Initialize BitReader over data, starting at the given byte offset.

        Args:
            data: Buffer holding the bit stream
            offset: Byte position where the bit stream begins
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(bytes(data[offset:]))
        self.pos = 0

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1)

        Raises:
            EOFError: If the bit stream is exhausted
        """
        if self.pos >= len(self.bits):
            raise EOFError("Bit stream length exceeded")
        val = self.bits[self.pos]
        self.pos += 1
        return val

    def remainder(self) -> bitarray:
        """Unread bits, without advancing the position."""
        return self.bits[self.pos:]
