from bitarray import bitarray


class BitWriter:
    """
    A class for writing bits to a bitarray stream with byte alignment support.
    Bits are packed MSB-first into the output bytes.
    """

    def __init__(self) -> None:
        """Initialize a new BitWriter instance with an empty bitarray."""
        self.bits = bitarray(endian="big")

    def write_code(self, code: bitarray) -> None:
        """
        Append a codeword as is, first bit of the code first.

        Args:
            code: Bits to append
        """
        self.bits.extend(code)

    def byte_align(self) -> None:
        """Add zero padding bits to achieve byte alignment."""
        while len(self.bits) % 8 != 0:
            self.bits.append(0)

    def to_bytes(self) -> bytes:
        """
        Byte-align the stream and return its contents.

        Returns:
            The packed bytes
        """
        self.byte_align()
        return self.bits.tobytes()
