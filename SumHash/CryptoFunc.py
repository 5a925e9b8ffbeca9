from .GLOBAL import *
from .Errors import InvalidSaltLength
from Crypto.Hash import SHAKE256


def _u16(value: int, name: str) -> bytes:
    if not isinstance(value, int) or not (0 <= value < 1 << 16):
        raise ValueError(f"Parameter {name} must be an integer between 0 and 65535.")
    return value.to_bytes(2, 'little')


def Header(n: int, m: int) -> bytes:
    """
    Domain separation header absorbed before the seed.

    The header is u16le(64) || u16le(n) || u16le(m): the element width in
    bits followed by the matrix dimensions.

    Args:
        n: Number of matrix rows.
        m: Number of matrix columns.

    Returns:
        A 6-byte header.
    """
    return _u16(ELEMENT_BITS, "q") + _u16(n, "n") + _u16(m, "m")


def Expand(seed: bytes, length: int, n: int, m: int) -> bytes:
    """
    Expands a seed into `length` pseudorandom bytes with SHAKE256.

    Args:
        seed: Arbitrary seed bytes (b"Algorand" for sumhash512).
        length: Number of output bytes.
        n: Number of matrix rows the stream will populate.
        m: Number of matrix columns the stream will populate.

    Returns:
        Exactly `length` bytes.

    Raises:
        ValueError: If the length is negative or a dimension does not fit
        in 16 bits.
    """
    if not isinstance(length, int) or length < 0:
        raise ValueError("Parameter length must be a non-negative integer.")

    xof = XOF()
    xof.Absorb(Header(n, m))
    xof.Absorb(bytes(seed))
    return xof.Squeeze(length)


def ExpandSalt(salt: bytes, length: int) -> bytes:
    """
    Expands a 64-byte salt into `length` bytes using the sumhash512
    dimensions in the header.

    Raises:
        InvalidSaltLength: If the salt is not exactly 64 bytes.
    """
    if salt is None or len(salt) != SALT_SIZE:
        raise InvalidSaltLength(SALT_SIZE, 0 if salt is None else len(salt))

    return Expand(salt, length, SUMHASH512.n, SUMHASH512.m)


class XOF:
    """
    A wrapper for SHAKE256 exposing the incremental XOF interface.
    XOF.Init()      ->  XOF()
    XOF.Absorb()    ->  xof_instance.Absorb()
    XOF.Squeeze()   ->  xof_instance.Squeeze()
    """
    def __init__(self, data: bytes = b""):
        """
        Initializes the XOF context. This corresponds to XOF.Init().
        """
        self._ctx = SHAKE256.new(data)

    def Absorb(self, data: bytes):
        """
        Absorbs an input byte string into the XOF state.

        Args:
            data: The input bytes to absorb.
        """
        self._ctx.update(data)

    def Squeeze(self, num_bytes: int) -> bytes:
        """
        Squeezes a specified number of bytes from the XOF state. Once
        squeezing has started no more input can be absorbed.

        Args:
            num_bytes: The number of output bytes to generate.

        Returns:
            The generated output as a bytes object.
        """
        return self._ctx.read(num_bytes)
