from .GLOBAL import *
from .Errors import InvalidBlockInput, InvalidSaltLength, UnsupportedTruncationLength
from .GeneralAlgr import XorBytes


class Digest:
    """
    Merkle-Damgard iteration of a sumhash compressor.

    The compressor input is the chaining value followed by one message
    block, so the block size is InputLen() - OutputLen(). The chaining value
    starts as all zero bytes.

    In salted mode every block is XORed with the salt before compression and
    a block of zeros is absorbed right after a reset, which effectively
    prepends the salt to the input.

    The compressor is never mutated and is shared by reference with copies.
    """
    def __init__(self, c, salt: bytes = None, output_size: int = None):
        """
        Args:
            c: A Matrix or LookupTable compressor.
            salt: None for unsalted mode, otherwise block_size bytes.
            output_size: Digest length in bytes, defaults to c.OutputLen().

        Raises:
            InvalidSaltLength: If the salt is not block_size bytes.
            UnsupportedTruncationLength: If output_size is not in
            1..c.OutputLen().
        """
        size = c.OutputLen()
        block_size = c.InputLen() - size
        if block_size <= LENGTH_FIELD_SIZE:
            raise ValueError(
                f"compressor input ({c.InputLen()} bytes) leaves no room for a message block"
            )

        if output_size is None:
            output_size = size
        if not isinstance(output_size, int) or not (1 <= output_size <= size):
            raise UnsupportedTruncationLength(size, output_size)

        if salt is not None:
            salt = bytes(salt)
            if len(salt) != block_size:
                raise InvalidSaltLength(block_size, len(salt))

        self._c = c
        self._size = size
        self._salt = salt
        self.block_size = block_size
        self.digest_size = output_size

        self.reset()

    def reset(self):
        """
        Restores the post-construction state. The compressor is kept.
        """
        self._h = bytes(self._size)     # hash chain (from last compression, or IV)
        self._x = bytearray()           # data written since last compression
        self._len = 0                   # total number of input bytes written

        if self._salt is not None:
            self.update(bytes(self.block_size))

    def update(self, data: bytes) -> "Digest":
        """
        Absorbs more message bytes. Any chunking of a message gives the
        same digest.
        """
        p = memoryview(data).cast('B')
        if not p:
            return self

        b = self.block_size
        self._len += len(p)

        if self._x:
            # continue with existing buffer, if nonempty
            n = min(b - len(self._x), len(p))
            self._x.extend(p[:n])
            p = p[n:]
            if len(self._x) == b:
                self._blocks(self._x)
                self._x.clear()

        if len(p) >= b:
            # handle any remaining full input blocks
            n = len(p) // b * b
            self._blocks(p[:n])
            p = p[n:]

        if p:
            self._x.extend(p)
        return self

    def _blocks(self, data):
        # len(data) must be a multiple of block_size
        b = self.block_size
        h = self._h
        for i in range(0, len(data), b):
            block = bytes(data[i:i + b])
            if self._salt is not None:
                block = XorBytes(block, self._salt)
            h = self._c.Compress(h + block)
        self._h = h

    def _padding(self) -> bytes:
        b = self.block_size
        p = b - LENGTH_FIELD_SIZE
        r = self._len % b

        # A 1 bit and 0 bits until p bytes mod b
        pad = bytearray(p - r if r < p else b + p - r)
        pad[0] = PADDING_BYTE

        # Length in bits on 128 bits
        bitlen = (self._len << 3) & ((1 << (8 * LENGTH_FIELD_SIZE)) - 1)
        return bytes(pad) + bitlen.to_bytes(LENGTH_FIELD_SIZE, 'little')

    def finalize(self) -> bytes:
        """
        Computes the digest of everything absorbed so far. The state is left
        unchanged so more data can be written afterwards.
        """
        d0 = self.copy()
        tail = bytes(d0._x) + self._padding()
        if len(tail) % self.block_size != 0:
            raise InvalidBlockInput(f"padded tail of {len(tail)} bytes is not block aligned")

        d0._blocks(tail)
        return d0._h[:self.digest_size]

    def digest(self) -> bytes:
        return self.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()

    def Sum(self, prefix: bytes = b"") -> bytes:
        """
        Appends the digest to prefix, like hash.Hash.Sum.
        """
        return bytes(prefix) + self.finalize()

    def copy(self) -> "Digest":
        d = Digest.__new__(Digest)
        d._c = self._c
        d._size = self._size
        d._salt = self._salt
        d.block_size = self.block_size
        d.digest_size = self.digest_size
        d._h = self._h
        d._x = bytearray(self._x)
        d._len = self._len
        return d

    def new(self, data: bytes = None) -> "Digest":
        """
        A fresh hash object with the same compressor, salt and output size.
        """
        d = self.copy()
        d.reset()
        if data:
            d.update(data)
        return d
