import numpy as np
from .GLOBAL import *
from .Errors import InvalidBlockInput
from .CryptoFunc import Expand, XOF
from .GeneralAlgr import BuildLookupTable, LanesToBytes, LookupTableCompress, MatrixCompress


def _check_len(msg: bytes, expected: int) -> np.ndarray:
    if len(msg) != expected:
        raise InvalidBlockInput(
            f"could not compress message. input size is wrong. size is {len(msg)}, expected {expected}"
        )
    return np.frombuffer(bytes(msg), dtype=np.uint8)


def _freeze(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


class Matrix:
    """
    The n-by-m sumhash matrix A with elements in Z_q where q = 2^64.

    Used directly as a compressor it adds one column per set input bit.
    """
    def __init__(self, matrix: np.ndarray):
        if matrix.ndim != 2 or matrix.shape[1] % 8 != 0:
            raise ValueError(f"m={matrix.shape[-1]} is not a multiple of 8")
        self.matrix = _freeze(np.ascontiguousarray(matrix, dtype=np.uint64))

    def InputLen(self) -> int:
        """Valid length in bytes of a compression input."""
        return self.matrix.shape[1] // 8

    def OutputLen(self) -> int:
        """Length in bytes of the compression output."""
        return self.matrix.shape[0] * 8

    def Compress(self, msg: bytes) -> bytes:
        """
        Performs the compression on an InputLen()-byte message.

        Raises:
            InvalidBlockInput: If len(msg) != InputLen().
        """
        m = _check_len(msg, self.InputLen())
        return LanesToBytes(MatrixCompress(self.matrix, m))

    def LookupTable(self) -> "LookupTable":
        """
        Generates the lookup table used to increase hash calculation
        performance. The matrix itself is left untouched.
        """
        return LookupTable(BuildLookupTable(self.matrix))


class LookupTable:
    """
    Precomputed sums of a matrix for every possible byte of input.
    Its dimensions are [n][m/8][256] uint64.
    """
    def __init__(self, table: np.ndarray):
        if table.ndim != 3 or table.shape[2] != 256:
            raise ValueError("lookup table must have shape (n, m/8, 256)")
        self.table = _freeze(np.ascontiguousarray(table, dtype=np.uint64))

    def InputLen(self) -> int:
        """Valid length in bytes of a compression input."""
        return self.table.shape[1]

    def OutputLen(self) -> int:
        """Length in bytes of the compression output."""
        return self.table.shape[0] * 8

    def Compress(self, msg: bytes) -> bytes:
        """
        Performs the compression on an InputLen()-byte message.

        Raises:
            InvalidBlockInput: If len(msg) != InputLen().
        """
        m = _check_len(msg, self.InputLen())
        return LanesToBytes(LookupTableCompress(self.table, m))


def RandomMatrix(xof: XOF, n: int, m: int) -> Matrix:
    """
    Generates a sumhash matrix by reading little-endian uint64 elements,
    row by row, from an XOF stream.

    Args:
        xof: An XOF ready to be squeezed.
        n: Number of rows.
        m: Number of columns (input bits), must be a multiple of 8.
    """
    if m % 8 != 0:
        raise ValueError(f"m={m} is not a multiple of 8")

    data = xof.Squeeze(n * m * 8)
    return Matrix(np.frombuffer(data, dtype='<u8').reshape(n, m))


def RandomMatrixFromSeed(seed: bytes, n: int, m: int) -> Matrix:
    """
    Creates a random-looking matrix from the seed bytes.

    Args:
        seed: Seed bytes, e.g. b"Algorand".
        n: Number of rows.
        m: Number of columns, must be a multiple of 8.
    """
    if m % 8 != 0:
        raise ValueError(f"m={m} is not a multiple of 8")

    data = Expand(seed, n * m * 8, n, m)
    return Matrix(np.frombuffer(data, dtype='<u8').reshape(n, m))


def NewCompressor(matrix: Matrix, strategy: int):
    """
    Resolves a compressor strategy for a matrix.

    Args:
        matrix: The source matrix.
        strategy: MATRIX_COMPRESSOR or LOOKUP_TABLE_COMPRESSOR.

    Returns:
        The matrix itself or its lookup table.
    """
    if strategy == MATRIX_COMPRESSOR:
        return matrix
    elif strategy == LOOKUP_TABLE_COMPRESSOR:
        return matrix.LookupTable()
    else:
        raise ValueError(f"Unknown compressor strategy {strategy!r}.")
