import numpy as np
from numba import jit


# All kernels work on numpy uint64 arrays, so every sum wraps modulo 2^64.


@jit(nopython=True, cache=True)
def SumBits(A: np.ndarray, row: int, col: int, b: int) -> np.uint64:
    """
    Sums the 8 matrix elements A[row][col..col+8] selected by the bits of b.

    Equivalent to:
        for k in range(8):
            if (b >> k) & 1 == 1:
                x += A[row][col + k]
    """
    x = np.uint64(0)
    for k in range(8):
        if (b >> k) & 1 == 1:
            x += A[row, col + k]
    return x


@jit(nopython=True, cache=True)
def MatrixCompress(A: np.ndarray, msg: np.ndarray) -> np.ndarray:
    """
    Subset-sum of the matrix columns selected by the set bits of msg.
    Bit k of msg[j] selects column 8*j + k (little-endian bit order).

    Args:
        A: n x m uint64 matrix.
        msg: m/8 uint8 input.

    Returns:
        n uint64 row sums.
    """
    n = A.shape[0]
    out = np.zeros(n, dtype=np.uint64)

    for i in range(n):
        x = np.uint64(0)
        for j in range(msg.shape[0]):
            x += SumBits(A, i, 8 * j, msg[j])
        out[i] = x

    return out


@jit(nopython=True, cache=True)
def BuildLookupTable(A: np.ndarray) -> np.ndarray:
    """
    Precomputes, for each row and each 8-column group, the sum selected by
    every possible byte value.

    Args:
        A: n x m uint64 matrix, m a multiple of 8.

    Returns:
        n x (m/8) x 256 uint64 table.
    """
    n = A.shape[0]
    groups = A.shape[1] // 8
    table = np.zeros((n, groups, 256), dtype=np.uint64)

    for i in range(n):
        for j in range(groups):
            for b in range(256):
                table[i, j, b] = SumBits(A, i, 8 * j, b)

    return table


@jit(nopython=True, cache=True)
def LookupTableCompress(table: np.ndarray, msg: np.ndarray) -> np.ndarray:
    """
    Same result as MatrixCompress, one table lookup per input byte.

    Args:
        table: n x (m/8) x 256 uint64 table.
        msg: m/8 uint8 input.

    Returns:
        n uint64 row sums.
    """
    n = table.shape[0]
    out = np.zeros(n, dtype=np.uint64)

    for i in range(n):
        x = np.uint64(0)
        for j in range(table.shape[1]):
            x += table[i, j, msg[j]]
        out[i] = x

    return out


def XorBytes(a: bytes, b: bytes) -> bytes:
    """
    Byte-wise XOR of two equal length byte strings.
    """
    return (np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8)).tobytes()


def LanesToBytes(lanes: np.ndarray) -> bytes:
    """
    Encodes uint64 lanes as consecutive little-endian 8-byte words.
    """
    return lanes.astype('<u8', copy=False).tobytes()
