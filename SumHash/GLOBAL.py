# REF: https://github.com/algorand/go-sumhash/blob/master/spec/sumhash-spec.pdf

from typing import NamedTuple


# Compressor strategies, resolved once when a compressor is built
MATRIX_COMPRESSOR       = 0
LOOKUP_TABLE_COMPRESSOR = 1



# Matrix elements live in Z_q with q = 2^64
ELEMENT_BITS = 64

# Merkle-Damgard length field: 128-bit little-endian count of input bits
LENGTH_FIELD_SIZE = 16

# Padding byte. sumhash reads bits in little-endian order so the single
# "1" bit that starts the padding is the low bit of the byte.
PADDING_BYTE = 0x01


class SumHashParams(NamedTuple):
    """
    A frozen sumhash parameter set.

        seed          bytes fed to SHAKE256 to derive the matrix
        n             number of matrix rows (64-bit output lanes)
        m             number of matrix columns (input bits per compression)
        strategy      MATRIX_COMPRESSOR or LOOKUP_TABLE_COMPRESSOR
        output_size   digest length in bytes (truncation point)
    """
    seed: bytes
    n: int
    m: int
    strategy: int
    output_size: int


"""
    --- sumhash512 constants (Algorand) ---

    Matrix rows (n)                   8
    Matrix columns (m)                1024
    Compression input (bytes)         128
    Chaining value / digest (bytes)   64
    Message block (bytes)             64
    Salt (bytes)                      64

"""
SUMHASH512 = SumHashParams(
    seed=b"Algorand",
    n=8,
    m=1024,
    strategy=LOOKUP_TABLE_COMPRESSOR,
    output_size=64,
)

DIGEST_SIZE       = SUMHASH512.output_size
DIGEST_BLOCK_SIZE = SUMHASH512.m // 8 - SUMHASH512.n * ELEMENT_BITS // 8
SALT_SIZE         = DIGEST_BLOCK_SIZE

TEST_FILENAME = "KAT_512.txt"
