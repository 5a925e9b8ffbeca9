from .GLOBAL import *
from . import Compress
from .SumHash_internal import Digest

# The size in bytes of the sumhash512 checksum.
digest_size = DIGEST_SIZE

# The block size, in bytes, of the sumhash512 hash function.
block_size = DIGEST_BLOCK_SIZE


def LoadCompressor(params: SumHashParams = SUMHASH512):
    """
    Builds the compressor of a parameter set: the matrix derived from
    params.seed, or its lookup table, depending on params.strategy.

    The result is read-only and may be shared by any number of hash objects
    (pass it as `compressor` to new()). Nothing is cached here.

    Args:
        params: A SumHashParams bundle, SUMHASH512 by default.

    Returns:
        A Matrix or LookupTable.
    """
    matrix = Compress.RandomMatrixFromSeed(params.seed, params.n, params.m)
    return Compress.NewCompressor(matrix, params.strategy)


def new(data: bytes = None, salt: bytes = None, compressor=None, params: SumHashParams = SUMHASH512):
    """
    Creates a new sumhash512 hash object.

    The output of the hash function is 64 bytes (512 bits).
    If salt is None the hash is computed in unsalted mode. Otherwise, salt
    should be 64 bytes, and the hash is computed in salted mode.

    Args:
        data: Optional first chunk of the message.
        salt: Optional 64-byte salt.
        compressor: A compressor previously returned by LoadCompressor(params),
            to skip rebuilding the lookup table.
        params: The parameter set, SUMHASH512 by default.

    Returns:
        A Digest object.

    Raises:
        InvalidSaltLength: If the salt is not 64 bytes.
        UnsupportedTruncationLength: If params.output_size is too large.
    """
    if compressor is None:
        compressor = LoadCompressor(params)

    h = Digest(compressor, salt, params.output_size)
    if data:
        h.update(data)
    return h


def Sum512(data: bytes, salt: bytes = None) -> bytes:
    """
    One-shot sumhash512 of data.
    """
    return new(data, salt).digest()
