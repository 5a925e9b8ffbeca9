"""
sumhash512: Algorand's subset-sum hash function
"""

from . import SumHash512
from .SumHash512 import new, Sum512, LoadCompressor, digest_size, block_size
from .GLOBAL import SumHashParams, SUMHASH512, MATRIX_COMPRESSOR, LOOKUP_TABLE_COMPRESSOR
from .Errors import SumHashError, InvalidSaltLength, UnsupportedTruncationLength, InvalidBlockInput

__all__ = [
    "SumHash512", "new", "Sum512", "LoadCompressor", "digest_size", "block_size",
    "SumHashParams", "SUMHASH512", "MATRIX_COMPRESSOR", "LOOKUP_TABLE_COMPRESSOR",
    "SumHashError", "InvalidSaltLength", "UnsupportedTruncationLength", "InvalidBlockInput",
]
