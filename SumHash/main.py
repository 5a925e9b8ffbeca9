import os
import time
from pathlib import Path

from Crypto.Hash import SHAKE256

from .GLOBAL import *
from . import SumHash512
from .Compress import RandomMatrixFromSeed, NewCompressor


def parse_kat_file(filepath):
    """
    Parses a key-value file and stores values with the same key into lists.
    Values are converted from hex strings to bytes. Lines starting with '#'
    are comments.

    Args:
        filepath (str): The path to the file to be parsed.

    Returns:
        dict: A dictionary where keys are the variable names (e.g., 'msg', 'md')
              and values are lists of the corresponding bytes values found in the file.
              Returns an empty dictionary if the file cannot be read.
    """
    data = {}
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                if line.lstrip().startswith('#'):
                    continue
                # Ensure the line contains an equals sign before splitting
                if '=' in line:
                    # Split only on the first equals sign
                    key, value = line.split('=', 1)
                    key = key.strip()

                    try:
                        value_bytes = bytes.fromhex(value.strip())
                    except ValueError:
                        print(f"Warning: Could not decode hex value for key '{key}'. Skipping.")
                        continue

                    data.setdefault(key, []).append(value_bytes)
    except FileNotFoundError:
        print(f"Error: The file '{filepath}' was not found.")

    return data


def TC_KAT(parsed_data: dict, compressor=None) -> int:
    msgs = parsed_data.get('msg', [])
    salts = parsed_data.get('salt', [])
    mds = parsed_data.get('md', [])
    if not (len(msgs) == len(salts) == len(mds)):
        raise ValueError("KAT file must provide msg, salt and md for every vector.")

    if compressor is None:
        compressor = SumHash512.LoadCompressor()

    for i in range(len(msgs)):
        h = SumHash512.new(salt=salts[i] or None, compressor=compressor)
        h.update(msgs[i])
        output = h.digest()

        assert output == mds[i], (
            f"test vector element mismatched on index {i}! "
            f"got {output.hex()}, want {mds[i].hex()}"
        )

    print(f"✅KAT passed all {len(msgs)} Testcases!")
    return len(msgs)


def TC_Strategies(rounds: int = 10, size: int = 1000) -> int:
    matrix = RandomMatrixFromSeed(SUMHASH512.seed, SUMHASH512.n, SUMHASH512.m)
    A = NewCompressor(matrix, MATRIX_COMPRESSOR)
    At = NewCompressor(matrix, LOOKUP_TABLE_COMPRESSOR)

    for i in range(rounds):
        msg = os.urandom(size)
        d1 = SumHash512.new(msg, compressor=A).digest()
        d2 = SumHash512.new(msg, compressor=At).digest()
        assert d1 == d2, "matrix and lookup table hashes differ"

    print(f"✅Matrix and lookup table agreed on all {rounds} Testcases!")
    return rounds


def run_TC(filename: str = None) -> int:
    if filename is None:
        filename = Path(__file__).with_name(TEST_FILENAME)

    parsed_data = parse_kat_file(filename)
    start_time = time.perf_counter()

    count = TC_KAT(parsed_data)
    TC_Strategies()

    elapsed_time = time.perf_counter() - start_time
    print(f"The tests took {elapsed_time:.4f} seconds to execute.")
    return count


def run_Benchmark(n: int, size: int = 6000) -> dict:
    """
    Times n hashes of `size` random bytes with each compressor strategy.
    Returns the average time in milliseconds per strategy.
    """
    data = SHAKE256.new(b"sumhash benchmark").read(size)
    matrix = RandomMatrixFromSeed(SUMHASH512.seed, SUMHASH512.n, SUMHASH512.m)

    results = {}
    for name, strategy in (("matrix", MATRIX_COMPRESSOR), ("lookup table", LOOKUP_TABLE_COMPRESSOR)):
        c = NewCompressor(matrix, strategy)

        # Skip first time run to avoid numba compilation time
        SumHash512.new(data, compressor=c).digest()

        total_elapsed = 0.0
        for i in range(n):
            start = time.perf_counter()
            SumHash512.new(data, compressor=c).digest()
            total_elapsed += time.perf_counter() - start

        average = total_elapsed / n * 1000
        results[name] = average
        print(f"{name}: hashing {size} bytes took averagely {average:.6f} ms to execute.")

    return results


if __name__ == "__main__":
    run_TC()
    run_Benchmark(n=10)
