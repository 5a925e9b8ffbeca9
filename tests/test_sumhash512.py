"""
sumhash512 (Algorand parameters) against the published reference vectors.
"""

import pytest
from Crypto.Hash import SHAKE256

import SumHash
from SumHash import SumHash512
from SumHash.GLOBAL import SUMHASH512, SumHashParams, MATRIX_COMPRESSOR, LOOKUP_TABLE_COMPRESSOR
from SumHash.Compress import LookupTable, Matrix


TEST_VECTOR = [
    ("", "591591c93181f8f90054d138d6fa85b63eeeb416e6fd201e8375ba05d3cb55391047b9b64e534042562cc61944930c0075f906f16710cdade381ee9dd47d10a0"),
    ("a", "ea067eb25622c633f5ead70ab83f1d1d76a7def8d140a587cb29068b63cb6407107aceecfdffa92579ed43db1eaa5bbeb4781223a6e07dd5b5a12d5e8bde82c6"),
    ("ab", "ef09d55b6add510f1706a52c4b45420a6945d0751d73b801cbc195a54bc0ade0c9ebe30e09c2c00864f2bd1692eba79500965925e2be2d1ac334425d8d343694"),
    ("abc", "a8e9b8259a93b8d2557434905790114a2a2e979fbdc8aa6fd373315a322bf0920a9b49f3dc3a744d8c255c46cd50ff196415c8245cdbb2899dec453fca2ba0f4"),
    ("abcd", "1d4277f17e522c4607bc2912bb0d0ac407e60e3c86e2b6c7daa99e1f740fe2b4fc928defad8e1ccc4e7d96b79896ffe086836c172a3db40a154d2229484f359b"),
    ("You must be the change you wish to see in the world. -Mahatma Gandhi",
     "5c5f63ac24392d640e5799c4164b7cc03593feeec85844cc9691ea0612a97caabc8775482624e1cd01fb8ce1eca82a17dd9d4b73e00af4c0468fd7d8e6c2e4b5"),
    ("I think, therefore I am. – Rene Descartes.",
     "2d4583cdb18710898c78ec6d696a86cc2a8b941bb4d512f9d46d96816d95cbe3f867c9b8bd31964406c847791f5669d60b603c9c4d69dadcb87578e613b60b7a"),
]

EXPECTED_6000 = "43dc59ca43da473a3976a952f1c33a2b284bf858894ef7354b8fc0bae02b966391070230dd23e0713eaf012f7ad525f198341000733aa87a904f7053ce1a43c6"
EXPECTED_6000_SALTED = "c9be08eed13218c30f8a673f7694711d87dfec9c7b0cb1c8e18bf68420d4682530e45c1cd5d886b1c6ab44214161f06e091b0150f28374d6b5ca0c37efc2bca7"

HELLO_SALT = bytes([0x13, 0x37]) + bytes(62)


@pytest.fixture(scope="module")
def table():
    return SumHash512.LoadCompressor()


@pytest.fixture(scope="module")
def matrix():
    return SumHash512.LoadCompressor(SUMHASH512._replace(strategy=MATRIX_COMPRESSOR))


@pytest.mark.parametrize("i, element", list(enumerate(TEST_VECTOR)))
def test_vector(table, i, element):
    text, expected = element
    h = SumHash512.new(compressor=table)
    h.update(text.encode("utf-8"))
    output = h.hexdigest()
    assert output == expected, f"test vector element mismatched on index {i} failed! got {output}, want {expected}"


def test_empty_message(table):
    assert SumHash512.new(compressor=table).hexdigest() == TEST_VECTOR[0][1]


def test_sumhash512(table):
    data = SHAKE256.new(b"sumhash input").read(6000)
    h = SumHash512.new(compressor=table)
    h.update(data)
    assert h.hexdigest() == EXPECTED_6000


def test_sumhash512_salt(table):
    data = SHAKE256.new(b"sumhash input").read(6000)
    salt = SHAKE256.new(b"sumhash salt").read(64)
    h = SumHash512.new(salt=salt, compressor=table)
    h.update(data)
    assert h.hexdigest() == EXPECTED_6000_SALTED


def test_sumhash512_salt_matrix_strategy(matrix):
    data = SHAKE256.new(b"sumhash input").read(6000)
    salt = SHAKE256.new(b"sumhash salt").read(64)
    assert SumHash512.new(data, salt=salt, compressor=matrix).hexdigest() == EXPECTED_6000_SALTED


def test_sumhash512_reset(table):
    h = SumHash512.new(compressor=table)
    other = SHAKE256.new(b"sumhash").read(6000)
    h.update(other)
    h.update(other)

    h.reset()
    h.update(SHAKE256.new(b"sumhash input").read(6000))
    assert h.hexdigest() == EXPECTED_6000


def test_sumhash512_checksum_with_value(table):
    h = SumHash512.new(SHAKE256.new(b"sumhash input").read(6000), compressor=table)
    prefix = SHAKE256.new(b"prefix").read(64)
    assert h.Sum(prefix) == prefix + bytes.fromhex(EXPECTED_6000)


def test_sumhash512_sizes(table):
    h = SumHash512.new(compressor=table)
    assert h.block_size == 512 // 8
    assert h.digest_size == 512 // 8
    assert SumHash.block_size == 64
    assert SumHash.digest_size == 64


def test_default_configuration():
    assert SUMHASH512.seed == b"Algorand"
    assert (SUMHASH512.n, SUMHASH512.m) == (8, 1024)
    assert SUMHASH512.strategy == LOOKUP_TABLE_COMPRESSOR
    assert SUMHASH512.output_size == 64
    with pytest.raises(AttributeError):
        SUMHASH512.seed = b"other"


def test_load_compressor_strategies(table, matrix):
    assert isinstance(table, LookupTable)
    assert isinstance(matrix, Matrix)


def test_one_shot(table):
    assert SumHash.Sum512(b"abc") == bytes.fromhex(TEST_VECTOR[3][1])


def test_hello_world_one_byte_updates_algorand(table):
    whole = SumHash512.new(b"hello world", compressor=table).digest()

    h = SumHash512.new(compressor=table)
    for byte in b"hello world":
        h.update(bytes([byte]))
    assert h.digest() == whole


def test_hello_world_salted_matrix(matrix, table):
    whole = SumHash512.new(b"hello world", salt=HELLO_SALT, compressor=matrix).digest()

    h = SumHash512.new(salt=HELLO_SALT, compressor=matrix)
    for byte in b"hello world":
        h.update(bytes([byte]))
    assert h.digest() == whole

    # same digest through the lookup table
    assert SumHash512.new(b"hello world", salt=HELLO_SALT, compressor=table).digest() == whole
    assert whole != SumHash512.new(b"hello world", compressor=matrix).digest()


def test_independent_instances_agree():
    a = SumHash512.new(b"determinism")
    b = SumHash512.new(b"determinism")
    assert a.digest() == b.digest()


def test_truncated_configuration(table):
    params = SUMHASH512._replace(output_size=32)
    h = SumHash512.new(b"abc", compressor=table, params=params)
    assert h.digest() == bytes.fromhex(TEST_VECTOR[3][1])[:32]

    with pytest.raises(SumHash.UnsupportedTruncationLength):
        SumHash512.new(compressor=table, params=SUMHASH512._replace(output_size=65))


def test_bad_salt(table):
    with pytest.raises(SumHash.InvalidSaltLength):
        SumHash512.new(salt=bytes(32), compressor=table)


def test_custom_parameter_set():
    params = SumHashParams(seed=bytes([0x11, 0x22, 0x33, 0x44]), n=14, m=14 * 64 * 4,
                           strategy=MATRIX_COMPRESSOR, output_size=112)
    h = SumHash512.new(b"1234567890", params=params)
    assert h.hexdigest().startswith("fc91828801365750")
