import pytest

from chash.exceptions import InvalidBitLengthError, InvalidInputError
from chash.lib.bits import bits_to_buffer, buffer_to_bits, is_binary_string


def test_buffer_to_bits_pads_each_byte():
    assert buffer_to_bits(b"\x01\xff\x00\x80") == (
        "00000001" "11111111" "00000000" "10000000"
    )


def test_buffer_to_bits_empty():
    assert buffer_to_bits(b"") == ""


def test_buffer_to_bits_accepts_bytearray():
    assert buffer_to_bits(bytearray(b"A")) == "01000001"


def test_buffer_to_bits_rejects_str():
    with pytest.raises(InvalidInputError):
        buffer_to_bits("hello")


def test_bits_to_buffer():
    assert bits_to_buffer("0100100001101001") == b"Hi"


@pytest.mark.parametrize(
    "buf",
    [b"\x00", b"Hello World", bytes(range(256)), bytes(20), b"\xff" * 36],
)
def test_bits_round_trip(buf):
    assert bits_to_buffer(buffer_to_bits(buf)) == buf


def test_bits_to_buffer_rejects_partial_byte():
    with pytest.raises(InvalidBitLengthError):
        bits_to_buffer("0101")


def test_bits_to_buffer_rejects_non_binary():
    with pytest.raises(InvalidInputError):
        bits_to_buffer("01010102")


def test_invalid_bit_length_is_invalid_input():
    """Callers catching InvalidInputError also see length problems."""
    with pytest.raises(InvalidInputError):
        bits_to_buffer("1")


def test_is_binary_string():
    assert is_binary_string("0110")
    assert not is_binary_string("01a0")
    assert not is_binary_string(b"0101")


@pytest.mark.parametrize("bits", ["0000001\n", "00000001\n", "\n00000001", "0000 0001"])
def test_bits_to_buffer_rejects_whitespace(bits):
    with pytest.raises(InvalidInputError):
        bits_to_buffer(bits)


def test_is_binary_string_rejects_trailing_newline():
    assert not is_binary_string("0101\n")
