"""
Bit-string helpers.

A bit-string is a str of '0'/'1' characters, most significant bit first,
eight characters per byte.
"""

import re

from chash.exceptions import InvalidBitLengthError, InvalidInputError

_BINARY_RE = re.compile(r"[01]*")


def is_binary_string(value) -> bool:
    """True if value is a str made only of '0' and '1' characters."""
    return isinstance(value, str) and _BINARY_RE.fullmatch(value) is not None


def buffer_to_bits(buf: bytes) -> str:
    """Convert bytes to a bit-string, 8 characters per byte, MSB first."""
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise InvalidInputError(
            f"buf must be bytes-like, got {type(buf).__name__}"
        )
    return "".join(format(byte, "08b") for byte in bytes(buf))


def bits_to_buffer(bits: str) -> bytes:
    """Convert a bit-string back to bytes.

    Raises:
        InvalidInputError: bits is not a binary string
        InvalidBitLengthError: len(bits) is not a multiple of 8
    """
    if not is_binary_string(bits):
        raise InvalidInputError("bits must be a string of '0' and '1' characters")
    if len(bits) % 8 != 0:
        raise InvalidBitLengthError(
            f"bit-string length must be a multiple of 8, got {len(bits)}"
        )
    return bytes(int(bits[i : i + 8], 2) for i in range(0, len(bits), 8))
