"""
C-hash encoding and validation.

A c-hash is a short self-checking identifier:

    160 bits: RIPEMD-160(data) minus its first 4 bytes (128 bits) with a
              32-bit checksum mixed in, base32 encoded -> 32 characters
    288 bits: SHA-256(data) (256 bits) with a 32-bit checksum mixed in,
              base64 encoded -> 48 characters

Example:
    >>> get_chash160("Hello World")
    '3YCO5VU2E5ORSR7KP3ZSKG2UJZVBHCHQ'
    >>> is_chash_valid("3YCO5VU2E5ORSR7KP3ZSKG2UJZVBHCHQ")
    True
"""

import base64
import hashlib
from typing import Any, Dict

from Crypto.Hash import RIPEMD160

from chash.config import ENCODED_LENGTHS, RIPEMD160_DROP_BYTES
from chash.exceptions import InvalidInputError, LengthMismatchError
from chash.lib.bits import bits_to_buffer, buffer_to_bits
from chash.lib.checksum import (
    get_checksum,
    mix_checksum_into_clean_data,
    separate_into_clean_data_and_checksum,
)
from chash.lib.logs import get_logger, log
from chash.lib.offsets import check_length

_logger = get_logger("codec")

STATUS_VALID = "valid"
STATUS_MALFORMED = "malformed"
STATUS_CHECKSUM_MISMATCH = "checksum_mismatch"


def _digest(data: bytes, chash_length: int) -> bytes:
    """Hash data and strip it down to the clean data for chash_length."""
    if chash_length == 160:
        full_hash = RIPEMD160.new(data).digest()
        # drop first 4 bytes if 160
        return full_hash[RIPEMD160_DROP_BYTES:]
    return hashlib.sha256(data).digest()


def get_chash(data: str, chash_length: int) -> str:
    """
    Calculate the c-hash of a string.

    Args:
        data: Text to hash (UTF-8 encoded before hashing)
        chash_length: 160 or 288

    Returns:
        32-character base32 c-hash (160) or 48-character base64 c-hash (288)

    Raises:
        InvalidInputError: data is not a string or chash_length not an integer
        UnsupportedLengthError: chash_length is not 160 or 288
    """
    if not isinstance(data, str):
        raise InvalidInputError(f"data must be a string, got {type(data).__name__}")
    if not isinstance(chash_length, int) or isinstance(chash_length, bool):
        raise InvalidInputError(
            f"chash_length must be an integer, got {chash_length!r}"
        )
    check_length(chash_length)

    clean_data = _digest(data.encode("utf-8"), chash_length)
    checksum = get_checksum(clean_data)
    bin_chash = mix_checksum_into_clean_data(
        buffer_to_bits(clean_data), buffer_to_bits(checksum)
    )
    chash = bits_to_buffer(bin_chash)

    if chash_length == 160:
        return base64.b32encode(chash).decode("ascii")
    return base64.b64encode(chash).decode("ascii")


def get_chash160(data: str) -> str:
    return get_chash(data, 160)


def _decode(encoded: str, chash_length: int) -> bytes:
    if chash_length == 160:
        return base64.b32decode(encoded, casefold=True)
    return base64.b64decode(encoded, validate=True)


def validate_chash(encoded: str) -> Dict[str, Any]:
    """
    Validate a c-hash and report why it failed, if it did.

    Args:
        encoded: 32-character base32 or 48-character base64 c-hash

    Returns:
        Dictionary containing:
        - status: "valid", "malformed" or "checksum_mismatch"
        - chash_length: 160 or 288
        - encoded: the input
        - error_details: None when valid, otherwise a short explanation

    Raises:
        InvalidInputError: encoded is not a string
        LengthMismatchError: encoded is not 32 or 48 characters long
    """
    if not isinstance(encoded, str):
        raise InvalidInputError(
            f"encoded must be a string, got {type(encoded).__name__}"
        )
    chash_length = ENCODED_LENGTHS.get(len(encoded))
    if chash_length is None:
        raise LengthMismatchError(f"wrong encoded length: {len(encoded)}")

    result: Dict[str, Any] = {
        "status": STATUS_MALFORMED,
        "chash_length": chash_length,
        "encoded": encoded,
        "error_details": None,
    }

    try:
        chash = _decode(encoded, chash_length)
    except ValueError as e:
        # binascii.Error is a ValueError; so is non-ASCII input
        result["error_details"] = f"decoding failed: {e}"
        log(_logger, "debug", "Malformed c-hash", encoded=encoded, error=e)
        return result

    if len(chash) * 8 != chash_length:
        result["error_details"] = (
            f"decoded to {len(chash)} bytes, expected {chash_length // 8}"
        )
        log(_logger, "debug", "Malformed c-hash", encoded=encoded, size=len(chash))
        return result

    bin_clean_data, bin_checksum = separate_into_clean_data_and_checksum(
        buffer_to_bits(chash)
    )
    clean_data = bits_to_buffer(bin_clean_data)
    checksum = bits_to_buffer(bin_checksum)

    if checksum != get_checksum(clean_data):
        result["status"] = STATUS_CHECKSUM_MISMATCH
        result["error_details"] = "checksum does not match clean data"
        log(_logger, "debug", "C-hash checksum mismatch", encoded=encoded)
        return result

    result["status"] = STATUS_VALID
    return result


def is_chash_valid(encoded: str) -> bool:
    """
    Check a c-hash.

    Malformed text returns False; a non-string or a length other than 32/48
    raises, see validate_chash.
    """
    return validate_chash(encoded)["status"] == STATUS_VALID
