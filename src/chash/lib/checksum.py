"""
Checksum computation and interleaving.

The 4-byte checksum is taken from bytes 5, 13, 21 and 29 of the SHA-256 of
the clean data. Its 32 bits are spliced into the clean-data bit-string at the
absolute positions given by the offset tables, and cut back out when
validating.
"""

import hashlib
from typing import Tuple, Union

from chash.config import CHECKSUM_BITS, CHECKSUM_BYTE_POSITIONS, SUPPORTED_LENGTHS
from chash.exceptions import (
    ChecksumLengthMismatchError,
    InvalidInputError,
    LengthMismatchError,
)
from chash.lib.bits import is_binary_string
from chash.lib.offsets import get_offsets


def get_checksum(clean_data: Union[bytes, str]) -> bytes:
    """
    Calculate the 4-byte checksum of clean data.

    Strings are UTF-8 encoded before hashing.
    """
    if isinstance(clean_data, str):
        clean_data = clean_data.encode("utf-8")
    elif not isinstance(clean_data, (bytes, bytearray, memoryview)):
        raise InvalidInputError(
            f"clean_data must be a string or bytes, got {type(clean_data).__name__}"
        )
    full_checksum = hashlib.sha256(clean_data).digest()
    return bytes(full_checksum[i] for i in CHECKSUM_BYTE_POSITIONS)


def mix_checksum_into_clean_data(bin_clean_data: str, bin_checksum: str) -> str:
    """
    Splice checksum bits into clean data.

    Offsets are positions in the mixed result, so checksum bit i goes in
    front of clean-data position offset - i.

    Raises:
        InvalidInputError: either argument is not a binary string
        ChecksumLengthMismatchError: bin_checksum is not 32 bits
        LengthMismatchError: the combined length is not 160 or 288
    """
    if not is_binary_string(bin_clean_data) or not bin_clean_data:
        raise InvalidInputError("bin_clean_data must be a binary string")
    if not is_binary_string(bin_checksum) or not bin_checksum:
        raise InvalidInputError("bin_checksum must be a binary string")
    if len(bin_checksum) != CHECKSUM_BITS:
        raise ChecksumLengthMismatchError(
            f"checksum must be {CHECKSUM_BITS} bits, got {len(bin_checksum)}"
        )
    total_length = len(bin_clean_data) + len(bin_checksum)
    if total_length not in SUPPORTED_LENGTHS:
        raise LengthMismatchError(
            f"bad length={total_length}, clean data has {len(bin_clean_data)} bits"
        )

    frags = []
    start = 0
    for i, offset in enumerate(get_offsets(total_length)):
        end = offset - i
        frags.append(bin_clean_data[start:end])
        frags.append(bin_checksum[i])
        start = end
    # add last frag
    frags.append(bin_clean_data[start:])
    return "".join(frags)


def separate_into_clean_data_and_checksum(bin_chash: str) -> Tuple[str, str]:
    """
    Split a mixed bit-string into (clean_data, checksum).

    Exact inverse of mix_checksum_into_clean_data.

    Raises:
        InvalidInputError: bin_chash is not a binary string
        LengthMismatchError: bin_chash is not 160 or 288 bits
    """
    if not is_binary_string(bin_chash) or not bin_chash:
        raise InvalidInputError("bin_chash must be a binary string")
    if len(bin_chash) not in SUPPORTED_LENGTHS:
        raise LengthMismatchError(
            f"bit-string length must be 160 or 288, got {len(bin_chash)}"
        )

    frags = []
    checksum_bits = []
    start = 0
    for offset in get_offsets(len(bin_chash)):
        frags.append(bin_chash[start:offset])
        checksum_bits.append(bin_chash[offset])
        start = offset + 1
    frags.append(bin_chash[start:])
    return "".join(frags), "".join(checksum_bits)
