"""
Checksum bit offsets.

The 32 checksum bits of a c-hash sit at fixed absolute positions in the final
bit-string. The positions are a running sum of the digits of pi (zeros
skipped), stretched by 4 per step for 288-bit c-hashes so they cover the
longer string:

    160: 1, 5, 6, 11, 20, ... 152, 154
    288: 5, 13, 18, 27, 40, ... 276, 282

Both tables are built once at import time and exposed as tuples.
"""

from typing import Tuple

from chash.config import CHECKSUM_BITS, OFFSET_STRETCH, PI_DIGITS, SUPPORTED_LENGTHS
from chash.exceptions import (
    ChecksumLengthMismatchError,
    InvalidInputError,
    UnsupportedLengthError,
)
from chash.lib.logs import get_logger, log

_logger = get_logger("offsets")


def check_length(chash_length: int) -> None:
    """Raise UnsupportedLengthError unless chash_length is 160 or 288."""
    if chash_length not in SUPPORTED_LENGTHS:
        raise UnsupportedLengthError(f"unsupported c-hash length: {chash_length}")


def compute_offsets(chash_length: int) -> Tuple[int, ...]:
    """
    Compute the checksum bit offsets for a c-hash length.

    Walks the digits of pi, adding each non-zero digit (plus the length's
    stretch) to a running offset. Scanning stops at the first offset that
    would fall outside the c-hash.

    Args:
        chash_length: 160 or 288

    Returns:
        32 strictly increasing absolute bit positions

    Raises:
        InvalidInputError: chash_length is not a positive integer
        UnsupportedLengthError: chash_length is not 160 or 288
        ChecksumLengthMismatchError: the scan did not yield exactly 32 offsets
    """
    if (
        not isinstance(chash_length, int)
        or isinstance(chash_length, bool)
        or chash_length <= 0
    ):
        raise InvalidInputError(
            f"chash_length must be a positive integer, got {chash_length!r}"
        )
    check_length(chash_length)

    stretch = OFFSET_STRETCH[chash_length]
    offsets = []
    offset = 0
    for digit in PI_DIGITS:
        relative_offset = int(digit)
        if relative_offset == 0:
            continue
        offset += relative_offset + stretch
        if offset >= chash_length:
            break
        offsets.append(offset)

    if len(offsets) != CHECKSUM_BITS:
        raise ChecksumLengthMismatchError(
            f"wrong number of checksum bits: {len(offsets)} for length {chash_length}"
        )

    log(_logger, "debug", "Built offset table", chash_length=chash_length, last=offsets[-1])
    return tuple(offsets)


OFFSETS_160 = compute_offsets(160)
OFFSETS_288 = compute_offsets(288)

_OFFSET_TABLES = {160: OFFSETS_160, 288: OFFSETS_288}


def get_offsets(chash_length: int) -> Tuple[int, ...]:
    """Return the precomputed offset table for a bit length."""
    check_length(chash_length)
    return _OFFSET_TABLES[chash_length]
