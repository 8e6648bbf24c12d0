"""chash - self-checking c-hash identifiers with interleaved checksums."""

__version__ = "0.1.0"
__author__ = "chash Team"
__description__ = "Self-checking c-hash identifiers with pi-derived checksum offsets"

from .exceptions import (
    ChashError,
    ChecksumLengthMismatchError,
    InvalidBitLengthError,
    InvalidInputError,
    LengthMismatchError,
    UnsupportedLengthError,
)
from .lib.codec import get_chash, get_chash160, is_chash_valid, validate_chash
from .lib.offsets import OFFSETS_160, OFFSETS_288, compute_offsets, get_offsets

__all__ = [
    # Codec
    "get_chash",
    "get_chash160",
    "is_chash_valid",
    "validate_chash",
    # Offsets
    "compute_offsets",
    "get_offsets",
    "OFFSETS_160",
    "OFFSETS_288",
    # Errors
    "ChashError",
    "InvalidInputError",
    "InvalidBitLengthError",
    "UnsupportedLengthError",
    "LengthMismatchError",
    "ChecksumLengthMismatchError",
]
