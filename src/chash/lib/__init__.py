"""
Core c-hash library: bit helpers, offset tables, checksum mixing and the codec.
"""

from .bits import bits_to_buffer, buffer_to_bits
from .checksum import (
    get_checksum,
    mix_checksum_into_clean_data,
    separate_into_clean_data_and_checksum,
)

__all__ = [
    "bits_to_buffer",
    "buffer_to_bits",
    "get_checksum",
    "mix_checksum_into_clean_data",
    "separate_into_clean_data_and_checksum",
]
