# Shared c-hash protocol constants

# Decimal expansion of pi without the leading "3." - source of the checksum
# bit offsets. Changing a single digit breaks every existing c-hash.
PI_DIGITS = "14159265358979323846264338327950288419716939937510"

# --- Lengths ---
SUPPORTED_LENGTHS = (160, 288)
CHECKSUM_BITS = 32

# Extra distance added per offset step so the 288-bit table spreads out.
OFFSET_STRETCH = {160: 0, 288: 4}

# RIPEMD-160 gives 20 bytes; the first 4 make room for the checksum.
RIPEMD160_DROP_BYTES = 4

# SHA-256 digest bytes picked for the 4-byte checksum, in this order.
CHECKSUM_BYTE_POSITIONS = (5, 13, 21, 29)

# Encoded text length -> c-hash bit length (160 / 5 = 32, 288 / 6 = 48)
ENCODED_LENGTHS = {32: 160, 48: 288}

# --- Logging ---
LOG_LEVEL_ENV = "CHASH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
