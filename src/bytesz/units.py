"""Prefix tables and the 64-bit magnitude limit."""

U64_MAX = (1 << 64) - 1

# Display prefixes, index 0 is 1000 ** 1.
DISPLAY_PREFIXES = "kMGTPE"

# Parse prefixes, index 0 is scale 1. Z and Y are accepted but never displayed.
PARSE_PREFIXES = "KMGTPEZY"

BINARY_SCALES = tuple(1024 ** n for n in range(len(PARSE_PREFIXES) + 1))


def check_magnitude(size: int) -> int:
    """Validate that ``size`` is an unsigned 64-bit integer and return it.

    Raises:
        TypeError: If ``size`` is not an ``int`` (``bool`` included)
        ValueError: If ``size`` is negative or larger than ``U64_MAX``
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, not {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size > U64_MAX:
        raise ValueError(f"size does not fit in 64 bits: {size}")
    return size
