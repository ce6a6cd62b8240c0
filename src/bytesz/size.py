"""ByteSize value type."""

from __future__ import annotations

from dataclasses import dataclass

from .formatter import format_size
from .parser import parse_size
from .units import check_magnitude


@dataclass(frozen=True, order=True)
class ByteSize:
    """A byte count that displays itself with SI prefixes.

    Compares, hashes and converts like the wrapped integer:

    >>> str(ByteSize(2335))
    '2.34 kB'
    >>> int(ByteSize.parse("4 KiB"))
    4096
    """

    value: int = 0

    def __post_init__(self) -> None:
        check_magnitude(self.value)

    def __str__(self) -> str:
        return format_size(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    @classmethod
    def parse(cls, text: str) -> ByteSize:
        """Create a ByteSize from a size string, see :func:`parse_size`."""
        return cls(parse_size(text))
