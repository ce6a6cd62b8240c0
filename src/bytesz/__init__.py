"""bytesz - Human-readable byte sizes.

Format 64-bit byte counts with SI prefixes (``2.34 kB``) and parse SI or IEC
prefixed strings (``1.5 MB``, ``4 KiB``) back into exact byte counts.
"""

__version__ = "0.1.0"
__author__ = "bytesz contributors"

from loguru import logger

from .errors import ByteSizeParseError, ParseError
from .formatter import format_size
from .parser import parse_size
from .size import ByteSize
from .units import U64_MAX

# Library logging stays silent until setup_logger() or the CLI enables it.
logger.disable(__name__)

__all__ = [
    "ByteSize",
    "ByteSizeParseError",
    "ParseError",
    "U64_MAX",
    "format_size",
    "parse_size",
]
