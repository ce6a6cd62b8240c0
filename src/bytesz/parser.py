"""Parse human-readable size strings into byte counts.

Accepted form is ``<number>[spaces][prefix[i]][b|B]``, e.g. ``"1.5 kB"``,
``"4KiB"``, ``"12.25 pi"`` or ``"23"``. Prefixes are case-insensitive and run
from ``k`` to ``Y``. Without the ``i`` marker the prefix is decimal (SI,
powers of 1000) and the result is computed exactly; with it the prefix is
binary (IEC, powers of 1024).

Binary values are computed with a float, so they carry 53 bits of precision
and may differ in the last bit from an exact computation for very large
inputs. This includes the overflow check near ``2 ** 64``.
"""

import math
from typing import Optional

from loguru import logger

from .errors import ByteSizeParseError, ParseError
from .units import BINARY_SCALES, PARSE_PREFIXES, U64_MAX

_PREFIX_SCALES = {letter: scale for scale, letter in enumerate(PARSE_PREFIXES, start=1)}


def _fail(kind: ParseError, text: str) -> ByteSizeParseError:
    logger.debug(f"Cannot parse size {text!r}: {kind}")
    return ByteSizeParseError(kind)


def _checked_mul(value: int, factor: int, text: str) -> int:
    value *= factor
    if value > U64_MAX:
        raise _fail(ParseError.OVERFLOW, text)
    return value


def _checked_add(value: int, addend: int, text: str) -> int:
    value += addend
    if value > U64_MAX:
        raise _fail(ParseError.OVERFLOW, text)
    return value


def _split_number(text: str) -> tuple[str, Optional[int], str]:
    """Split ``text`` into the numeric part, its decimal point and the rest."""
    point = None
    end = len(text)
    for pos, char in enumerate(text):
        if "0" <= char <= "9":
            continue
        if char == ".":
            if point is not None:
                raise _fail(ParseError.INVALID_NUMBER, text)
            point = pos
            continue
        end = pos
        break
    return text[:end], point, text[end:]


def _parse_units(units: str, text: str) -> tuple[int, bool]:
    """Return ``(scale, binary)`` for a unit suffix such as ``" KiB"``."""
    units = units.lstrip(" \t")
    if units[-1:] in ("b", "B"):
        units = units[:-1]
    if not units:
        return 0, False

    letter, rest = units[0], units[1:]
    binary = rest in ("i", "I")
    if rest and not binary:
        raise _fail(ParseError.INVALID_UNITS, text)
    scale = _PREFIX_SCALES.get(chr(ord(letter) & ~0x20))
    if scale is None:
        raise _fail(ParseError.INVALID_UNITS, text)
    return scale, binary


def _parse_binary(number: str, scale: int, text: str) -> int:
    try:
        value = float(number)
    except ValueError:
        raise _fail(ParseError.INVALID_NUMBER, text) from None
    value *= float(BINARY_SCALES[scale])
    if value >= 2.0 ** 64:
        raise _fail(ParseError.OVERFLOW, text)
    # Round half away from zero.
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    if whole > U64_MAX:
        raise _fail(ParseError.OVERFLOW, text)
    return whole


def _parse_decimal(number: str, point: Optional[int], scale: int, text: str) -> int:
    # Digits left of the decimal point once the SI prefix is applied.
    idigits = (len(number) if point is None else point) + 3 * scale
    value = 0
    frac = ""
    for pos, char in enumerate(number):
        if char == ".":
            continue
        if idigits == 0:
            frac = number[pos:]
            break
        idigits -= 1
        value = _checked_mul(value, 10, text)
        value = _checked_add(value, ord(char) - ord("0"), text)
    for _ in range(idigits):
        value = _checked_mul(value, 10, text)

    # Round half to even.
    if frac:
        first, rest = frac[0], frac[1:]
        if first > "5":
            round_up = True
        elif first < "5":
            round_up = False
        else:
            round_up = bool(value & 1) or any(char != "0" for char in rest)
        if round_up:
            value = _checked_add(value, 1, text)
    return value


def parse_size(text: str) -> int:
    """Parse a size string (e.g. '1.5 kB', '4 KiB', '10M') and return size in bytes.

    Args:
        text: Size string with optional SI or IEC prefix and ``B`` suffix

    Returns:
        Size in bytes as an integer in ``0 .. 2 ** 64 - 1``

    Raises:
        ByteSizeParseError: If the string is empty, its number is malformed,
            its units are not recognised, or the value does not fit in
            64 bits. The ``kind`` attribute tells which.
    """
    if not text:
        raise _fail(ParseError.EMPTY, text)

    number, point, units = _split_number(text)
    scale, binary = _parse_units(units, text)
    if binary:
        return _parse_binary(number, scale, text)
    return _parse_decimal(number, point, scale, text)
