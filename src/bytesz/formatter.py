"""Format byte counts as SI-prefixed display strings."""

from .units import DISPLAY_PREFIXES, check_magnitude


def format_size(size: int) -> str:
    """Format a size in bytes as a human-readable string.

    Values under 1000 are shown exactly (``"999 B"``). Larger values are shown
    with three significant digits and an SI prefix (``"2.34 kB"``,
    ``"18.4 EB"``), rounded half to even.

    Args:
        size: Size in bytes, ``0 <= size < 2 ** 64``

    Returns:
        Formatted size string

    Raises:
        TypeError: If size is not an int
        ValueError: If size is negative or does not fit in 64 bits
    """
    check_magnitude(size)
    if size < 1000:
        return f"{size} B"

    # Divide down until units is under 1000. The size is then close to
    # (units + millis / 1000) * 1000 ** (prefix + 1).
    prefix = 0
    units = size
    is_exact = True
    while True:
        units, millis = divmod(units, 1000)
        if units < 1000:
            break
        if millis:
            is_exact = False
        prefix += 1

    letter = DISPLAY_PREFIXES[prefix]
    if units < 10:
        frac, rem = divmod(millis, 10)
        if rem > 5 or (rem == 5 and (frac & 1 or not is_exact)):
            frac += 1
            if frac == 100:
                frac = 0
                units += 1
                if units == 10:
                    return f"10.0 {letter}B"
        return f"{units}.{frac:02d} {letter}B"

    if units < 100:
        frac, rem = divmod(millis, 100)
        if rem > 50 or (rem == 50 and (frac & 1 or not is_exact)):
            frac += 1
            if frac == 10:
                frac = 0
                units += 1
                if units == 100:
                    return f"100 {letter}B"
        return f"{units}.{frac} {letter}B"

    if millis > 500 or (millis == 500 and (units & 1 or not is_exact)):
        units += 1
    if units >= 1000:
        return f"1.00 {DISPLAY_PREFIXES[prefix + 1]}B"
    return f"{units} {letter}B"
