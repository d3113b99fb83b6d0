"""Human-readable byte sizes."""

import math

_SI_SUFFIXES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


def format_size(size: int) -> str:
    """Format a byte count with SI (base 1000) units, e.g. ``1.2 kB``.

    Values below 10 in their unit keep one decimal place; larger values
    are rounded to a whole number.
    """
    if size < 10:
        return f"{size} B"

    exponent = min(int(math.floor(math.log(size, 1000))), len(_SI_SUFFIXES) - 1)
    value = math.floor(size / 1000**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {_SI_SUFFIXES[exponent]}"
    return f"{value:.0f} {_SI_SUFFIXES[exponent]}"
