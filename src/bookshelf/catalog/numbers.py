# ABOUTME: Strict integer parsing for numeric menu input (years, category numbers).
# ABOUTME: Accepts an optional sign and ASCII digits only, within the signed 32-bit range.

import re

_INTEGER_RE = re.compile(r"([+-]?)([0-9]+)")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int(text: str) -> int | None:
    """Parse text as a signed 32-bit integer, or return None.

    Surrounding whitespace is ignored. Underscores, non-ASCII digits and
    values outside the 32-bit range are rejected, so arbitrarily long digit
    strings never reach ``int()``.
    """
    match = _INTEGER_RE.fullmatch(text.strip())
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > 10:
        return None
    value = int(sign + digits)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value
