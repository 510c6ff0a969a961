"""
Answer input validators — framework-agnostic, pure functions.

Numeric checking is deliberately lenient. An answer counts as a number when
it is a plain numeric literal (``"7"``, ``"-1"``, ``"1e3"``, ``"0x10"``) or
when it merely *starts* with an integer (``"12abc"``). The integer value is
then read from the leading digits, so ``"12abc"`` parses to ``12`` and
``"1e3"`` to ``1``.
"""

from __future__ import annotations

import re
from typing import Optional

_NUMERIC_LITERAL = re.compile(
    r"""
    ^(?:
        [+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | 0[xX][0-9a-fA-F]+
      | 0[oO][0-7]+
      | 0[bB][01]+
    )$
    """,
    re.VERBOSE,
)

_INT_PREFIX = re.compile(r"^([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def parse_int_prefix(text: str) -> Optional[int]:
    """Read the integer at the start of *text*, ignoring anything after it.

    Leading whitespace is skipped and an optional sign is honoured. A ``0x``
    prefix switches to hexadecimal.

    Returns:
        The parsed integer, or None when *text* does not start with digits
        or the digit run is too long to convert.
    """
    match = _INT_PREFIX.match(text.strip())
    if not match:
        return None
    sign, hex_digits, dec_digits = match.groups()
    try:
        value = int(hex_digits, 16) if hex_digits else int(dec_digits)
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        return None
    return -value if sign == "-" else value


def is_lenient_number(text: str) -> bool:
    """Return True if *text* passes the lenient numeric check."""
    stripped = text.strip()
    if not stripped:
        return False
    return bool(_NUMERIC_LITERAL.match(stripped)) or _INT_PREFIX.match(stripped) is not None
