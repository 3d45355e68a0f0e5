"""
Number formatting utilities.

Numbers are rendered the way JavaScript prints them: integral floats have no
trailing ".0" and radix renderings keep the sign and any fractional digits.
Rounding goes half toward positive infinity (round_number(-5.5) == -5).
"""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

from convkit.config.manager import get_config

logger = logging.getLogger(__name__)

Number = Union[int, float]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")
_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")

# Named bases accepted by convert_base
BASES = {
    "bin": 2,
    "oct": 8,
    "dec": 10,
    "hex": 16,
}

NAN_STRING = str(math.nan).upper()

# Magnitude from which numbers print in exponent form
EXPONENT_THRESHOLD = 1e21


def _is_finite(num: Number) -> bool:
    return not isinstance(num, float) or math.isfinite(num)


def _number_str(num: Number) -> str:
    """
    Decimal rendering without a trailing '.0' for integral floats.

    Magnitudes in [1e-6, 1e21) print positionally; outside that range the
    exponent carries no zero padding ('1e-7', '1e+21').
    """
    if isinstance(num, float):
        if math.isnan(num):
            return "NaN"
        if math.isinf(num):
            return "Infinity" if num > 0 else "-Infinity"
        if num.is_integer() and abs(num) < EXPONENT_THRESHOLD:
            return str(int(num))
        text = repr(num)
        if "e" not in text:
            return text
        if 1e-6 <= abs(num) < EXPONENT_THRESHOLD:
            return f"{Decimal(text):f}"
        return _EXPONENT_RE.sub(r"e\1\2", text)
    return str(num)


def _int_to_radix(value: int, base: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def _to_radix(num: Number, base: int) -> str:
    """
    Render num in base. Fractional parts are expanded digit by digit, which
    terminates exactly for power-of-two bases; other bases stop at 52 digits.
    """
    if base == 10 or isinstance(num, float) and not math.isfinite(num):
        return _number_str(num)
    if isinstance(num, float) and not num.is_integer():
        sign = "-" if num < 0 else ""
        num = abs(num)
        whole = int(num)
        fraction = num - whole
        digits = []
        while fraction and len(digits) < 52:
            fraction *= base
            digit = int(fraction)
            digits.append(_DIGITS[digit])
            fraction -= digit
        return f"{sign}{_int_to_radix(whole, base)}.{''.join(digits)}"
    return _int_to_radix(int(num), base)


def number_with_commas(num: Number) -> str:
    """
    Insert thousands separators.

    Example:
        >>> number_with_commas(1234567890)
        '1,234,567,890'
        >>> number_with_commas(-1000)
        '-1,000'
    """
    separator = get_config().number_format.thousands_separator
    return _THOUSANDS_RE.sub(separator, _number_str(num))


def to_binary(num: Number) -> str:
    """
    Example:
        >>> to_binary(10)
        '1010'
    """
    return _to_radix(num, 2)


def to_hex(num: Number) -> str:
    """
    Hexadecimal rendering with uppercase digits.

    Example:
        >>> to_hex(255)
        'FF'
    """
    return _to_radix(num, 16).upper()


def to_octal(num: Number) -> str:
    """
    Example:
        >>> to_octal(64)
        '100'
    """
    return _to_radix(num, 8)


def to_decimal(num: Number) -> str:
    """
    Example:
        >>> to_decimal(4095)
        '4095'
    """
    return _to_radix(num, 10)


# Aliases kept for callers of the *String names
to_binary_string = to_binary
to_hex_string = to_hex
to_octal_string = to_octal


def to_degrees(radians: Number) -> float:
    """Radians to degrees."""
    return radians * (180 / math.pi)


def to_radians(degrees: Number) -> float:
    """Degrees to radians."""
    return degrees * (math.pi / 180)


def _parse_int_prefix(text: str, base: int) -> Optional[int]:
    """
    Parse the longest run of valid digits at the start of text.

    Leading whitespace and a sign are accepted, as is a '0x' prefix in base
    16. Returns None when no digit could be read.
    """
    s = text.strip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if base == 16 and s[:2].lower() == "0x":
        s = s[2:]

    valid = _DIGITS[:base]
    end = 0
    while end < len(s) and s[end].lower() in valid:
        end += 1
    if end == 0:
        return None
    return sign * int(s[:end], base)


def convert_base(value: str, from_base: str, to_base: str) -> str:
    """
    Convert a number written in one base to another base.

    Args:
        value: Digits in from_base; trailing invalid characters are ignored
        from_base: 'bin', 'oct', 'dec' or 'hex'
        to_base: 'bin', 'oct', 'dec' or 'hex'

    Returns:
        Uppercase digits in to_base, or 'NAN' if value has no leading digit
        valid in from_base. Unknown base names are read as 'dec'.

    Example:
        >>> convert_base("FF", "hex", "dec")
        '255'
        >>> convert_base("123", "dec", "hex")
        '7B'
    """
    for name in (from_base, to_base):
        if name not in BASES:
            logger.debug(f"Unknown base {name!r}, using decimal")
    parsed = _parse_int_prefix(value, BASES.get(from_base, 10))
    if parsed is None:
        return NAN_STRING
    return _int_to_radix(parsed, BASES.get(to_base, 10)).upper()


def to_percentage(num: Number, decimals: Optional[int] = None) -> str:
    """
    Render num * 100 with a fixed number of decimals and a '%' suffix.

    Exact ties round away from zero (0.125 at 0 decimals is '13%'). Values
    whose percentage is not finite or reaches 1e21 are printed as-is
    ('1e+23%', 'Infinity%').

    Args:
        num: Ratio to render (0.5 -> '50.00%')
        decimals: Decimal places; defaults to the configured value (2)

    Example:
        >>> to_percentage(0.1234, 1)
        '12.3%'
    """
    if decimals is None:
        decimals = get_config().number_format.percentage_decimals
    scaled = num * 100
    if not _is_finite(scaled) or abs(scaled) >= EXPONENT_THRESHOLD:
        return f"{_number_str(scaled)}%"

    # Below 1e21 there are at most 21 integer digits to keep
    context = Context(prec=22 + decimals)
    quantum = Decimal(1).scaleb(-decimals)
    fixed = Decimal(scaled).quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return f"{fixed:f}%"


to_percentage_string = to_percentage


def _round_half_up(num: Number) -> int:
    whole = math.floor(num)
    return whole + (num - whole >= 0.5)


def round_number(num: Number) -> Number:
    """
    Round to the nearest integer, halves toward positive infinity.

    NaN and infinities are returned unchanged.

    Example:
        >>> round_number(5.67)
        6
        >>> round_number(-5.5)
        -5
    """
    if not _is_finite(num):
        return num
    return _round_half_up(num)


def round_to(num: Number, decimals: int) -> float:
    """
    Round to a number of decimal places.

    Example:
        >>> round_to(5.678, 2)
        5.68
    """
    factor = 10 ** decimals
    scaled = num * factor
    if not _is_finite(scaled):
        return scaled / factor
    return _round_half_up(scaled) / factor
