"""
Date and number pattern handling for mapping rules.

Patterns use the familiar ``dd.MM.yyyy`` / ``$###,###,###`` notation. They are
compiled once (cached) into a form the standard library can render and parse.
Parsing is strict: anything that does not match the pattern raises ValueError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Union

Number = Union[int, float, Decimal]


# Date patterns

DATE_TOKENS = {
    "yyyy": "%Y",
    "yy": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
}
TIME_TOKENS = {"HH", "mm", "ss"}

_DATE_TOKEN_RE = re.compile(
    "'[^']*'|"
    + "|".join(re.escape(t) for t in sorted(DATE_TOKENS, key=len, reverse=True))
)


@dataclass(frozen=True)
class DatePattern:
    pattern: str
    strftime: str
    has_time: bool


@lru_cache(maxsize=64)
def compile_date_pattern(pattern: str) -> DatePattern:
    """Translate a ``dd.MM.yyyy`` style pattern into a strftime format."""
    parts = []
    pos = 0
    has_time = False
    matched = False
    for m in _DATE_TOKEN_RE.finditer(pattern):
        parts.append(pattern[pos : m.start()].replace("%", "%%"))
        token = m.group()
        if token.startswith("'"):
            # quoted literal, '' is a single quote
            parts.append((token[1:-1] or "'").replace("%", "%%"))
        else:
            parts.append(DATE_TOKENS[token])
            has_time = has_time or token in TIME_TOKENS
            matched = True
        pos = m.end()
    parts.append(pattern[pos:].replace("%", "%%"))
    if not matched:
        raise ValueError(f"Date pattern {pattern!r} contains no date fields")
    return DatePattern(pattern=pattern, strftime="".join(parts), has_time=has_time)


def format_date(value: date, pattern: str) -> str:
    if not isinstance(value, date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    # %Y does not zero-pad years below 1000, strptime needs four digits
    year = f"{value.year:04d}"
    fmt = "%%".join(
        part.replace("%Y", year) for part in compile_date_pattern(pattern).strftime.split("%%")
    )
    return value.strftime(fmt)


def parse_date(text: str, pattern: str) -> Union[date, datetime]:
    """
    Parse ``text`` with ``pattern``; returns a datetime only if the pattern has time fields.

    The text must be exactly what ``format_date`` renders: unpadded fields
    (``1.7.2008``) and surrounding whitespace are rejected.
    """
    compiled = compile_date_pattern(pattern)
    if not isinstance(text, str):
        raise ValueError(f"expected a string, got {type(text).__name__}")
    parsed = datetime.strptime(text, compiled.strftime)
    if format_date(parsed, pattern) != text:
        raise ValueError(f"{text!r} does not match pattern {pattern!r}")
    return parsed if compiled.has_time else parsed.date()


# Number patterns

_NUMBER_PATTERN_RE = re.compile(
    r"^(?P<prefix>[^#0,.]*)(?P<body>[#0,]*[#0](?:\.[#0]+)?)(?P<suffix>[^#0,.]*)$"
)
_GROUPED_INTEGER = r"(?:[0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)"
_PLAIN_INTEGER = r"[0-9]+"


@dataclass(frozen=True)
class NumberPattern:
    pattern: str
    prefix: str
    suffix: str
    grouping: bool
    decimals: int


@lru_cache(maxsize=64)
def compile_number_pattern(pattern: str) -> NumberPattern:
    """Split a ``$###,###.00`` style pattern into prefix, body and suffix."""
    m = _NUMBER_PATTERN_RE.match(pattern)
    if not m:
        raise ValueError(f"Unsupported number pattern: {pattern!r}")
    body = m.group("body")
    integer_part, _, fraction = body.partition(".")
    return NumberPattern(
        pattern=pattern,
        prefix=m.group("prefix"),
        suffix=m.group("suffix"),
        grouping="," in integer_part,
        decimals=len(fraction),
    )


def format_number(value: Number, pattern: str) -> str:
    """
    Render a number with the pattern's affixes, grouping and fraction digits.

    Rounding is half-even. Negative numbers get the minus sign before the prefix
    (``-$1,000``).
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    compiled = compile_number_pattern(pattern)
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if not number.is_finite():
        raise ValueError(f"Cannot format non-finite number {value!r}")

    spec = f"{',' if compiled.grouping else ''}.{compiled.decimals}f"
    rendered = format(abs(number), spec)
    sign = "-" if number < 0 and rendered.strip("0.,") else ""
    return f"{sign}{compiled.prefix}{rendered}{compiled.suffix}"


def parse_number(text: str, pattern: str, number_type: type = Decimal) -> Number:
    """
    Parse text rendered by ``format_number`` back into ``number_type``.

    Grouping separators are optional, but the fraction must have exactly the
    pattern's number of digits (none for ``$###,###,###``). Surrounding
    whitespace is rejected.
    """
    compiled = compile_number_pattern(pattern)
    if not isinstance(text, str):
        raise ValueError(f"expected a string, got {type(text).__name__}")

    s = text
    negative = s.startswith("-")
    if negative:
        s = s[1:]
    if compiled.prefix:
        if not s.startswith(compiled.prefix):
            raise ValueError(f"expected prefix {compiled.prefix!r}")
        s = s[len(compiled.prefix) :]
    if compiled.suffix:
        if not s.endswith(compiled.suffix):
            raise ValueError(f"expected suffix {compiled.suffix!r}")
        s = s[: -len(compiled.suffix)]

    integer = _GROUPED_INTEGER if compiled.grouping else _PLAIN_INTEGER
    fraction = rf"\.[0-9]{{{compiled.decimals}}}" if compiled.decimals else ""
    if not re.fullmatch(integer + fraction, s):
        raise ValueError("not a number in the expected format")

    try:
        number = Decimal(s.replace(",", ""))
    except InvalidOperation as exc:
        raise ValueError("not a number in the expected format") from exc
    if negative:
        number = -number

    if number_type is int:
        if number != number.to_integral_value():
            raise ValueError("expected a whole number")
        return int(number)
    if number_type is float:
        return float(number)
    return number
