r"""String calculator: sums delimited integers, with delimiters declared inline.

    add("1,2\n3")             -> 6
    add("//;\n1;2")           -> 3
    add("//[***][%]\n1***2%3") -> 6
"""

from __future__ import annotations

import re


MAX_VALUE = 1000
DEFAULT_DELIMITERS = (",", "\n")
HEADER_PREFIX = "//"
NEGATIVES_MESSAGE = "Negative numbers not allowed"

_NUMBER_RE = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")


class CalculatorError(Exception):
    pass


class ParseError(CalculatorError):
    pass


class DelimiterHeaderError(ParseError):
    pass


class MalformedNumberError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"malformed number: {token!r}")
        self.token = token


class NegativeNumberError(CalculatorError):
    def __init__(self, negatives: list[str]) -> None:
        super().__init__(f"{NEGATIVES_MESSAGE} {','.join(negatives)}")
        self.negatives = list(negatives)


def parse_declaration(declaration: str) -> list[str]:
    """Return the custom delimiters named by a header declaration.

    "[***][%]" yields ["***", "%"]; anything without brackets is taken
    literally as a single delimiter. Empty delimiters are dropped.
    """
    if "[" not in declaration or "]" not in declaration:
        return [declaration] if declaration else []

    found: list[str] = []
    pos = 0
    while pos < len(declaration):
        start = declaration.find("[", pos)
        if start == -1:
            break
        end = declaration.find("]", start)
        if end == -1:
            break
        delimiter = declaration[start + 1:end]
        if delimiter:
            found.append(delimiter)
        pos = end + 1
    return found


def resolve_delimiters(text: str) -> tuple[tuple[str, ...], str]:
    if not text.startswith(HEADER_PREFIX):
        return DEFAULT_DELIMITERS, text

    header_end = text.find("\n")
    if header_end == -1:
        raise DelimiterHeaderError("delimiter header is not terminated by a newline")

    custom = parse_declaration(text[len(HEADER_PREFIX):header_end])
    # Ordered union; defaults stay active next to custom delimiters.
    delimiters = tuple(dict.fromkeys(DEFAULT_DELIMITERS + tuple(custom)))
    return delimiters, text[header_end + 1:]


def _delimiter_pattern(delimiters: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first: the regex alternation takes the first branch that matches.
    ordered = sorted(delimiters, key=len, reverse=True)
    return re.compile("|".join(re.escape(d) for d in ordered))


def tokenize(payload: str, delimiters: tuple[str, ...]) -> list[str]:
    parts = _delimiter_pattern(delimiters).split(payload)
    tokens = []
    for part in parts:
        t = part.strip(" \t")
        if t:
            tokens.append(t)
    return tokens


def parse_number(token: str) -> tuple[str, str]:
    """Split a token into its sign ("-" or "") and its digits, leading zeros removed.

    The token is never converted with int() here, so tokens of any length are
    safe; "-0" has no sign.
    """
    m = _NUMBER_RE.fullmatch(token)
    if m is None:
        raise MalformedNumberError(token)
    digits = m.group("digits").lstrip("0") or "0"
    sign = "-" if m.group("sign") == "-" and digits != "0" else ""
    return sign, digits


class StringCalculator:
    """Stateless; one instance may be shared freely, including across threads."""

    def __init__(self, max_value: int = MAX_VALUE) -> None:
        self.max_value = max_value

    def add(self, numbers: str) -> int:
        if numbers == "":
            return 0

        delimiters, payload = resolve_delimiters(numbers)
        values = [parse_number(t) for t in tokenize(payload, delimiters)]

        # Every negative is reported, so this runs before the upper-bound filter.
        negatives = [sign + digits for sign, digits in values if sign]
        if negatives:
            raise NegativeNumberError(negatives)

        # More digits than the bound means over the bound; int() only sees short tokens.
        limit = len(str(self.max_value))
        total = 0
        for _, digits in values:
            if len(digits) <= limit and int(digits, 10) <= self.max_value:
                total += int(digits, 10)
        return total


_default = StringCalculator()


def add(numbers: str) -> int:
    return _default.add(numbers)
