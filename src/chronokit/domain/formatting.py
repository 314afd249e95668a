from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from chronokit.domain.constants import DAYS, MONTHS, SORTED_TIME_FORMATS
from chronokit.domain.errors import FormatMismatchError
from chronokit.domain.offsets import parse_iso_offset

TOKEN_PATTERNS: Dict[str, str] = {
    "YYYY": r"\d{4}",
    "yyyy": r"\d{4}",
    "YY": r"\d{2}",
    "yy": r"\d{2}",
    "M": r"\d{1,2}",
    "MM": r"\d{2}",
    "MMM": r"[A-Za-z]{3}",
    "mmm": r"[A-Za-z]{3}",
    "MMMM": r"[A-Za-z]+",
    "mmmm": r"[A-Za-z]+",
    "D": r"\d{1,2}",
    "DD": r"\d{2}",
    "Do": r"\d{1,2}(?:st|nd|rd|th)",
    "d": r"[A-Za-z]{2}",
    "dd": r"[A-Za-z]{3}",
    "ddd": r"[A-Za-z]+",
    "H": r"\d{1,2}",
    "HH": r"\d{2}",
    "h": r"\d{1,2}",
    "hh": r"\d{2}",
    "m": r"\d{1,2}",
    "mm": r"\d{2}",
    "s": r"\d{1,2}",
    "ss": r"\d{2}",
    "ms": r"\d{1,3}",
    "mss": r"\d{3}",
    "a": r"[AaPp][Mm]",
    "A": r"[AaPp][Mm]",
    "Z": r"Z|[+-]\d{2}:?\d{2}",
    "ZZ": r"Z|[+-]\d{2}:?\d{2}",
}

_WHITESPACE = re.compile(r"\s+")


def ordinal(number: int) -> str:
    """Returns ``1st``, ``2nd``, ``11th`` and so on."""
    if 11 <= number % 100 <= 13:
        return f"{number}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def iter_template(template: str, tokens: Sequence[str] = SORTED_TIME_FORMATS) -> Iterator[Tuple[bool, str]]:
    """Splits ``template`` into ``(is_token, text)`` pieces.

    ``[...]`` spans come out as literals without their brackets. ``tokens`` must be
    ordered longest first.
    """
    index = 0
    length = len(template)
    while index < length:
        char = template[index]
        if char == "[":
            end = template.find("]", index)
            if end != -1:
                yield False, template[index + 1 : end]
                index = end + 1
                continue
        for token in tokens:
            if template.startswith(token, index):
                yield True, token
                index += len(token)
                break
        else:
            yield False, char
            index += 1


def format_tokens(
    template: str,
    components: Mapping[str, str],
    tokens: Sequence[str] = SORTED_TIME_FORMATS,
) -> str:
    return "".join(components.get(text, text) if is_token else text for is_token, text in iter_template(template, tokens))


def build_components(
    year: int,
    month: int,
    day: int,
    weekday: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    offset: str,
) -> Dict[str, str]:
    """Computes the rendered value of every token for one calendar view.

    ``month`` is 1-based, ``weekday`` counts from Sunday and ``offset`` is a clock
    offset such as ``+06:00``.
    """
    padded_year = f"{year:04d}"
    month_name = MONTHS[month - 1]
    day_name = DAYS[weekday]
    twelve_hour = hour % 12 or 12
    return {
        "YYYY": padded_year,
        "YY": padded_year[-2:],
        "yyyy": padded_year,
        "yy": padded_year[-2:],
        "M": str(month),
        "MM": f"{month:02d}",
        "MMM": month_name[:3],
        "mmm": month_name[:3],
        "MMMM": month_name,
        "mmmm": month_name,
        "d": day_name[:2],
        "dd": day_name[:3],
        "ddd": day_name,
        "D": str(day),
        "DD": f"{day:02d}",
        "Do": ordinal(day),
        "H": str(hour),
        "HH": f"{hour:02d}",
        "h": str(twelve_hour),
        "hh": f"{twelve_hour:02d}",
        "m": str(minute),
        "mm": f"{minute:02d}",
        "s": str(second),
        "ss": f"{second:02d}",
        "ms": str(millisecond),
        "mss": f"{millisecond:03d}",
        "a": "am" if hour < 12 else "pm",
        "A": "AM" if hour < 12 else "PM",
        "Z": offset,
        "ZZ": offset,
    }


@dataclass(frozen=True)
class ParsedFields:
    year: int = 1970
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    offset: Optional[int] = None


def compile_template(template: str) -> Tuple["re.Pattern[str]", List[str]]:
    """Compiles a token template into an anchored regular expression.

    Returns the pattern and the tokens that own a named group. A token that repeats
    only captures on its first occurrence.
    """
    parts: List[str] = []
    captured: List[str] = []
    for is_token, text in iter_template(template):
        if is_token:
            pattern = TOKEN_PATTERNS[text]
            if text in captured:
                parts.append(f"(?:{pattern})")
            else:
                captured.append(text)
                parts.append(f"(?P<{text}>{pattern})")
            continue
        if _WHITESPACE.fullmatch(text):
            if not parts or parts[-1] != r"\s+":
                parts.append(r"\s+")
        else:
            parts.append(re.escape(text))
    return re.compile("^" + "".join(parts) + "$"), captured


def _month_from_name(name: str) -> Optional[int]:
    lowered = name.lower()
    for index, month_name in enumerate(MONTHS):
        candidate = month_name.lower()
        if lowered == candidate or (len(lowered) == 3 and candidate.startswith(lowered)):
            return index + 1
    return None


def parse_to_fields(text: str, template: str) -> ParsedFields:
    """Matches ``text`` against ``template`` and returns the captured calendar fields.

    Missing fields default to 1970-01-01 00:00:00.000. Two-digit years are read as
    20xx. Raises :class:`FormatMismatchError` when the text does not fit.
    """
    pattern, _ = compile_template(template)
    match = pattern.match(text.strip())
    if match is None:
        raise FormatMismatchError(text, template)
    groups = {key: value for key, value in match.groupdict().items() if value is not None}

    values: Dict[str, int] = {}
    for token in ("YYYY", "yyyy"):
        if token in groups:
            values["year"] = int(groups[token])
    for token in ("YY", "yy"):
        if token in groups and "year" not in values:
            values["year"] = 2000 + int(groups[token])

    for token in ("M", "MM"):
        if token in groups:
            values["month"] = int(groups[token])
    for token in ("MMM", "mmm", "MMMM", "mmmm"):
        if token in groups and "month" not in values:
            month = _month_from_name(groups[token])
            if month is None:
                raise FormatMismatchError(text, template)
            values["month"] = month

    for token in ("D", "DD"):
        if token in groups:
            values["day"] = int(groups[token])
    if "Do" in groups and "day" not in values:
        values["day"] = int(groups["Do"][:-2])

    meridiem = groups.get("a") or groups.get("A")
    for token in ("H", "HH"):
        if token in groups:
            values["hour"] = int(groups[token])
    for token in ("h", "hh"):
        if token in groups and "hour" not in values:
            hour = int(groups[token])
            if meridiem is not None:
                hour = hour % 12 + (12 if meridiem.lower() == "pm" else 0)
            values["hour"] = hour

    for name, tokens in (("minute", ("m", "mm")), ("second", ("s", "ss")), ("millisecond", ("ms", "mss"))):
        for token in tokens:
            if token in groups:
                values[name] = int(groups[token])

    offset = None
    for token in ("Z", "ZZ"):
        if token in groups:
            offset = parse_iso_offset(groups[token])

    return ParsedFields(offset=offset, **values)
