"""
Text encoding rules for iCalendar content lines (RFC 5545 section 3.1,
3.2 and 3.3.11).

Folding counts UTF-8 octets, not characters: a line of 40 "ø" is 80
octets and has to be folded even though it is only 40 characters wide.
Multi-octet sequences are never split across two physical lines.
"""
import re
from typing import Iterable
from typing import List
from typing import Union

from icalwriter.lib.error import EncodingError

CRLF = "\r\n"

## Maximum length of a physical line, in octets, excluding the CRLF
FOLD_LIMIT = 75

## RFC 5545 CONTROL: %x00-08 / %x0A-1F / %x7F.  HTAB is allowed.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_PARAM_QUOTE_CHARS = frozenset(",;:")
_UNFOLD_RE = re.compile(r"\r?\n[ \t]")


def _check_utf8(text: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"text is not representable as UTF-8: {e.reason}")


def escape_value(text: str) -> str:
    """
    Escapes a TEXT value.  Backslash, semicolon, comma and newlines are
    escaped, any other control character is refused.
    """
    _check_utf8(text)
    text = text.replace("\\", "\\\\")
    text = text.replace(";", "\\;")
    text = text.replace(",", "\\,")
    text = _NEWLINE_RE.sub("\\\\n", text)
    if _CONTROL_RE.search(text):
        raise EncodingError("value contains a control character")
    return text


def check_raw_value(text: str) -> str:
    """Structured values (RECUR and friends) are passed through as is,
    but they still may not contain line breaks or other control
    characters"""
    _check_utf8(text)
    if _CONTROL_RE.search(text):
        raise EncodingError("value contains a control character")
    return text


def format_parameter_value(value: Union[str, Iterable[str]]) -> str:
    """
    Returns a parameter value ready to go after the "=".  A list of
    values is joined with commas, each element quoted on its own.

    RFC 5545 offers no way to escape a DQUOTE inside a parameter value,
    so such values are refused rather than silently mangled.
    """
    if not isinstance(value, str):
        return ",".join(format_parameter_value(v) for v in value)
    _check_utf8(value)
    if '"' in value:
        raise EncodingError(f"parameter value {value!r} contains a double quote")
    if _CONTROL_RE.search(value):
        raise EncodingError(f"parameter value {value!r} contains a control character")
    if _PARAM_QUOTE_CHARS.intersection(value):
        return f'"{value}"'
    return value


def fold_line(line: str, limit: int = FOLD_LIMIT) -> str:
    """
    Folds one logical content line into CRLF-terminated physical
    lines of at most `limit` octets.  Continuation lines start with a
    single space, which counts against the limit.
    """
    chunks: List[str] = []
    current: List[str] = []
    size = 0
    budget = limit
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > budget:
            chunks.append("".join(current))
            current = []
            size = 0
            budget = limit - 1
        current.append(char)
        size += width
    chunks.append("".join(current))
    return (CRLF + " ").join(chunks) + CRLF


def unfold_lines(text: str) -> List[str]:
    """Reverses fold_line: returns the logical lines of a text block"""
    text = _UNFOLD_RE.sub("", text)
    lines = text.split(CRLF)
    if lines and lines[-1] == "":
        lines.pop()
    return lines
