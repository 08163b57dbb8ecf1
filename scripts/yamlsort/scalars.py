"""Scalar rendering and entry-shape classification."""

from enum import Enum

from yamlsort.constants import BOOLEAN_WORDS
from yamlsort.kinds import ValueKind, kind_of


class Shape(Enum):
    """How a mapping value or sequence element is laid out."""

    NULL = "null"  # "key:" and nothing else
    BLOCK = "block"  # "key:" then the child on the following lines
    EMPTY = "empty"  # "key: {}" or "key: []"
    INLINE = "inline"  # "key: value"


_ESCAPES = {
    "\\": "\\\\",
    "\"": "\\\"",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\e",
    "\x85": "\\N",
    "\u2028": "\\L",
    "\u2029": "\\P",
}


def _is_special(ch):
    # Control characters and YAML line breaks never appear raw
    code = ord(ch)
    return code < 0x20 or 0x7F <= code <= 0x9F or ch in "\u2028\u2029"


def needs_quotes(text):
    """Return True if text must be double-quoted to survive a YAML re-read.

    Covers the empty string (would read back as null), boolean words in
    any case, a leading digit or comma, and any control character or line
    break.
    """
    if text == "":
        return True
    if any(_is_special(ch) for ch in text):
        return True
    if text.lower() in BOOLEAN_WORDS:
        return True
    return text[0] in "0123456789,"


def _escape(ch):
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if _is_special(ch):
        return f"\\x{ord(ch):02x}"
    return ch


def quote(text):
    """Wrap text in double quotes using YAML double-quoted escapes."""
    return '"' + "".join(_escape(ch) for ch in text) + '"'


def render_float(value):
    """Render a float the way yaml.SafeDumper.represent_float does.

    YAML 1.1 needs a dot in the mantissa and spells the specials .inf/.nan.
    """
    if value != value:
        return ".nan"
    if value == float("inf"):
        return ".inf"
    if value == float("-inf"):
        return "-.inf"
    text = repr(value).lower()
    if "." not in text and "e" in text:
        text = text.replace("e", ".0e", 1)
    return text


def render_scalar(value, always_quote=False):
    """Render a string, integer or float scalar as a single line of text."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        if always_quote or needs_quotes(value):
            return quote(value)
        return value
    if kind is ValueKind.INTEGER:
        return str(value)
    if kind is ValueKind.FLOAT:
        return render_float(value)
    raise ValueError(f"not a scalar: {kind.value}")


def classify_entry(value):
    """Return the Shape used to emit value after a key or sequence marker."""
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return Shape.NULL
    if kind in (ValueKind.MAPPING, ValueKind.SEQUENCE):
        return Shape.BLOCK if value else Shape.EMPTY
    return Shape.INLINE
