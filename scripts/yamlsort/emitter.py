"""Recursive block-style emitter with sorted mapping keys.

Levels count spaces. A mapping's keys sit at ``level``; its block children
are emitted at ``level + INDENT_STEP``. A sequence's elements are emitted at
``level`` with their ``- `` marker two columns to the left, so a sequence
under a key lines its markers up with that key. ``in_sequence`` tells the
callee its first line already follows a marker and must not be indented.
"""

import io
from dataclasses import dataclass

from yamlsort.constants import EMPTY_MAP, EMPTY_SEQ, INDENT_STEP
from yamlsort.kinds import ValueKind, kind_of
from yamlsort.ordering import ordered_keys
from yamlsort.scalars import Shape, classify_entry, render_scalar


@dataclass(frozen=True)
class SerializeOptions:
    always_quote_strings: bool = False


def serialize(value, options=None):
    """Render one document and return its text.

    Raises UnsupportedValueError for the first value outside the model.
    Output is built in memory, so a failed document yields no text at all.
    """
    options = options or SerializeOptions()
    out = io.StringIO()
    # Top-level sequences need room for their markers at column 0
    level = INDENT_STEP if kind_of(value) is ValueKind.SEQUENCE else 0
    _emit(out, value, level, False, options)
    return out.getvalue()


def _indent(level):
    return " " * max(level, 0)


def _empty_marker(value):
    return EMPTY_MAP if isinstance(value, dict) else EMPTY_SEQ


def _emit(out, value, level, in_sequence, options):
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        out.write("\n")
    elif kind is ValueKind.MAPPING:
        _emit_mapping(out, value, level, in_sequence, options)
    elif kind is ValueKind.SEQUENCE:
        _emit_sequence(out, value, level, in_sequence, options)
    else:
        out.write(render_scalar(value, options.always_quote_strings) + "\n")


def _emit_mapping(out, mapping, level, in_sequence, options):
    if not mapping:
        out.write(EMPTY_MAP + "\n")
        return
    for i, key in enumerate(ordered_keys(mapping)):
        value = mapping[key]
        indent = "" if in_sequence and i == 0 else _indent(level)
        shape = classify_entry(value)
        if shape is Shape.NULL:
            out.write(f"{indent}{key}:\n")
        elif shape is Shape.EMPTY:
            out.write(f"{indent}{key}: {_empty_marker(value)}\n")
        elif shape is Shape.BLOCK:
            out.write(f"{indent}{key}:\n")
            _emit(out, value, level + INDENT_STEP, False, options)
        else:
            scalar = render_scalar(value, options.always_quote_strings)
            out.write(f"{indent}{key}: {scalar}\n")


def _emit_sequence(out, items, level, in_sequence, options):
    if not items:
        out.write(EMPTY_SEQ + "\n")
        return
    for i, item in enumerate(items):
        indent = "" if in_sequence and i == 0 else _indent(level - INDENT_STEP)
        out.write(f"{indent}- ")
        if classify_entry(item) is Shape.BLOCK and isinstance(item, list):
            # Nested sequence: its markers start after ours
            _emit(out, item, level + INDENT_STEP, True, options)
        else:
            _emit(out, item, level, True, options)
