"""Shared constants for the YAML sorter."""

# Key promoted ahead of every other mapping key
NAME_KEY = "name"

# Each mapping nesting adds this many indent levels (one space per level)
INDENT_STEP = 2

# Plain scalars YAML 1.1 parsers would read back as booleans
BOOLEAN_WORDS = frozenset({"true", "false", "yes", "no", "on", "off"})

EMPTY_MAP = "{}"
EMPTY_SEQ = "[]"

DOC_SEPARATOR = "---"
