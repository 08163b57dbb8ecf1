"""Environment-driven defaults for the YAML sorter."""

import os
from enum import Enum

QUOTE_ENV = "YAMLSORT_QUOTE_STRING"
MODE_ENV = "YAMLSORT_MODE"

_TRUTHY = {"1", "true", "yes", "on"}


class Mode(Enum):
    """Rendering mode; the value doubles as the output header label."""

    SORT = "sort"
    NORMAL = "normal"
    JSON = "json"


def get_quote_default():
    """Read YAMLSORT_QUOTE_STRING; unset or unrecognised means False."""
    return os.environ.get(QUOTE_ENV, "").strip().lower() in _TRUTHY


def get_mode_default():
    """Read YAMLSORT_MODE, default 'sort'. Raises ValueError if unknown."""
    raw = os.environ.get(MODE_ENV, "").strip().lower()
    if not raw:
        return Mode.SORT
    try:
        return Mode(raw)
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise ValueError(
            f"{MODE_ENV}={raw!r} is not one of: {choices}"
        ) from None
