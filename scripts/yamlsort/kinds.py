"""Value kinds accepted by the serializer."""

from enum import Enum


class ValueKind(Enum):
    NULL = "null"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"


class UnsupportedValueError(TypeError):
    """A value outside the null/mapping/sequence/string/integer/float model."""

    what = "value"

    def __init__(self, value):
        self.kind = type(value).__name__
        self.value = value
        super().__init__(
            f"unsupported {self.what} kind: {self.kind} ({self.what}: {value!r})"
        )


class UnsupportedKeyError(UnsupportedValueError):
    """A mapping key that is not a string."""

    what = "mapping key"


def kind_of(value):
    """Return the ValueKind of value or raise UnsupportedValueError.

    bool is checked before int: it is an int subclass but not part of the
    model.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        raise UnsupportedValueError(value)
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    raise UnsupportedValueError(value)
