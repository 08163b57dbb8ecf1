"""yamlsort — deterministic, diff-friendly YAML re-emitter.

Public API re-exported here.
"""

from yamlsort.config import (
    MODE_ENV,
    QUOTE_ENV,
    Mode,
    get_mode_default,
    get_quote_default,
)
from yamlsort.constants import (
    BOOLEAN_WORDS,
    DOC_SEPARATOR,
    EMPTY_MAP,
    EMPTY_SEQ,
    INDENT_STEP,
    NAME_KEY,
)
from yamlsort.emitter import SerializeOptions, serialize
from yamlsort.generation import iter_rendered, render_document, render_stream
from yamlsort.io import read_input, same_file, split_documents, write_output
from yamlsort.kinds import (
    UnsupportedKeyError,
    UnsupportedValueError,
    ValueKind,
    kind_of,
)
from yamlsort.ordering import ordered_keys
from yamlsort.scalars import (
    Shape,
    classify_entry,
    needs_quotes,
    quote,
    render_float,
    render_scalar,
)
from yamlsort.yaml_utils import _Dumper, _json, _Loader, _yaml, load_document

__version__ = "0.1.0"

__all__ = [
    # Constants
    "BOOLEAN_WORDS",
    "DOC_SEPARATOR",
    "EMPTY_MAP",
    "EMPTY_SEQ",
    "INDENT_STEP",
    "NAME_KEY",
    # Config
    "MODE_ENV",
    "QUOTE_ENV",
    "Mode",
    "get_mode_default",
    "get_quote_default",
    # Value model
    "UnsupportedKeyError",
    "UnsupportedValueError",
    "ValueKind",
    "kind_of",
    # Ordering and scalars
    "ordered_keys",
    "Shape",
    "classify_entry",
    "needs_quotes",
    "quote",
    "render_float",
    "render_scalar",
    # Emitter
    "SerializeOptions",
    "serialize",
    # Streams
    "iter_rendered",
    "read_input",
    "render_document",
    "render_stream",
    "same_file",
    "split_documents",
    "write_output",
    # YAML
    "load_document",
    "_Dumper",
    "_Loader",
    "_json",
    "_yaml",
]
