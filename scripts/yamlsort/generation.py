"""Rendering parsed documents in the selected mode."""

import logging

from yamlsort.config import Mode
from yamlsort.constants import DOC_SEPARATOR
from yamlsort.emitter import SerializeOptions, serialize
from yamlsort.io import split_documents
from yamlsort.yaml_utils import _json, _yaml, load_document

log = logging.getLogger(__name__)


def _header(mode):
    return f"{DOC_SEPARATOR}\n# {mode.value} output\n"


def render_document(data, mode=Mode.SORT, options=None):
    """Return one parsed document as separator, header comment and body."""
    if mode is Mode.SORT:
        body = serialize(data, options or SerializeOptions())
    elif mode is Mode.NORMAL:
        body = _yaml(data)
    else:
        body = _json(data)
    if not body.endswith("\n"):
        body += "\n"
    return _header(mode) + body


def iter_rendered(text, mode=Mode.SORT, options=None):
    """Yield the rendering of every document in text, in order.

    Parse errors (yaml.YAMLError) and UnsupportedValueError propagate at
    the failing document; documents before it have already been yielded.
    """
    documents = split_documents(text)
    log.debug("Rendering %d document(s) in %s mode", len(documents), mode.value)
    for index, document in enumerate(documents):
        data = load_document(document)
        log.debug("Document %d parsed as %s", index, type(data).__name__)
        yield render_document(data, mode, options)


def render_stream(text, mode=Mode.SORT, options=None):
    """Render every document in text and return the list of renderings."""
    return list(iter_rendered(text, mode, options))
