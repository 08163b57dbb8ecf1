"""Reading input streams and splitting them into documents."""

import logging
import sys
from pathlib import Path

from yamlsort.constants import DOC_SEPARATOR

log = logging.getLogger(__name__)


def read_input(path=None):
    """Return the text of path, or of standard input when path is None."""
    if path is None:
        log.debug("Reading standard input")
        return sys.stdin.read()
    log.debug("Reading %s", path)
    return Path(path).read_text(encoding="utf-8")


def split_documents(text):
    """Split text on lines that are exactly ``---``.

    Each document keeps its lines newline-terminated. Empty documents
    (for example before a leading separator) are dropped; a document made
    only of blank lines is kept.
    """
    documents = []
    current = []
    for line in text.splitlines():
        if line == DOC_SEPARATOR:
            if current:
                documents.append("".join(current))
                current = []
        else:
            current.append(line + "\n")
    if current:
        documents.append("".join(current))
    return documents


def same_file(input_path, output_path):
    """True if both paths are given and name the same file."""
    if input_path is None or output_path is None:
        return False
    return Path(input_path).resolve() == Path(output_path).resolve()


def write_output(chunks, path=None):
    """Write rendered documents to path, or to standard output.

    The target is flushed after every chunk.
    """
    if path is None:
        for chunk in chunks:
            sys.stdout.write(chunk)
            sys.stdout.flush()
        return
    log.debug("Writing %s", path)
    with open(path, "w", encoding="utf-8") as f:
        for chunk in chunks:
            f.write(chunk)
            f.flush()
