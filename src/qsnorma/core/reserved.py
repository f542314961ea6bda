"""Reserved name registry for bundle directories (v0.1).

A bundle is shared by independent pipeline stages (scraper, normalizer,
indexer). The names below are the contract between them: they are bit-exact and
case-sensitive, and everything not listed here is arbitrary content.

This module is pure data + predicates and must not touch the filesystem.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

# ----------------------------
# Canonical file names
# ----------------------------

ABSTRACT_HTML = "abstract.html"
FULLTEXT_DOCX = "fulltext.docx"
FULLTEXT_HTML = "fulltext.html"
FULLTEXT_PDF = "fulltext.pdf"
FULLTEXT_XML = "fulltext.xml"
RESULTS_JSON = "results.json"
RESULTS_XML = "results.xml"
SCHOLARLY_HTML = "scholarly.html"

RESERVED_FILE_NAMES: tuple[str, ...] = (
    ABSTRACT_HTML,
    FULLTEXT_DOCX,
    FULLTEXT_HTML,
    FULLTEXT_PDF,
    FULLTEXT_XML,
    RESULTS_JSON,
    RESULTS_XML,
    SCHOLARLY_HTML,
)

# The manifest written by the scraper; the only mandatory file.
MANIFEST_NAME = RESULTS_JSON

# ----------------------------
# Canonical directory names
# ----------------------------

RESULTS_DIR = "results"
PDF_DIR = "pdf"

RESERVED_DIR_NAMES: tuple[str, ...] = (
    RESULTS_DIR,
    PDF_DIR,
)

# ----------------------------
# Extension -> canonical full-text name
# ----------------------------

RESERVED_FILES_BY_EXTENSION: Mapping[str, str] = MappingProxyType(
    {
        "docx": FULLTEXT_DOCX,
        "html": FULLTEXT_HTML,
        "pdf": FULLTEXT_PDF,
        "xml": FULLTEXT_XML,
    }
)

_RESERVED_FILE_SET = frozenset(RESERVED_FILE_NAMES)
_RESERVED_DIR_SET = frozenset(RESERVED_DIR_NAMES)


def is_reserved_filename(name: object) -> bool:
    """Return True iff `name` is exactly one of the canonical file names."""
    return isinstance(name, str) and name in _RESERVED_FILE_SET


def is_reserved_directory(name: object) -> bool:
    """Return True iff `name` is exactly one of the canonical directory names."""
    return isinstance(name, str) and name in _RESERVED_DIR_SET


def file_extension(filename: str) -> str:
    """Return the text after the last '.' of the final path component.

    Returns "" when there is no dot. Case is preserved.
    """
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1]


def resolve_reserved_name_for_extension(filename: str) -> str | None:
    """Map `filename`'s extension to the canonical full-text file name.

    Examples:
        "data.pdf" -> "fulltext.pdf"
        "data.foo" -> None
        "noext"    -> None
    """
    ext = file_extension(filename)
    if not ext:
        return None
    return RESERVED_FILES_BY_EXTENSION.get(ext)


def is_non_empty_non_reserved_input_list(inputs: Sequence[str] | None) -> bool:
    """Return True unless `inputs` is None or is a single reserved file name.

    Used by stages that accept a list of input names and must distinguish
    "process these content files" from "process the canonical file".
    """
    if inputs is None:
        return False
    if len(inputs) != 1:
        return True
    return not is_reserved_filename(inputs[0])
