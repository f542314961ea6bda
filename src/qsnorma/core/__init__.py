"""qsnorma core: reserved name registry and error taxonomy.

This package is standalone and must not import bundle/CLI modules.
"""

from __future__ import annotations

from .errors import (
    BundleError,
    BundleIOError,
    ConflictError,
    InvalidArgumentError,
    InvalidStateError,
    MissingResourceError,
)
from .reserved import (
    MANIFEST_NAME,
    RESERVED_DIR_NAMES,
    RESERVED_FILE_NAMES,
    RESERVED_FILES_BY_EXTENSION,
    is_non_empty_non_reserved_input_list,
    is_reserved_directory,
    is_reserved_filename,
    resolve_reserved_name_for_extension,
)

__all__ = [
    "BundleError",
    "BundleIOError",
    "ConflictError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MissingResourceError",
    "MANIFEST_NAME",
    "RESERVED_DIR_NAMES",
    "RESERVED_FILE_NAMES",
    "RESERVED_FILES_BY_EXTENSION",
    "is_non_empty_non_reserved_input_list",
    "is_reserved_directory",
    "is_reserved_filename",
    "resolve_reserved_name_for_extension",
]
