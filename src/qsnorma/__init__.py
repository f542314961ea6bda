"""qsnorma — naming and lookup contract for scraped-document bundles.

A bundle is one directory per document (e.g. per DOI) that is handed from the
scraper to the normalizer and indexer. v0.1 covers the reserved name registry,
bundle validation/classification, and the write paths stages use to add files.
"""

from __future__ import annotations

from qsnorma.bundle import BundleManager, Classification
from qsnorma.core import BundleError, is_reserved_directory, is_reserved_filename

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BundleError",
    "BundleManager",
    "Classification",
    "is_reserved_directory",
    "is_reserved_filename",
]
