"""Bundle directory management (on-disk format).

v0.1 minimal scope:
- Bind to / create / validate a bundle directory (`results.json` is mandatory)
- Classify immediate children into reserved and non-reserved groups
- Create-only writes and overwrite-permissive results documents
- Tabular inventory of the classified children
"""

from __future__ import annotations

from .inventory import bundle_inventory, write_inventory_csv
from .manager import BundleManager, Classification, contains_no_reserved_filenames, create_directory

__all__ = [
    "BundleManager",
    "Classification",
    "bundle_inventory",
    "contains_no_reserved_filenames",
    "create_directory",
    "write_inventory_csv",
]
