"""Tabular inventory of a bundle's immediate children (v0.1).

One row per entry of the classification snapshot, with a canonical column order
and dtypes so CSV exports are stable and equality tests are deterministic.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from qsnorma.core.errors import BundleIOError

from .manager import BundleManager

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


INVENTORY_SCHEMA: dict[str, str] = {
    "name": "string",
    "kind": "string",
    "reserved": "boolean",
    "size_bytes": "Int64",
    "path": "string",
}

INVENTORY_COLUMNS: list[str] = list(INVENTORY_SCHEMA.keys())

# Sorting key; names are unique within a kind.
INVENTORY_KEYS: list[str] = ["kind", "name"]


def _file_size(path: Path) -> int | None:
    # lstat: a dangling symlink is listed with its own size.
    # None when the entry vanished after the snapshot was taken.
    try:
        return path.lstat().st_size
    except FileNotFoundError:
        return None
    except OSError as e:
        raise BundleIOError(f"cannot stat file: {path}", path=path) from e


def _rows(bundle: BundleManager) -> list[dict[str, Any]]:
    c = bundle.classify()
    groups = [
        ("file", True, c.reserved_files),
        ("file", False, c.non_reserved_files),
        ("directory", True, c.reserved_dirs),
        ("directory", False, c.non_reserved_dirs),
    ]
    rows: list[dict[str, Any]] = []
    for kind, reserved, paths in groups:
        for p in paths:
            rows.append(
                {
                    "name": p.name,
                    "kind": kind,
                    "reserved": reserved,
                    "size_bytes": _file_size(p) if kind == "file" else None,
                    "path": str(p),
                }
            )
    return rows


def bundle_inventory(bundle: BundleManager) -> "pd.DataFrame":
    """Return the bundle's classified children as a DataFrame (see INVENTORY_COLUMNS)."""
    import pandas as pd  # local import to keep module import-light

    df = pd.DataFrame(_rows(bundle), columns=INVENTORY_COLUMNS)
    for col, dtype in INVENTORY_SCHEMA.items():
        df[col] = df[col].astype(dtype)
    return df.sort_values(INVENTORY_KEYS, kind="mergesort").reset_index(drop=True)


def write_inventory_csv(path: Path, df: "pd.DataFrame") -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.loc[:, INVENTORY_COLUMNS].to_csv(p, index=False, lineterminator="\n")
