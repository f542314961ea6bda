from __future__ import annotations

from pathlib import Path

import pandas as pd

from conftest import make_bundle_dir
from qsnorma.bundle.inventory import INVENTORY_COLUMNS, bundle_inventory, write_inventory_csv
from qsnorma.bundle.manager import BundleManager


def test_inventory_rows_and_dtypes(tmp_path: Path) -> None:
    root = make_bundle_dir(
        tmp_path / "b",
        manifest="{}\n",
        files={"fulltext.pdf": "%PDF", "pic.png": "png!!"},
        dirs=["pdf", "svg"],
    )
    df = bundle_inventory(BundleManager.read(root))

    assert list(df.columns) == INVENTORY_COLUMNS
    assert list(df["name"]) == ["pdf", "svg", "fulltext.pdf", "pic.png", "results.json"]
    assert list(df["kind"]) == ["directory", "directory", "file", "file", "file"]
    assert list(df["reserved"]) == [True, False, True, False, True]
    assert str(df["size_bytes"].dtype) == "Int64"
    assert df["size_bytes"].isna().tolist() == [True, True, False, False, False]
    assert df.loc[df["name"] == "pic.png", "size_bytes"].item() == 5
    assert df.loc[df["name"] == "results.json", "size_bytes"].item() == 3


def test_inventory_is_deterministic_and_csv_is_stable(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", files={"a.txt": "a", "b.txt": "bb"}, dirs=["results"])
    df1 = bundle_inventory(BundleManager(root))
    df2 = bundle_inventory(BundleManager(root))
    pd.testing.assert_frame_equal(df1, df2, check_like=False)

    out = tmp_path / "reports" / "inventory.csv"
    write_inventory_csv(out, df1)

    text = out.read_text(encoding="utf-8")
    assert text.splitlines()[0] == ",".join(INVENTORY_COLUMNS)
    assert "\r" not in text
    assert len(text.splitlines()) == 1 + len(df1)


def test_inventory_of_empty_directory(tmp_path: Path) -> None:
    bundle = BundleManager.create(tmp_path / "empty")

    df = bundle_inventory(bundle)

    assert df.empty
    assert list(df.columns) == INVENTORY_COLUMNS


def test_inventory_tolerates_dangling_symlink(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b")
    (root / "link.png").symlink_to(root / "gone.png")

    df = bundle_inventory(BundleManager.read(root))

    row = df.loc[df["name"] == "link.png"]
    assert row["kind"].item() == "file"
    assert not row["reserved"].item()
    assert row["size_bytes"].item() == (root / "link.png").lstat().st_size


def test_inventory_of_stale_snapshot_records_missing_size(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", files={"pic.png": "png"})
    bundle = BundleManager.read(root)
    bundle.classify()
    (root / "pic.png").unlink()

    df = bundle_inventory(bundle)

    assert df.loc[df["name"] == "pic.png", "size_bytes"].isna().item()
