from __future__ import annotations

from pathlib import Path

import pytest

from conftest import make_bundle_dir
from qsnorma.bundle.manager import BundleManager, contains_no_reserved_filenames
from qsnorma.core.errors import BundleIOError


def _names(paths) -> list[str]:
    return [p.name for p in paths]


def _typical_bundle(root: Path) -> Path:
    return make_bundle_dir(
        root,
        files={
            "fulltext.xml": "<article/>",
            "fulltext.pdf": "%PDF-1.4",
            "Fulltext.html": "<html/>",
            "foo12345.docx": "docx",
            "pic5656.png": "png",
            "svg/page1.svg": "<svg/>",
        },
        dirs=["results", "pdf", "supp"],
    )


def test_classify_partitions_immediate_children(tmp_path: Path) -> None:
    root = _typical_bundle(tmp_path / "journal.pone.0115884")
    bundle = BundleManager.read(root)

    c = bundle.classify()

    assert _names(c.reserved_files) == ["fulltext.pdf", "fulltext.xml", "results.json"]
    assert _names(c.non_reserved_files) == ["Fulltext.html", "foo12345.docx", "pic5656.png"]
    assert _names(c.reserved_dirs) == ["pdf", "results"]
    assert _names(c.non_reserved_dirs) == ["supp", "svg"]

    # Exact partition of the immediate children.
    children = sorted(p.name for p in root.iterdir())
    assert sorted(_names(c.all_entries())) == children
    assert len(c.all_entries()) == len(set(c.all_entries()))


def test_classify_is_not_recursive(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", files={"supp/fulltext.pdf": "nested"})
    c = BundleManager(root).classify()

    assert _names(c.reserved_files) == ["results.json"]
    assert _names(c.non_reserved_dirs) == ["supp"]


def test_reserved_file_name_used_as_directory_is_a_non_reserved_dir(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", dirs=["scholarly.html"], files={"pdf": "a file named pdf"})
    c = BundleManager(root).classify()

    assert _names(c.non_reserved_dirs) == ["scholarly.html"]
    assert _names(c.non_reserved_files) == ["pdf"]
    assert c.reserved_dirs == ()


def test_classification_is_memoized_until_refresh(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b")
    bundle = BundleManager(root)

    first = bundle.classify()
    (root / "scholarly.html").write_text("<html/>", encoding="utf-8")

    assert bundle.classify() is first
    assert _names(bundle.reserved_files) == ["results.json"]

    refreshed = bundle.classify(refresh=True)
    assert _names(refreshed.reserved_files) == ["results.json", "scholarly.html"]
    assert bundle.reserved_files == refreshed.reserved_files


def test_accessor_properties_trigger_classification(tmp_path: Path) -> None:
    root = _typical_bundle(tmp_path / "b")
    bundle = BundleManager(root)

    assert _names(bundle.reserved_dirs) == ["pdf", "results"]
    assert _names(bundle.non_reserved_files) == ["Fulltext.html", "foo12345.docx", "pic5656.png"]
    assert _names(bundle.non_reserved_dirs) == ["supp", "svg"]


def test_contains_no_reserved_filenames(tmp_path: Path) -> None:
    content_only = make_bundle_dir(tmp_path / "a", manifest=None, files={"pic.png": "x", "mmm.csv": "a,b"})
    with_reserved = make_bundle_dir(tmp_path / "b", manifest=None, files={"pic.png": "x", "fulltext.xml": "<a/>"})
    reserved_as_dir = make_bundle_dir(tmp_path / "c", manifest=None, dirs=["fulltext.xml"])
    a_file = tmp_path / "plain.txt"
    a_file.write_text("x", encoding="utf-8")

    assert contains_no_reserved_filenames(content_only)
    assert not contains_no_reserved_filenames(with_reserved)
    assert contains_no_reserved_filenames(reserved_as_dir)
    # Absence of a directory is not a collision.
    assert contains_no_reserved_filenames(tmp_path / "missing")
    assert contains_no_reserved_filenames(a_file)
    assert contains_no_reserved_filenames(None)
    # Also reachable without binding a manager.
    assert not BundleManager.contains_no_reserved_filenames(with_reserved)


def test_list_files(tmp_path: Path) -> None:
    root = _typical_bundle(tmp_path / "b")
    bundle = BundleManager(root)

    flat = [p.relative_to(root).as_posix() for p in bundle.list_files()]
    deep = [p.relative_to(root).as_posix() for p in bundle.list_files(recursive=True)]

    assert "svg/page1.svg" not in flat
    assert "results.json" in flat
    assert "svg/page1.svg" in deep
    assert set(flat) < set(deep)
    assert deep == sorted(deep)


def test_contains_no_reserved_filenames_unlistable_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = make_bundle_dir(tmp_path / "b", manifest=None, files={"pic.png": "x"})

    def _denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", _denied)

    with pytest.raises(BundleIOError, match=r"cannot list directory") as excinfo:
        contains_no_reserved_filenames(root)

    assert isinstance(excinfo.value.__cause__, PermissionError)
