from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree as ET

from conftest import make_bundle_dir
from qsnorma.bundle.manager import BundleManager


def test_summary_lists_directory_then_reserved_files(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", files={"fulltext.xml": "<a/>", "pic.png": "x"}, dirs=["results"])
    bundle = BundleManager.read(root)

    lines = bundle.summary().splitlines()

    assert lines == [
        f"dir: {root}",
        str(root / "fulltext.xml"),
        str(root / "results.json"),
    ]
    assert str(bundle) == bundle.summary()


def test_metadata_element_wraps_summary(tmp_path: Path) -> None:
    root = make_bundle_dir(tmp_path / "b", files={"scholarly.html": "<html/>"})
    bundle = BundleManager.read(root)

    element = bundle.get_metadata_element()
    assert element.tag == "qsNorma"
    assert len(element) == 0
    assert element.text == bundle.summary()

    parsed = ET.fromstring(bundle.metadata_xml())
    assert parsed.tag == "qsNorma"
    assert parsed.text == bundle.summary()
