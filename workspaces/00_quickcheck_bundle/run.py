"""Quickcheck workspace: scrape -> read -> classify -> write -> report (v0.1).

This workspace is self-contained (no repo-level assets required). It fakes a
scraper's output under `workspaces/00_quickcheck_bundle/outputs/bundles/<doi>/`,
reads it back, writes a normalizer-style result, and writes a JSON report plus
an inventory CSV.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from qsnorma.bundle.inventory import bundle_inventory, write_inventory_csv
from qsnorma.bundle.manager import BundleManager
from qsnorma.core.errors import ConflictError


def _fixture_files() -> dict[str, str]:
    # What a scraper typically leaves behind for one DOI.
    return {
        "results.json": json.dumps({"url": "https://journals.plos.org/journal.pone.0115884"}) + "\n",
        "fulltext.xml": "<article><title>demo</title></article>\n",
        "fulltext.html": "<html><body>demo</body></html>\n",
        "pic5656.png": "not really a png\n",
        "suppdata.pdf": "%PDF-1.4\n",
    }


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def main() -> None:
    here = Path(__file__).resolve().parent
    outputs = here / "outputs"
    outputs.mkdir(parents=True, exist_ok=True)

    bundle_root = outputs / "bundles" / "journal.pone.0115884"
    scraped = BundleManager.create(bundle_root, wipe=bundle_root.exists())
    for name, text in _fixture_files().items():
        scraped.write_new_file(text, name)

    bundle = BundleManager.read(bundle_root)
    bundle.write_new_file("<html><body>structured</body></html>\n", "scholarly.html")

    conflict_detected = False
    try:
        bundle.write_new_file("overwrite attempt", "fulltext.xml")
    except ConflictError:
        conflict_detected = True

    bundle.write_results_document("results", "<results><regex name='crystal'/></results>\n")
    classification = bundle.classify(refresh=True)

    write_inventory_csv(outputs / "inventory.csv", bundle_inventory(bundle))

    report = {
        "bundle_root": str(bundle.directory),
        "reserved_files": [p.name for p in classification.reserved_files],
        "non_reserved_files": [p.name for p in classification.non_reserved_files],
        "reserved_dirs": [p.name for p in classification.reserved_dirs],
        "non_reserved_dirs": [p.name for p in classification.non_reserved_dirs],
        "conflict_detected": conflict_detected,
        "metadata": bundle.metadata_xml(),
    }
    _write_json(outputs / "bundle_report.json", report)

    if not conflict_detected or "scholarly.html" not in report["reserved_files"]:
        raise SystemExit("quickcheck failed; see outputs/bundle_report.json")


if __name__ == "__main__":
    main()
