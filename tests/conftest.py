"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import qsnorma` to fail.

We ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers for Bundle Tests
# =============================================================================


def make_bundle_dir(
    root: Path,
    *,
    files: dict[str, str] | None = None,
    dirs: list[str] | None = None,
    manifest: str | None = '{"url": "https://example.org/journal.pone.0115884"}\n',
) -> Path:
    """Create a bundle directory on disk.

    `files` maps relative names to text content; `manifest=None` omits results.json.
    """
    root.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        (root / "results.json").write_text(manifest, encoding="utf-8")
    for name, text in (files or {}).items():
        p = root / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    for name in dirs or []:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root
