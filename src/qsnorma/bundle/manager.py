"""Bundle manager: one scraped document's directory on disk (v0.1).

A bundle is a folder, typically named after a DOI, e.g.
`contentmine/journal.pone.0115884/`, containing:
- results.json            (mandatory manifest written by the scraper)
- fulltext.{xml,html,pdf,docx}, abstract.html, scholarly.html, results.xml
- arbitrary content files (images, tables, supplemental data)
- results/ and pdf/ subdirectories, plus arbitrary subdirectories

The manager binds to a directory, validates the manifest invariant, classifies
the immediate children into reserved/non-reserved files and directories, and
provides the create-only and overwrite-permissive write paths used by
downstream stages.

Rules:
- Classification is by name only (exact, case-sensitive); contents are never read.
- The classification snapshot is memoized per instance and never invalidated
  implicitly; use `classify(refresh=True)` after mutating the directory.
- One manager per bundle at a time; nothing here is locked or transactional.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from xml.etree import ElementTree as ET

from qsnorma.core.errors import (
    BundleIOError,
    ConflictError,
    InvalidArgumentError,
    InvalidStateError,
    MissingResourceError,
)
from qsnorma.core.reserved import (
    ABSTRACT_HTML,
    FULLTEXT_DOCX,
    FULLTEXT_HTML,
    FULLTEXT_PDF,
    FULLTEXT_XML,
    MANIFEST_NAME,
    RESULTS_JSON,
    RESULTS_XML,
    SCHOLARLY_HTML,
    is_reserved_directory,
    is_reserved_filename,
    resolve_reserved_name_for_extension,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

METADATA_ELEMENT_NAME = "qsNorma"


@dataclass(frozen=True)
class Classification:
    """Partition of a bundle's immediate children, each group sorted by name."""

    reserved_files: tuple[Path, ...]
    non_reserved_files: tuple[Path, ...]
    reserved_dirs: tuple[Path, ...]
    non_reserved_dirs: tuple[Path, ...]

    def all_entries(self) -> tuple[Path, ...]:
        return self.reserved_files + self.non_reserved_files + self.reserved_dirs + self.non_reserved_dirs


def _require_path(path: PathLike | None, *, where: str) -> Path:
    if path is None:
        raise InvalidArgumentError(f"{where}: path must not be None")
    s = os.fspath(path)
    if not s:
        raise InvalidArgumentError(f"{where}: path must be a non-empty string")
    return Path(s)


def _is_existing_file(path: Path) -> bool:
    return path.exists() and not path.is_dir()


def _list_children(directory: Path) -> list[Path]:
    # Deterministic order; os.scandir order is filesystem-dependent.
    return sorted(directory.iterdir(), key=lambda p: p.name)


def contains_no_reserved_filenames(directory: PathLike | None) -> bool:
    """Return False iff `directory` has an immediate non-directory child with a reserved name.

    A missing directory, a non-directory path, or None all return True: absence
    of a directory is not evidence of a reserved-name collision. An existing
    directory that cannot be listed raises BundleIOError.
    """
    if directory is None:
        return True
    d = Path(directory)
    if not d.is_dir():
        return True
    try:
        children = _list_children(d)
    except OSError as e:
        raise BundleIOError(f"cannot list directory: {d}", path=d) from e
    for child in children:
        if not child.is_dir() and is_reserved_filename(child.name):
            return False
    return True


def create_directory(path: PathLike | None, *, wipe: bool = False) -> Path:
    """Create `path` and any missing ancestors, optionally deleting it first.

    Raises:
        InvalidArgumentError: path is None or empty.
        BundleIOError: `wipe` was requested and deletion failed (including a
            missing path), or the directory could not be created.
    """
    p = _require_path(path, where="create_directory")
    if wipe:
        try:
            if p.is_dir() and not p.is_symlink():
                shutil.rmtree(p)
            else:
                p.unlink()
        except OSError as e:
            raise BundleIOError(f"cannot delete directory: {p}", path=p) from e
        logger.debug("wiped %s", p)
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BundleIOError(f"cannot make directory: {p}", path=p) from e
    logger.debug("created bundle directory %s", p)
    return p


class BundleManager:
    """Naming and lookup contract for a single bundle directory.

    Construction binds to `directory` without touching the filesystem. Use
    `BundleManager.create()` to make the directory and `BundleManager.read()`
    to bind to an existing, validated bundle.
    """

    def __init__(self, directory: PathLike) -> None:
        self._directory = Path(directory).absolute()
        self._classification: Classification | None = None

    # ----------------------------
    # Lifecycle
    # ----------------------------

    @classmethod
    def create(cls, directory: PathLike | None, *, wipe: bool = False) -> "BundleManager":
        """Create the bundle directory (see `create_directory`) and bind to it."""
        p = create_directory(directory, wipe=wipe)
        return cls(p)

    @classmethod
    def read(cls, directory: PathLike | None) -> "BundleManager":
        """Bind to an existing bundle and check the manifest invariant.

        Raises:
            InvalidArgumentError: directory is None or empty.
            MissingResourceError: directory missing, or results.json missing/empty.
            InvalidStateError: directory is a file, or results.json is a directory.
        """
        p = _require_path(directory, where="read")
        bundle = cls(p)
        bundle.require_directory_exists()
        bundle.check_required_files()
        return bundle

    @property
    def directory(self) -> Path:
        return self._directory

    def require_directory_exists(self) -> None:
        d = self._directory
        if not d.exists():
            raise MissingResourceError(f"directory does not exist: {d}", path=d)
        if not d.is_dir():
            raise InvalidStateError(f"not a directory: {d}", path=d)

    def check_required_files(self) -> None:
        self._require_existing_non_empty_file(self._directory / MANIFEST_NAME)

    @staticmethod
    def _require_existing_non_empty_file(path: Path) -> None:
        if not path.exists():
            raise MissingResourceError(f"required file does not exist: {path}", path=path)
        if path.is_dir():
            raise InvalidStateError(f"required file must not be a directory: {path}", path=path)
        try:
            size = path.stat().st_size
        except OSError as e:
            raise BundleIOError(f"cannot stat required file: {path}", path=path) from e
        if size == 0:
            raise MissingResourceError(f"required file must not be empty: {path}", path=path)

    # ----------------------------
    # Classification
    # ----------------------------

    is_reserved_filename = staticmethod(is_reserved_filename)
    is_reserved_directory = staticmethod(is_reserved_directory)
    contains_no_reserved_filenames = staticmethod(contains_no_reserved_filenames)
    resolve_reserved_name_for_extension = staticmethod(resolve_reserved_name_for_extension)

    def classify(self, *, refresh: bool = False) -> Classification:
        """Return the memoized classification of the directory's immediate children.

        The first call (or any call with refresh=True) lists the directory.
        """
        if self._classification is not None and not refresh:
            return self._classification

        reserved_files: list[Path] = []
        non_reserved_files: list[Path] = []
        reserved_dirs: list[Path] = []
        non_reserved_dirs: list[Path] = []
        try:
            children = _list_children(self._directory)
        except OSError as e:
            raise BundleIOError(f"cannot list directory: {self._directory}", path=self._directory) from e

        for child in children:
            if child.is_dir():
                if is_reserved_directory(child.name):
                    reserved_dirs.append(child)
                else:
                    non_reserved_dirs.append(child)
            elif is_reserved_filename(child.name):
                reserved_files.append(child)
            else:
                non_reserved_files.append(child)

        self._classification = Classification(
            reserved_files=tuple(reserved_files),
            non_reserved_files=tuple(non_reserved_files),
            reserved_dirs=tuple(reserved_dirs),
            non_reserved_dirs=tuple(non_reserved_dirs),
        )
        logger.debug(
            "classified %s: %d reserved files, %d other files, %d reserved dirs, %d other dirs",
            self._directory,
            len(reserved_files),
            len(non_reserved_files),
            len(reserved_dirs),
            len(non_reserved_dirs),
        )
        return self._classification

    @property
    def reserved_files(self) -> tuple[Path, ...]:
        return self.classify().reserved_files

    @property
    def non_reserved_files(self) -> tuple[Path, ...]:
        return self.classify().non_reserved_files

    @property
    def reserved_dirs(self) -> tuple[Path, ...]:
        return self.classify().reserved_dirs

    @property
    def non_reserved_dirs(self) -> tuple[Path, ...]:
        return self.classify().non_reserved_dirs

    def list_files(self, *, recursive: bool = False) -> list[Path]:
        """Return all regular files under the bundle, sorted by path."""
        pattern = "**/*" if recursive else "*"
        return sorted(p for p in self._directory.glob(pattern) if p.is_file())

    # ----------------------------
    # Reserved-file accessors
    # ----------------------------

    def get_reserved_file(self, name: str) -> Path | None:
        """Return where reserved file `name` lives in this bundle, whether or not it exists."""
        if not is_reserved_filename(name):
            return None
        return self._directory / name

    def get_existing_reserved_file(self, name: str) -> Path | None:
        """Return the path of reserved file `name` if it exists as a non-directory.

        None covers both "not a reserved name" and "reserved but absent".
        """
        path = self.get_reserved_file(name)
        if path is None or not _is_existing_file(path):
            return None
        return path

    def has_reserved_file(self, name: str) -> bool:
        return self.get_existing_reserved_file(name) is not None

    def has_fulltext_xml(self) -> bool:
        return self.has_reserved_file(FULLTEXT_XML)

    def get_existing_fulltext_xml(self) -> Path | None:
        return self.get_existing_reserved_file(FULLTEXT_XML)

    def has_fulltext_html(self) -> bool:
        return self.has_reserved_file(FULLTEXT_HTML)

    def get_existing_fulltext_html(self) -> Path | None:
        return self.get_existing_reserved_file(FULLTEXT_HTML)

    def has_fulltext_pdf(self) -> bool:
        return self.has_reserved_file(FULLTEXT_PDF)

    def get_existing_fulltext_pdf(self) -> Path | None:
        return self.get_existing_reserved_file(FULLTEXT_PDF)

    def has_fulltext_docx(self) -> bool:
        return self.has_reserved_file(FULLTEXT_DOCX)

    def get_existing_fulltext_docx(self) -> Path | None:
        return self.get_existing_reserved_file(FULLTEXT_DOCX)

    def has_results_json(self) -> bool:
        return self.has_reserved_file(RESULTS_JSON)

    def get_existing_results_json(self) -> Path | None:
        return self.get_existing_reserved_file(RESULTS_JSON)

    def has_results_xml(self) -> bool:
        return self.has_reserved_file(RESULTS_XML)

    def get_existing_results_xml(self) -> Path | None:
        return self.get_existing_reserved_file(RESULTS_XML)

    def has_scholarly_html(self) -> bool:
        return self.has_reserved_file(SCHOLARLY_HTML)

    def get_existing_scholarly_html(self) -> Path | None:
        return self.get_existing_reserved_file(SCHOLARLY_HTML)

    def has_abstract_html(self) -> bool:
        return self.has_reserved_file(ABSTRACT_HTML)

    def get_existing_abstract_html(self) -> Path | None:
        return self.get_existing_reserved_file(ABSTRACT_HTML)

    # ----------------------------
    # Write path
    # ----------------------------

    def _scoped_path(self, name: str, *, where: str) -> Path:
        """Return `<bundle>/<name>`, rejecting names that escape the bundle.

        Absolute names and `..` segments that resolve outside the bundle (or onto
        the bundle root itself) raise InvalidArgumentError.
        """
        if not name:
            raise InvalidArgumentError(f"{where}: name must be a non-empty string")
        if Path(name).is_absolute():
            raise InvalidArgumentError(f"{where}: name must be relative to the bundle: {name}")
        path = self._directory / name
        if self._directory.resolve() not in path.resolve().parents:
            raise InvalidArgumentError(f"{where}: name escapes the bundle: {name}", path=path)
        return path

    def write_new_file(self, content: str, filename: str, *, encoding: str = "utf-8") -> Path:
        """Write `content` to a new file under the bundle; never overwrites.

        Raises:
            InvalidArgumentError: filename is empty, absolute, or outside the bundle.
            ConflictError: something already exists at the target path.
            BundleIOError: the write failed. A partially written file is left as-is.
        """
        path = self._scoped_path(filename, where="write_new_file")
        if path.exists():
            raise ConflictError(f"file already exists: {path}", path=path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BundleIOError(f"cannot make directory: {path.parent}", path=path.parent) from e
        try:
            # "x" closes the gap between the exists() check and the open.
            with path.open("x", encoding=encoding, newline="") as f:
                f.write(content)
        except FileExistsError as e:
            raise ConflictError(f"file already exists: {path}", path=path) from e
        except OSError as e:
            raise BundleIOError(f"cannot write file: {path}", path=path) from e
        logger.debug("wrote new file %s", path)
        return path

    def write_results_document(self, subdir_name: str, xml_content: str, *, encoding: str = "utf-8") -> Path:
        """Write `<bundle>/<subdir_name>/results.xml`, replacing any existing content.

        Raises:
            InvalidArgumentError: subdir_name is empty, absolute, or outside the bundle.
            BundleIOError: the subdirectory or the file could not be written.
        """
        results_dir = self._scoped_path(subdir_name, where="write_results_document")
        path = results_dir / RESULTS_XML
        try:
            results_dir.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding=encoding, newline="") as f:
                f.write(xml_content)
        except OSError as e:
            raise BundleIOError(f"cannot write results document: {path}", path=path) from e
        logger.debug("wrote results document %s", path)
        return path

    # ----------------------------
    # Metadata
    # ----------------------------

    def summary(self) -> str:
        lines = [f"dir: {self._directory}"]
        lines.extend(str(p) for p in self.reserved_files)
        return "\n".join(lines) + "\n"

    def get_metadata_element(self) -> ET.Element:
        """Wrap `summary()` in a single `<qsNorma>` element (diagnostic only)."""
        element = ET.Element(METADATA_ELEMENT_NAME)
        element.text = self.summary()
        return element

    def metadata_xml(self) -> str:
        return ET.tostring(self.get_metadata_element(), encoding="unicode")

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return f"BundleManager({str(self._directory)!r})"
