"""Bundle error taxonomy (v0.1).

Every failure is fatal and surfaced at the point of detection. Each class also
subclasses the closest builtin so callers can catch either form:

- InvalidArgumentError (ValueError): null/empty path or name
- MissingResourceError (FileNotFoundError): directory or required file absent
- InvalidStateError (ValueError): path exists but is the wrong kind
- ConflictError (FileExistsError): create-only write onto an existing path
- BundleIOError (OSError): underlying read/write/delete/mkdir failure

A missing *optional* reserved file is not an error; accessors return None.
"""

from __future__ import annotations

from pathlib import Path


class BundleError(Exception):
    """Base class for bundle failures. `kind` names the taxonomy entry."""

    kind = "bundle-error"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else self.kind


class InvalidArgumentError(BundleError, ValueError):
    kind = "invalid-argument"


class MissingResourceError(BundleError, FileNotFoundError):
    kind = "missing-resource"


class InvalidStateError(BundleError, ValueError):
    kind = "invalid-state"


class ConflictError(BundleError, FileExistsError):
    kind = "conflict"


class BundleIOError(BundleError, OSError):
    kind = "io-failure"
