"""Where notes documents are read from.

The filesystem storage mirrors how dependency managers lay out installed
packages: <vendor_dir>/<vendor>/<package>/UPGRADE.md.
"""

from pathlib import Path
from typing import Protocol

from upgrade_notes.configs.app_configs import UPGRADE_NOTES_FILENAME
from upgrade_notes.notes.exceptions import NotesUnavailableError


class NotesStorage(Protocol):
    def read_notes(self, package_name: str) -> str:
        """Return the raw notes text, raise NotesUnavailableError if there is none."""
        ...


class FileSystemNotesStorage:
    def __init__(
        self, vendor_dir: str | Path, notes_filename: str = UPGRADE_NOTES_FILENAME
    ) -> None:
        self.vendor_dir = Path(vendor_dir)
        self.notes_filename = notes_filename

    def notes_path(self, package_name: str) -> Path:
        return self.vendor_dir / package_name / self.notes_filename

    def read_notes(self, package_name: str) -> str:
        path = self.notes_path(package_name)
        # missing, a directory, or not traversable: all are "no notes"
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise NotesUnavailableError(package_name, str(path)) from e


class InMemoryNotesStorage:
    def __init__(self, documents: dict[str, str] | None = None) -> None:
        self._documents: dict[str, str] = dict(documents or {})

    def add(self, package_name: str, text: str) -> None:
        self._documents[package_name] = text

    def read_notes(self, package_name: str) -> str:
        try:
            return self._documents[package_name]
        except KeyError:
            raise NotesUnavailableError(package_name) from None
