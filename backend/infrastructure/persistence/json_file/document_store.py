"""Whole-file JSON document shared by the JSON-file repositories.

A store file is one object whose keys each hold a list of documents::

    {"recipes": [...]}
    {"users": [...], "sessions": [...]}

A missing file reads as every collection empty.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class JsonStorageError(Exception):
    """Raised when a store file cannot be read or written."""

    label = "JSON store"

    def __init__(self, path: Path, message: str, original_error: Optional[Exception] = None):
        super().__init__(f"{self.label} {path}: {message}")
        self.path = path
        self.original_error = original_error


class JsonDocumentStore:
    """Read and rewrite a JSON file holding named document lists.

    Args:
        path: File location, parent directories are created on write
        collections: Keys of the lists kept in the file
        error_class: JsonStorageError subclass raised on failures
    """

    def __init__(
        self,
        path: Union[str, Path],
        collections: tuple[str, ...],
        error_class: type[JsonStorageError] = JsonStorageError,
    ) -> None:
        self.path = Path(path)
        self.collections = collections
        self.error_class = error_class

    def read(self) -> dict[str, list[Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(
                "%s file not found: %s. Using empty store.", self.error_class.label, self.path
            )
            return {name: [] for name in self.collections}
        except OSError as e:
            raise self.error_class(self.path, "cannot be read", e) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise self.error_class(self.path, "is not valid JSON", e) from e

        if not isinstance(data, dict):
            raise self.error_class(self.path, "top-level value must be an object")

        collections = {}
        for name in self.collections:
            documents = data.get(name) or []
            if not isinstance(documents, list):
                raise self.error_class(self.path, f"{name!r} must be a list")
            collections[name] = documents
        return collections

    def write(self, collections: dict[str, list[Any]]) -> None:
        document = {name: collections.get(name, []) for name in self.collections}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise self.error_class(self.path, "cannot be written", e) from e
