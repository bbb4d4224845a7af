from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from mdstore.core.models import Document
from mdstore.errors import NotFound
from mdstore.store.base import DocumentStore, normalize_path


@dataclass
class MemoryStore(DocumentStore):
    files: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.files = {normalize_path(p): text for p, text in self.files.items()}

    def list(self) -> list[str]:
        return sorted(self.files)

    def read(self, path: str | PurePath) -> Document:
        key = normalize_path(path)
        if key not in self.files:
            raise NotFound(key)
        return Document.from_text(key, self.files[key])
