"""Document store backed by a directory of markdown files"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath, PurePosixPath

from mdstore.config import Settings
from mdstore.core.models import DRAFTS_DIR, Document
from mdstore.errors import NotFound, UnreadableDocument
from mdstore.store.base import DocumentStore, normalize_path


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown', '.mdx'}
SKIPPED_DIRS = {'_site'}          # generator output


class FileSystemStore(DocumentStore):
    """Documents are the markdown files under root, addressed by root-relative POSIX path.

    list() and read() share one membership check, so every listed path is
    readable and every other path (traversal, directories, hidden or skipped
    files, other suffixes) raises NotFound.
    """

    def __init__(self, root: str | Path, include_drafts: bool = True):
        self.root = Path(root)
        self.include_drafts = include_drafts

    def __repr__(self) -> str:
        return f"FileSystemStore(root={str(self.root)!r}, include_drafts={self.include_drafts})"

    def _is_document(self, rel: PurePosixPath) -> bool:
        parts = rel.parts
        if not parts or rel.is_absolute():
            return False
        if any(part.startswith('.') for part in parts):     # hidden entries and '..'
            return False
        if SKIPPED_DIRS.intersection(parts[:-1]):
            return False
        if not self.include_drafts and DRAFTS_DIR in parts[:-1]:
            return False
        if rel.suffix.lower() not in MD_EXTENSIONS:
            return False
        return (self.root / rel).is_file()

    def list(self) -> list[str]:
        if not self.root.is_dir():
            logger.debug("Store root %s does not exist; no documents", self.root)
            return []
        paths = sorted(
            rel.as_posix()
            for rel in (PurePosixPath(p.relative_to(self.root).as_posix()) for p in self.root.rglob('*'))
            if self._is_document(rel)
        )
        logger.debug("Discovered %d document(s) under %s", len(paths), self.root)
        return paths

    def read(self, path: str | PurePath) -> Document:
        key = normalize_path(path)
        rel = PurePosixPath(key)
        if not self._is_document(rel):
            raise NotFound(key)
        try:
            # newline='' keeps CRLF intact so Document.text matches the file byte for byte
            with (self.root / rel).open(encoding='utf-8', newline='') as f:
                text = f.read()
        except FileNotFoundError as e:
            raise NotFound(key) from e
        except UnicodeDecodeError as e:
            raise UnreadableDocument(key, str(e)) from e
        logger.debug("Read %s (%d chars)", key, len(text))
        return Document.from_text(key, text)


def open_store(settings: Settings) -> FileSystemStore:
    """Build the configured file-system store."""
    return FileSystemStore(Path(settings.content_dir), include_drafts=settings.include_drafts)
