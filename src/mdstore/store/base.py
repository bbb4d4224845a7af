from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import PurePath, PurePosixPath

from mdstore.core.models import Document


def normalize_path(path: str | PurePath) -> str:
    """Return path as a POSIX string with '.' segments and duplicate slashes collapsed."""
    return PurePosixPath(PurePath(path).as_posix()).as_posix()


class DocumentStore(ABC):
    """Read-only collection of documents addressed by store-relative path."""

    @abstractmethod
    def list(self) -> list[str]:
        """Return sorted, unique document paths."""
        raise NotImplementedError

    @abstractmethod
    def read(self, path: str | PurePath) -> Document:
        """Return the Document at path; raise NotFound for paths not in list()."""
        raise NotImplementedError

    def documents(self) -> Iterator[Document]:
        for path in self.list():
            yield self.read(path)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, PurePath)):
            return False
        return normalize_path(path) in self.list()

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self.list())
