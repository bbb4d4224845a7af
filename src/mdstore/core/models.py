"""Document model, derived post properties, and the public summary contract"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel

from mdstore.core import body as body_utils
from mdstore.core.body import DEFAULT_PRESET, CodeSample, Heading
from mdstore.core.frontmatter import FrontMatter, split_front_matter
from mdstore.core.utils.dates import parse_post_date, split_dated_name
from mdstore.core.utils.hashing import sha256
from mdstore.core.utils.slug import slugify
from mdstore.errors import FrontMatterError


logger = logging.getLogger(__name__)

DRAFTS_DIR = '_drafts'


class DocumentInfo(BaseModel):
    """Public summary contract for a single document, used for JSON output."""
    path:         str
    slug:         str
    title:        Optional[str] = None
    layout:       Optional[str] = None
    date:         Optional[datetime] = None
    categories:   list[str] = []
    draft:        bool = False
    hash:         str
    front_matter: dict[str, str] = {}
    languages:    list[str] = []    # distinct code sample languages, first-seen order


@dataclass(frozen=True)
class Document:
    """A stored text document: front-matter header plus an opaque body."""
    path:         str               # store-relative POSIX path, unique within a store
    front_matter: FrontMatter = field(default_factory=FrontMatter)
    body:         str = ''

    @classmethod
    def from_text(cls, path: str, text: str) -> "Document":
        """Split text into front matter and body; malformed headers raise FrontMatterError naming path."""
        try:
            front_matter, body = split_front_matter(text)
        except FrontMatterError as e:
            raise FrontMatterError(f"{path}: {e}") from e
        if front_matter is None:
            front_matter = FrontMatter()
        return cls(path=path, front_matter=front_matter, body=body)

    @property
    def text(self) -> str:
        """The document as stored: header block followed by body."""
        return self.front_matter.dump() + self.body

    @property
    def hash(self) -> str:
        return sha256(self.text)

    @property
    def title(self) -> str | None:
        return self.front_matter.get('title')

    @property
    def layout(self) -> str | None:
        return self.front_matter.get('layout')

    @property
    def date(self) -> str | None:
        """Raw front-matter date string."""
        return self.front_matter.get('date')

    @property
    def published_at(self) -> datetime | None:
        """Front-matter date, falling back to a YYYY-MM-DD- filename prefix."""
        if self.date is not None:
            parsed = parse_post_date(self.date)
            if parsed is None:
                logger.warning("Unparsable date %r in %s", self.date, self.path)
            return parsed
        prefix, _ = split_dated_name(PurePosixPath(self.path).stem)
        return parse_post_date(prefix) if prefix else None

    @property
    def categories(self) -> list[str]:
        """Whitespace-separated 'categories' (or 'category') value."""
        value = self.front_matter.get('categories', self.front_matter.get('category', ''))
        return value.split()

    @property
    def slug(self) -> str:
        if self.front_matter.get('slug'):
            return self.front_matter['slug']
        _, name = split_dated_name(PurePosixPath(self.path).stem)
        return slugify(name)

    @property
    def is_draft(self) -> bool:
        if DRAFTS_DIR in PurePosixPath(self.path).parts[:-1]:
            return True
        return self.front_matter.get('published', '').strip().lower() == 'false'

    @property
    def body_offset(self) -> int:
        """Number of file lines before the body starts."""
        return self.front_matter.dump().count('\n')

    def headings(self, preset: str = DEFAULT_PRESET) -> list[Heading]:
        """Body headings with file-relative line numbers."""
        return body_utils.headings(self.body, preset, offset=self.body_offset)

    def code_samples(self, preset: str = DEFAULT_PRESET) -> list[CodeSample]:
        """Fenced code samples with file-relative line numbers."""
        return body_utils.code_samples(self.body, preset, offset=self.body_offset)

    def info(self, preset: str = DEFAULT_PRESET) -> DocumentInfo:
        languages = [s.language for s in self.code_samples(preset) if s.language]
        return DocumentInfo(
            path=self.path,
            slug=self.slug,
            title=self.title,
            layout=self.layout,
            date=self.published_at,
            categories=self.categories,
            draft=self.is_draft,
            hash=self.hash,
            front_matter=dict(self.front_matter),
            languages=list(dict.fromkeys(languages)),
        )
