"""Read-only inspection of a document body: headings and fenced code samples"""

from functools import lru_cache
from typing import Optional

from markdown_it import MarkdownIt
from pydantic import BaseModel

from mdstore.core.utils.tokens import fence_language, heading_level


DEFAULT_PRESET = 'gfm-like'


class Heading(BaseModel):
    """A heading in the body, in source order."""
    level: int
    text:  str
    line:  int                      # 1-based


class CodeSample(BaseModel):
    """A fenced code block and its language tag."""
    language: Optional[str] = None  # None for a bare ``` fence
    code:     str
    line:     int                   # 1-based line of the opening fence


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def tokenize(body: str, preset: str = DEFAULT_PRESET) -> list:
    """Return the markdown-it block token stream for body."""
    return _make_parser(preset).parse(body)


def headings(body: str, preset: str = DEFAULT_PRESET, offset: int = 0) -> list[Heading]:
    """Return ATX and setext headings; line numbers are shifted by offset."""
    tokens = tokenize(body, preset)
    result = []
    for i, tok in enumerate(tokens):
        level = heading_level(tok)
        if level is None:
            continue
        inline = tokens[i + 1] if i + 1 < len(tokens) else None
        text = inline.content.strip() if inline is not None and inline.type == 'inline' else ''
        result.append(Heading(level=level, text=text, line=tok.map[0] + 1 + offset))
    return result


def code_samples(body: str, preset: str = DEFAULT_PRESET, offset: int = 0) -> list[CodeSample]:
    """Return fenced code blocks (``` or ~~~); indented code blocks carry no language and are skipped."""
    return [
        CodeSample(language=fence_language(tok), code=tok.content, line=tok.map[0] + 1 + offset)
        for tok in tokenize(body, preset)
        if tok.type == 'fence'
    ]
