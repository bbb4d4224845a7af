"""Front-matter codec: split, parse, and byte-exact re-serialization of flat YAML headers"""

import json
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Optional

import yaml

from mdstore.errors import FrontMatterError


DELIMITER = "---"
OPEN_RE  = re.compile(r'---[ \t]*\r?\n')
CLOSE_RE = re.compile(r'^---[ \t]*(?:\r?\n|\Z)', re.MULTILINE)
LINE_RE  = re.compile(r'[^\n]*\n')
ENTRY_RE = re.compile(r'^([A-Za-z0-9_][A-Za-z0-9_.-]*)[ \t]*:(?:[ \t]+(.*?))?[ \t]*$')


@dataclass(frozen=True)
class FrontMatterLine:
    """One source line of a front-matter block; key is None for blank and comment lines."""
    key:    Optional[str]
    value:  Optional[str]
    source: str                 # verbatim, including the line ending


def _load_scalar(raw: str, number: int) -> str:
    """Read a single YAML scalar as a string; BaseLoader keeps dates and numbers unconverted."""
    if not raw:
        return ""
    try:
        value = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"line {number}: invalid value {raw!r}: {e}") from e
    if value is None:
        # comment-only values are empty; document markers like "---" stay literal
        return "" if raw.lstrip().startswith("#") else raw.strip()
    if not isinstance(value, str):
        raise FrontMatterError(
            f"line {number}: expected a scalar value, got {type(value).__name__} from {raw!r}"
        )
    return value


def _parse_line(line: str, number: int) -> FrontMatterLine:
    text = line.rstrip("\r\n")
    if not text.strip() or text.lstrip().startswith("#"):
        return FrontMatterLine(key=None, value=None, source=line)
    m = ENTRY_RE.match(text)
    if not m:
        raise FrontMatterError(f"line {number}: expected a flat 'key: value' entry, got {text!r}")
    return FrontMatterLine(key=m.group(1), value=_load_scalar(m.group(2) or "", number), source=line)


def render_scalar(value: str) -> str:
    """Return value as a plain YAML scalar when it reads back unchanged, else double-quoted."""
    value = str(value)
    if "\n" in value or "\r" in value:
        raise FrontMatterError(f"front-matter values must be single-line, got {value!r}")
    if value and value == value.strip():
        try:
            if yaml.load(value, Loader=yaml.BaseLoader) == value:
                return value
        except yaml.YAMLError:
            pass    # not a valid plain scalar; quote it
    return json.dumps(value, ensure_ascii=False)


class FrontMatter(Mapping):
    """Read-only, ordered str -> str mapping parsed from a '---' delimited header.

    The source lines are kept verbatim, so dump() reproduces the parsed block
    byte for byte, including comments, blank lines, quoting and line endings.
    A FrontMatter built with no delimiters stands for a document without a header
    and dumps to the empty string.
    """

    def __init__(self, lines: tuple[FrontMatterLine, ...] = (), opening: str = "", closing: str = ""):
        self._lines = tuple(lines)
        self._opening = opening
        self._closing = closing
        self._values: dict[str, str] = {}
        for line in self._lines:
            if line.key is None:
                continue
            if line.key in self._values:
                raise FrontMatterError(f"duplicate front-matter key: {line.key!r}")
            self._values[line.key] = line.value

    @classmethod
    def parse(cls, block: str) -> "FrontMatter":
        """Parse a complete block, both '---' delimiter lines included."""
        opening = OPEN_RE.match(block)
        closing = CLOSE_RE.search(block, opening.end()) if opening else None
        if closing is None or closing.end() != len(block):
            raise FrontMatterError("front matter must be enclosed in '---' delimiter lines")
        content = block[opening.end():closing.start()]
        lines = tuple(
            _parse_line(line, number)
            for number, line in enumerate(LINE_RE.findall(content), start=2)
        )
        return cls(lines, opening.group(0), closing.group(0))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "FrontMatter":
        """Build a block from an ordered mapping, one 'key: value' line per entry in mapping order."""
        entries = "".join(f"{key}: {render_scalar(value)}\n" for key, value in mapping.items())
        return cls.parse(f"{DELIMITER}\n{entries}{DELIMITER}\n")

    @property
    def has_block(self) -> bool:
        """True when the document carried a delimited header, even an empty one."""
        return bool(self._opening)

    @property
    def lines(self) -> tuple[FrontMatterLine, ...]:
        return self._lines

    def dump(self) -> str:
        """Re-serialize the block exactly as it was read."""
        return self._opening + "".join(line.source for line in self._lines) + self._closing

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"FrontMatter({self._values!r})"


def split_front_matter(text: str) -> tuple[Optional[FrontMatter], str]:
    """Return (front_matter, body); front_matter is None when text has no delimited header."""
    opening = OPEN_RE.match(text)
    if not opening:
        return None, text
    closing = CLOSE_RE.search(text, opening.end())
    if not closing:
        return None, text
    return FrontMatter.parse(text[:closing.end()]), text[closing.end():]
