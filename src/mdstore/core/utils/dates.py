"""Post date parsing for Jekyll-style front matter and filenames"""

import re
from datetime import datetime


DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",     # 2017-03-09 01:13:30 -0500
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)
DATED_NAME_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})-(.+)$')


def parse_post_date(value: str) -> datetime | None:
    """Parse a front-matter date string; returns None when no known format matches."""
    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def split_dated_name(stem: str) -> tuple[str | None, str]:
    """Split '2017-03-09-my-post' into ('2017-03-09', 'my-post'); undated stems give (None, stem)."""
    m = DATED_NAME_RE.match(stem)
    if m:
        return m.group(1), m.group(2)
    return None, stem
