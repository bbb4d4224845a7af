"""Shared markdown-it token utilities"""


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def fence_language(token) -> str | None:
    """Return the first word of a fence token's info string, e.g. 'swift' for ```swift, else None."""
    info = (token.info or '').strip().split()
    return info[0] if info else None
