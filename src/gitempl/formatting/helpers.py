"""Small string helpers available to templates."""

import re

_SPACE_RE = re.compile(r"\s+")
_NON_ANCHOR_RE = re.compile(r"[^0-9a-z-]+")


def add(a: int, b: int) -> int:
    return a + b


def markdown_header_link(text: str) -> str:
    """Turn a heading into the anchor markdown renderers generate for it.

    ``"Bug Fixes (v2)"`` becomes ``"bug-fixes-v2"``.
    """
    text = text.lower()
    text = _SPACE_RE.sub("-", text)
    return _NON_ANCHOR_RE.sub("", text)


def title(text: str) -> str:
    """Upper-case the first character of the first word only.

    Unlike ``str.title`` the rest of the string is left as is, so
    ``"add API client"`` becomes ``"Add API client"``.
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]
