"""Location path helpers.

Paths follow the JSONPath-like notation used in assertion messages:

- the root document is ``$``
- an object member is ``.key``, or ``['key']`` when the key is not a plain name
- an array element is ``[index]``

Every path is a single line: line breaks inside keys are escaped.
"""

from __future__ import annotations

ROOT_PATH = "$"

_SPECIAL_CHARACTERS = frozenset(".'\"[]()$@*,")


def single_line(text: str) -> str:
    """Escape carriage returns and newlines so ``text`` fits on one line."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def _is_plain_name(key: str) -> bool:
    if not key:
        return False
    return not any(ch in _SPECIAL_CHARACTERS or ch.isspace() for ch in key)


def member_path(parent: str, key: str) -> str:
    """Return the path of member ``key`` inside the object at ``parent``."""
    if _is_plain_name(key):
        return f"{parent}.{key}"
    escaped = single_line(key.replace("\\", "\\\\").replace("'", "\\'"))
    return f"{parent}['{escaped}']"


def index_path(parent: str, index: int) -> str:
    """Return the path of element ``index`` inside the array at ``parent``."""
    return f"{parent}[{index}]"


def is_root(path: str) -> bool:
    """Return True for the root marker or an empty path."""
    return path in ("", ROOT_PATH)
