"""Glob pattern compilation for exclusion rules.

Patterns use the usual wildcard language over whole paths:

- ``**`` matches any number of path segments, including none
- ``*`` matches any run of characters inside one segment
- ``?`` matches a single character other than a separator

Both ``/`` and ``\\`` separate segments in patterns and candidate paths.
Matching ignores case on Windows only.
"""

from __future__ import annotations

import os
import re
from typing import Callable

PathPredicate = Callable[[str], bool]

_SEPARATOR = r"[\\/]"
_NOT_SEPARATOR = r"[^\\/]"


def translate_glob(pattern: str) -> str:
    """Translate a glob pattern into an anchored regular expression."""
    parts = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            if pattern.startswith("**", i):
                i += 2
                if i < n and pattern[i] in "\\/":
                    i += 1
                    parts.append(f"(?:.*{_SEPARATOR})?")
                else:
                    parts.append(".*")
                continue
            parts.append(f"{_NOT_SEPARATOR}*")
        elif char == "?":
            parts.append(_NOT_SEPARATOR)
        elif char in "\\/":
            parts.append(_SEPARATOR)
        else:
            parts.append(re.escape(char))
        i += 1
    return "".join(parts) + r"\Z"


def compile_glob(pattern: str, ignore_case: bool = os.name == "nt") -> PathPredicate:
    """Compile ``pattern`` into a predicate over full paths."""
    flags = re.IGNORECASE if ignore_case else 0
    regex = re.compile(translate_glob(pattern), flags)

    def is_match(path: str) -> bool:
        return regex.match(path) is not None

    return is_match
