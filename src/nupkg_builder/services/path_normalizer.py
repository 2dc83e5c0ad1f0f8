"""Path normalization and archive name escaping.

Two concerns live here:

- ``normalize_path`` canonicalizes a file-system path written in any
  convention (Windows drive, Unix root, or relative) by resolving ``.`` and
  ``..`` segments, keeping the drive or root marker as an opaque prefix.
- ``ensure_valid_name`` / ``ensure_valid_target_name`` percent-escape archive
  target names so every entry is addressable as a relative part URI.

Some characters that RFC 2396 reserves, and that a plain data-string escaper
would therefore encode, are legal and meaningful in folder names. ``@`` is the
concrete case: npm packages bundled into a NuGet package use it to separate
versions in folder names, so it is protected from the escaper and restored
afterwards.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple
from urllib.parse import quote, unquote

from ..exceptions import InvalidPathError

WINDOWS_DRIVE_PATTERN = re.compile(r"^\w:\\")
SEGMENT_SPLIT_PATTERN = re.compile(r"[\\/]")

# (reserved character, sentinel) pairs shielded from percent-encoding
PROBLEM_CHARS: Tuple[Tuple[str, str], ...] = (("@", "~~at~~"),)

# Characters left literal in a relative URI path segment (RFC 3986 pchar minus unreserved)
URI_SEGMENT_SAFE = "!$&'()*+,;=:@"


def split_root(path: str) -> Tuple[str, str]:
    """Split ``path`` into its drive/root prefix and the remainder."""
    if WINDOWS_DRIVE_PATTERN.match(path):
        return path[:3], path[3:]
    if path.startswith("/"):
        return "/", path[1:]
    return "", path


def reduce_segments(segments: Iterable[str]) -> List[str]:
    """Resolve ``.`` and ``..`` in an ordered sequence of path segments.

    Normal segments are pushed, ``.`` and empty segments are skipped and ``..``
    pops the previous segment. Popping an empty stack is a no-op, so ``..``
    can never climb above the start of the sequence.
    """
    stack: List[str] = []
    for segment in segments:
        if segment == "..":
            if stack:
                stack.pop()
        elif segment in (".", ""):
            continue
        else:
            stack.append(segment)
    return stack


def normalize_path(path: str, separator: str = "/") -> str:
    """Canonicalize ``path``, joining segments with ``separator``.

    Args:
        path: Relative, Unix-absolute or Windows drive-absolute path
        separator: Separator used to join the resolved segments

    Returns:
        The prefix (``"C:\\"``, ``"/"`` or nothing) followed by the resolved segments

    Raises:
        InvalidPathError: If ``path`` is empty or whitespace only
    """
    if not path or not path.strip():
        raise InvalidPathError("Empty exclusion path!", path)

    prefix, remainder = split_root(path)
    segments = reduce_segments(SEGMENT_SPLIT_PATTERN.split(remainder))
    return prefix + separator.join(segments)


def _fake_escape_problem_chars(source: str) -> str:
    for problem, fake_escape in PROBLEM_CHARS:
        source = source.replace(problem, fake_escape)
    return source


def _unfake_escape_problem_chars(source: str) -> str:
    for problem, fake_escape in PROBLEM_CHARS:
        source = source.replace(fake_escape, problem)
    return source


def _escape_target(target: str) -> str:
    parts = target.replace("\\", "/").split("/")
    return "/".join(quote(part, safe="") for part in parts)


def _canonicalize_relative_uri(escaped_target: str) -> str:
    # Unescape then re-escape each segment so equivalent encodings collapse to one form
    return "/".join(quote(unquote(part), safe=URI_SEGMENT_SAFE) for part in escaped_target.split("/"))


def ensure_valid_name(target: str) -> str:
    """Percent-escape every segment of ``target`` for use as an archive path.

    Backslashes become forward slashes; ``@`` stays literal.
    """
    protected = _fake_escape_problem_chars(target)
    escaped = _escape_target(protected)
    restored = _unfake_escape_problem_chars(escaped)
    return _canonicalize_relative_uri(restored)


def ensure_valid_target_name(target: str) -> str:
    """Escape a directory target and terminate it with ``/``.

    Empty targets and ``.`` map to the archive root (``""``). Dot segments are
    resolved, and targets are always archive-relative.
    """
    if not target or target == ".":
        return ""
    segments = reduce_segments(ensure_valid_name(target).split("/"))
    if not segments:
        return ""
    return "/".join(segments) + "/"
