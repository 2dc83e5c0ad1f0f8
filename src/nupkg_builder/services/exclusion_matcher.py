"""Exclusion rules for package payload files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..exceptions import InvalidPathError
from .globbing import PathPredicate, compile_glob
from .path_normalizer import normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionRule:
    """One exclusion pattern compiled against the working directory.

    Attributes:
        pattern: Pattern string as supplied by the caller
        resolved_pattern: Pattern joined to the working directory and normalized
        predicate: Compiled matcher over absolute paths
    """

    pattern: str
    resolved_pattern: str
    predicate: PathPredicate

    def matches(self, path: str) -> bool:
        return self.predicate(path)

    @classmethod
    def compile(cls, pattern: str, working_dir: str) -> "ExclusionRule":
        """Compile ``pattern`` relative to ``working_dir``.

        Raises:
            InvalidPathError: If the pattern is blank
        """
        if not pattern or not pattern.strip():
            raise InvalidPathError("Empty exclusion path!", pattern)
        resolved = normalize_path(os.path.join(working_dir, pattern), os.sep)
        return cls(pattern=pattern, resolved_pattern=resolved, predicate=compile_glob(resolved))


class ExclusionMatcher:
    """Decides whether a file-system path is excluded by any rule."""

    def __init__(self, rules: Sequence[ExclusionRule] = ()) -> None:
        self._rules: Tuple[ExclusionRule, ...] = tuple(rules)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str], working_dir: str) -> "ExclusionMatcher":
        rules = [ExclusionRule.compile(pattern, working_dir) for pattern in patterns]
        return cls(rules)

    @property
    def rules(self) -> Tuple[ExclusionRule, ...]:
        return self._rules

    def is_excluded(self, path: str) -> bool:
        """Return True if the absolute form of ``path`` matches any rule."""
        if not self._rules:
            return False
        full_path = os.path.abspath(path)
        for rule in self._rules:
            if rule.matches(full_path):
                logger.debug(f"Excluding {full_path} (matched '{rule.pattern}')")
                return True
        return False
