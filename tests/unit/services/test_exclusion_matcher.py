"""Tests for ExclusionMatcher and ExclusionRule."""

import os

import pytest

from nupkg_builder.exceptions import InvalidPathError
from nupkg_builder.services.exclusion_matcher import ExclusionMatcher, ExclusionRule


class TestExclusionRule:
    """Test compiling a single exclusion rule."""

    def test_pattern_is_resolved_against_working_dir(self, working_dir):
        rule = ExclusionRule.compile("bin/./sub", str(working_dir))

        assert rule.resolved_pattern == os.path.join(str(working_dir), "bin", "sub")
        assert rule.matches(str(working_dir / "bin" / "sub"))

    def test_parent_segments_are_resolved(self, working_dir):
        rule = ExclusionRule.compile("bin/sub/../a.dll", str(working_dir))

        assert rule.matches(str(working_dir / "bin" / "a.dll"))

    @pytest.mark.parametrize("pattern", ["", "  "])
    def test_blank_pattern_raises(self, working_dir, pattern):
        with pytest.raises(InvalidPathError, match="Empty exclusion path!"):
            ExclusionRule.compile(pattern, str(working_dir))


class TestExclusionMatcher:
    """Test OR semantics across exclusion rules."""

    def test_no_rules_excludes_nothing(self, working_dir):
        matcher = ExclusionMatcher()

        assert not matcher.is_excluded(str(working_dir / "bin" / "a.dll"))

    def test_any_rule_excludes(self, working_dir):
        matcher = ExclusionMatcher.from_patterns(["**/*.pdb", "bin/sub"], str(working_dir))

        assert len(matcher.rules) == 2
        assert matcher.is_excluded(str(working_dir / "bin" / "sub"))
        assert matcher.is_excluded(str(working_dir / "bin" / "x.pdb"))
        assert not matcher.is_excluded(str(working_dir / "bin" / "a.dll"))

    def test_relative_paths_are_resolved(self, working_dir, monkeypatch):
        """Candidates are compared in absolute form."""
        matcher = ExclusionMatcher.from_patterns(["bin/sub"], str(working_dir))
        monkeypatch.chdir(working_dir)

        assert matcher.is_excluded(os.path.join("bin", "sub"))
        assert matcher.is_excluded(os.path.join("bin", "sub", "..", "sub"))
