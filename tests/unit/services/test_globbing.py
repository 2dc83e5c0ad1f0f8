"""Tests for glob pattern compilation."""

import pytest

from nupkg_builder.services.globbing import compile_glob, translate_glob


class TestCompileGlob:
    """Test compiled glob predicates over full paths."""

    def test_literal_pattern_matches_exact_path(self):
        is_match = compile_glob("/w/bin/sub", ignore_case=False)

        assert is_match("/w/bin/sub")
        assert not is_match("/w/bin/sub/b.txt")
        assert not is_match("/w/bin/subway")

    def test_single_star_stays_in_segment(self):
        is_match = compile_glob("/w/bin/*", ignore_case=False)

        assert is_match("/w/bin/a.dll")
        assert not is_match("/w/bin/sub/b.txt")

    def test_double_star_crosses_segments(self):
        is_match = compile_glob("/w/bin/**", ignore_case=False)

        assert is_match("/w/bin/a.dll")
        assert is_match("/w/bin/sub/b.txt")

    def test_double_star_slash_matches_zero_or_more_directories(self):
        is_match = compile_glob("/w/**/*.pdb", ignore_case=False)

        assert is_match("/w/a.pdb")
        assert is_match("/w/x/y/a.pdb")
        assert not is_match("/w/a.dll")

    def test_question_mark_matches_one_character(self):
        is_match = compile_glob("/w/a?.txt", ignore_case=False)

        assert is_match("/w/ab.txt")
        assert not is_match("/w/abc.txt")
        assert not is_match("/w/a/.txt")

    def test_regex_characters_are_literal(self):
        is_match = compile_glob("/w/a.txt", ignore_case=False)

        assert not is_match("/w/aXtxt")

    def test_separators_are_interchangeable(self):
        is_match = compile_glob("C:\\w\\bin", ignore_case=False)

        assert is_match("C:\\w\\bin")
        assert is_match("C:/w/bin")

    @pytest.mark.parametrize("ignore_case,expected", [(True, True), (False, False)])
    def test_case_sensitivity(self, ignore_case, expected):
        assert compile_glob("/W/BIN", ignore_case=ignore_case)("/w/bin") is expected

    def test_translate_is_anchored(self):
        assert translate_glob("a").endswith(r"\Z")
