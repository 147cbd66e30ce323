"""
Unit tests for announcer script formatting.
"""

import pytest

from yomiage.config import GenerationConfig
from yomiage.script import answer_script, meta_script, problem_script


class TestMetaScript:
    """Tests for meta_script function."""

    def test_meta_when_no_subtractions_then_addition(self):
        config = GenerationConfig(min_digit=1, max_digit=2, length=7, subtractions=0)
        assert meta_script(config) == "1桁から2桁、7口、加算です。ねがいましては。"

    def test_meta_when_subtractions_then_mixed(self):
        config = GenerationConfig(min_digit=7, max_digit=12, length=10, subtractions=3)
        assert meta_script(config) == "7桁から12桁、10口、加減算です。ねがいましては。"


class TestProblemScript:
    """Tests for problem_script function."""

    def test_problem_when_additions_only_then_no_markers(self):
        assert problem_script([12, 34, 5]) == "12円なり、34円なり、5円では。"

    def test_problem_when_sign_changes_then_markers(self):
        assert problem_script([382, -154, 38]) == "382円なり、引いては154円なり、加えて38円では。"

    def test_problem_when_consecutive_subtractions_then_single_marker(self):
        assert problem_script([90, -10, -20, 5]) == "90円なり、引いては10円なり、20円なり、加えて5円では。"

    def test_problem_when_interior_equals_last_then_only_last_closes(self):
        """The closing phrase depends on position, not on the value."""
        assert problem_script([7, 3, 7]) == "7円なり、3円なり、7円では。"

    def test_problem_when_single_term_then_closes(self):
        assert problem_script([42]) == "42円では。"

    def test_problem_when_first_negative_then_subtract_marker(self):
        assert problem_script([-3, 4]) == "引いては3円なり、加えて4円では。"

    def test_problem_when_large_numbers_then_no_separators(self):
        assert problem_script([123456789012]) == "123456789012円では。"


class TestAnswerScript:
    """Tests for answer_script function."""

    @pytest.mark.parametrize(
        "answer, expected",
        [
            (182445, "その答え、182445円です。"),
            (0, "その答え、0円です。"),
            (-12, "その答え、マイナス12円です。"),
        ],
    )
    def test_answer_script(self, answer, expected):
        assert answer_script(answer) == expected
