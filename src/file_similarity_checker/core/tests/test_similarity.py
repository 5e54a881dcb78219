"""Tests for edit-distance similarity."""

import pytest

from ..similarity import edit_distance, name_similarity


class TestEditDistance:
    """Test cases for edit_distance."""

    def test_classic_examples(self) -> None:
        """Test distances with insertions, deletions and substitutions."""
        assert edit_distance("kitten", "sitting") == 3
        assert edit_distance("flaw", "lawn") == 2
        assert edit_distance("abc", "abc") == 0

    def test_empty_strings(self) -> None:
        """Test distance against the empty string."""
        assert edit_distance("", "") == 0
        assert edit_distance("abc", "") == 3
        assert edit_distance("", "abcd") == 4

    def test_substitution_costs_one(self) -> None:
        """Test that a substitution is a single edit."""
        assert edit_distance("reportv1", "reportv2") == 1


class TestNameSimilarity:
    """Test cases for name_similarity."""

    def test_identical_names(self) -> None:
        """Test that equal names score 1.0."""
        assert name_similarity("hello", "hello") == 1.0
        assert name_similarity("test.doc", "test.doc") == 1.0

    def test_equal_after_normalization(self) -> None:
        """Test that case and delimiters do not affect the score."""
        assert name_similarity("Report-Final.PDF", "report_final.pdf") == 1.0

    def test_one_substitution(self) -> None:
        """Test the normalized score for a single changed character."""
        assert name_similarity("report_v1", "report_v2") == pytest.approx(0.875)
        assert name_similarity("hello", "hallo") == pytest.approx(0.8)

    def test_extension_counts_towards_length(self) -> None:
        """Test that the whole filename, extension included, is compared."""
        assert name_similarity("report_v1.pdf", "report_v2.pdf") == pytest.approx(10 / 11)
        assert name_similarity("document.txt", "document1.txt") > 0.9

    def test_unrelated_names(self) -> None:
        """Test that different names score low."""
        assert name_similarity("completely.txt", "different.txt") < 0.5
        assert name_similarity("abc", "xyz") == 0.0

    def test_both_empty_after_normalization(self) -> None:
        """Test that two names without alphanumerics are identical."""
        assert name_similarity("", "") == 1.0
        assert name_similarity("___", "--") == 1.0

    def test_one_side_empty(self) -> None:
        """Test that an empty normalized name scores 0.0 against a real one."""
        assert name_similarity("", "abc") == 0.0
        assert name_similarity("...", "abc") == 0.0

    @pytest.mark.parametrize(
        "name1,name2",
        [
            ("report_v1.pdf", "report_v2.pdf"),
            ("kitten", "sitting"),
            ("a", "abcdef"),
            ("IMG_0001.JPG", "img_0001 (copy).jpg"),
            ("", "x"),
        ],
    )
    def test_symmetry(self, name1: str, name2: str) -> None:
        """Test that argument order does not matter."""
        assert name_similarity(name1, name2) == name_similarity(name2, name1)

    @pytest.mark.parametrize("name", ["a", "Readme.md", "x_y-z", "", "  "])
    def test_reflexivity(self, name: str) -> None:
        """Test that any name is identical to itself."""
        assert name_similarity(name, name) == 1.0

    def test_score_is_one_only_for_equal_normalized_names(self) -> None:
        """Test that any difference after normalization drops below 1.0."""
        assert name_similarity("abc", "abcd") < 1.0
        assert name_similarity("aBc", "A-b-C") == 1.0
