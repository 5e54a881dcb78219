"""Tests for filename normalization."""

from ..normalizer import normalize_name


class TestNormalizeName:
    """Test cases for normalize_name."""

    def test_lowercases_and_strips_delimiters(self) -> None:
        """Test that case is folded and punctuation is dropped."""
        assert normalize_name("AI_Usage.epub") == "aiusageepub"
        assert normalize_name("Report-Final.pdf") == "reportfinalpdf"
        assert normalize_name("file name.txt") == "filenametxt"
        assert normalize_name("FILE-name.TXT") == "filenametxt"

    def test_delimiters_are_removed_not_replaced(self) -> None:
        """Test that underscores and dashes normalize identically."""
        assert normalize_name("report_v1") == normalize_name("report-v1") == "reportv1"
        assert normalize_name("a - b") == "ab"

    def test_empty_input(self) -> None:
        """Test that empty input yields empty output."""
        assert normalize_name("") == ""

    def test_only_punctuation(self) -> None:
        """Test names without any letters or digits."""
        assert normalize_name("___.-- ") == ""

    def test_non_ascii_characters_are_dropped(self) -> None:
        """Test that only ASCII letters and digits survive."""
        assert normalize_name("café_02.txt") == "caf02txt"
        assert normalize_name("写真2023.jpg") == "2023jpg"

    def test_digits_are_kept(self) -> None:
        """Test that digits survive normalization."""
        assert normalize_name("IMG_0042.JPG") == "img0042jpg"
