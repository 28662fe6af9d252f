"""Tests for docx_easy fonts module."""

import pytest

from docx_easy.exceptions import InvalidArgumentError, TypeMismatchError
from docx_easy.fonts import CHINESE_FONT_SIZE_MAP, font_size_names, parse_font_size, resolve_font_size


class TestResolveFontSize:
    """Tests for resolve_font_size function."""

    def test_numeric(self):
        """Test numbers are used as points."""
        assert resolve_font_size(12) == 12
        assert resolve_font_size(10.5) == 10.5

    def test_numeric_string(self):
        """Test numeric strings are parsed."""
        assert resolve_font_size("12") == 12
        assert resolve_font_size(" 10.5 ") == 10.5

    def test_named_sizes(self):
        """Test Chinese font size names."""
        assert resolve_font_size("小四") == 12
        assert resolve_font_size("四号") == 14
        assert resolve_font_size("三号") == 16
        assert resolve_font_size("五号") == 10.5

    def test_all_named_sizes(self):
        """Test every table entry resolves to its value."""
        for name, size in CHINESE_FONT_SIZE_MAP.items():
            assert resolve_font_size(name) == size

    def test_default(self):
        """Test default is 小四."""
        assert resolve_font_size() == 12

    def test_unknown_name_lists_valid_names(self):
        """Test unknown names raise with the valid names in the message."""
        with pytest.raises(InvalidArgumentError) as excinfo:
            resolve_font_size("unknown-name")
        message = str(excinfo.value)
        for name in CHINESE_FONT_SIZE_MAP:
            assert name in message

    def test_empty_string(self):
        """Test empty string is an unknown name."""
        with pytest.raises(InvalidArgumentError):
            resolve_font_size("")

    def test_non_finite_string_is_not_numeric(self):
        """Test 'inf' is looked up as a name and rejected."""
        with pytest.raises(InvalidArgumentError):
            resolve_font_size("inf")

    def test_type_mismatch(self):
        """Test values that are neither numbers nor strings."""
        with pytest.raises(TypeMismatchError):
            resolve_font_size(None)
        with pytest.raises(TypeMismatchError):
            resolve_font_size({"size": 12})
        with pytest.raises(TypeError):
            resolve_font_size(True)

    @pytest.mark.parametrize("value", [0, -3, "-3", "0", float("inf")])
    def test_non_positive_sizes_rejected(self, value):
        """Test zero, negative and infinite sizes raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            resolve_font_size(value)

    def test_sequence_preserves_order(self):
        """Test a sequence resolves element-wise, in order."""
        result = resolve_font_size([11, "14", "四号", "小初"])
        assert result == [11, 14, 14, 36]
        assert result == [resolve_font_size(v) for v in (11, "14", "四号", "小初")]

    def test_sequence_with_bad_item(self):
        """Test one bad item fails the whole sequence."""
        with pytest.raises(InvalidArgumentError):
            resolve_font_size([12, "nope"])

    def test_custom_mapping(self):
        """Test an explicitly passed mapping."""
        mapping = {"body": 11, "title": 20}
        assert resolve_font_size("title", mapping) == 20
        with pytest.raises(InvalidArgumentError):
            resolve_font_size("小四", mapping)


class TestFontSizeTable:
    """Tests for the named font size table."""

    def test_read_only(self):
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            CHINESE_FONT_SIZE_MAP["巨号"] = 72

    def test_names_ordered_by_size(self):
        """Test names are listed from largest to smallest."""
        names = font_size_names()
        assert names[0] == "初号"
        assert names[-1] == "八号"
        assert len(names) == 16

    def test_parse_font_size_returns_float(self):
        """Test parse_font_size returns floats."""
        assert isinstance(parse_font_size(12), float)
        assert isinstance(parse_font_size("八号"), float)
