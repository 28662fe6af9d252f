"""Tests for docx_easy layout module."""

import pytest
from docx import Document
from docx.enum.section import WD_ORIENT, WD_SECTION_START

from docx_easy.exceptions import InvalidArgumentError
from docx_easy.layout import (
    PAPER_SIZES,
    PageLayout,
    a3_cover_layout,
    a4_cover_layout,
    b5_cover_layout,
    cover_layout,
    page_layout,
)

MARGINS = ("top", "bottom", "left", "right", "header", "footer")


class TestPaperLayouts:
    """Tests for the A3, A4 and B5 layout builders."""

    @pytest.mark.parametrize(
        ("builder", "width", "height"),
        [
            (a4_cover_layout, 8.27, 11.69),
            (b5_cover_layout, 6.93, 9.84),
            (a3_cover_layout, 11.7, 16.5),
        ],
    )
    def test_defaults(self, builder, width, height):
        """Test standard paper sizes and zero margins."""
        layout = builder()
        assert layout.page_width == width
        assert layout.page_height == height
        assert layout.page_orient == "portrait"
        assert layout.section_type == "nextPage"
        for name in MARGINS:
            assert getattr(layout, name) == 0

    def test_overrides(self):
        """Test margins, orientation and section type can be overridden."""
        layout = a4_cover_layout(top=1, left=0.5, page_orient="landscape", section_type="continuous")
        assert layout.top == 1
        assert layout.left == 0.5
        assert layout.page_orient == "landscape"
        assert layout.section_type == "continuous"
        assert layout.page_width == 8.27

    def test_cover_layout_by_name(self):
        """Test paper lookup by name."""
        assert cover_layout("B5") == b5_cover_layout()
        assert cover_layout("A3", bottom=2).bottom == 2

    def test_unknown_paper(self):
        """Test unknown paper name raises."""
        with pytest.raises(InvalidArgumentError):
            cover_layout("Letter")

    def test_paper_sizes_table(self):
        """Test the paper size table."""
        assert set(PAPER_SIZES) == {"A3", "A4", "B5"}


class TestPageLayout:
    """Tests for page_layout and PageLayout."""

    def test_defaults(self):
        """Test custom layout defaults."""
        layout = page_layout()
        assert layout == PageLayout()
        assert layout.page_width is None

    def test_margins_are_independent(self):
        """Test every margin is set independently."""
        layout = page_layout(8, 10, top=1, bottom=2, left=3, right=4, header=5, footer=6)
        assert [getattr(layout, name) for name in MARGINS] == [1, 2, 3, 4, 5, 6]

    def test_no_dimension_validation(self):
        """Test implausible dimensions are accepted."""
        assert page_layout(-1, 0).page_width == -1

    def test_bad_orientation(self):
        """Test unknown orientation raises."""
        with pytest.raises(InvalidArgumentError):
            page_layout(page_orient="sideways")

    def test_bad_section_type(self):
        """Test unknown section type raises."""
        with pytest.raises(InvalidArgumentError):
            page_layout(section_type="nextSection")

    def test_frozen(self):
        """Test layouts are immutable values."""
        layout = page_layout()
        with pytest.raises(AttributeError):
            layout.top = 1


class TestApply:
    """Tests for PageLayout.apply."""

    def test_apply_a4(self):
        """Test writing an A4 layout onto a section."""
        section = Document().sections[-1]
        a4_cover_layout(top=1, bottom=0.5, left=0.75, right=0.25, header=0.3, footer=0.2).apply(section)
        assert section.page_width.inches == pytest.approx(8.27, abs=1e-3)
        assert section.page_height.inches == pytest.approx(11.69, abs=1e-3)
        assert section.orientation == WD_ORIENT.PORTRAIT
        assert section.start_type == WD_SECTION_START.NEW_PAGE
        assert section.top_margin.inches == pytest.approx(1)
        assert section.bottom_margin.inches == pytest.approx(0.5)
        assert section.left_margin.inches == pytest.approx(0.75)
        assert section.right_margin.inches == pytest.approx(0.25)
        assert section.header_distance.inches == pytest.approx(0.3)
        assert section.footer_distance.inches == pytest.approx(0.2)

    def test_apply_landscape(self):
        """Test landscape puts the long side horizontally."""
        section = Document().sections[-1]
        a4_cover_layout(page_orient="landscape").apply(section)
        assert section.orientation == WD_ORIENT.LANDSCAPE
        assert section.page_width.inches == pytest.approx(11.69, abs=1e-3)
        assert section.page_height.inches == pytest.approx(8.27, abs=1e-3)

    def test_apply_keeps_size_when_unset(self):
        """Test None dimensions keep the section's size."""
        section = Document().sections[-1]
        width, height = section.page_width, section.page_height
        page_layout(section_type="oddPage").apply(section)
        assert section.page_width == width
        assert section.page_height == height
        assert section.start_type == WD_SECTION_START.ODD_PAGE
