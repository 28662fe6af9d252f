"""Tests for docx_easy cover page composition and CLI."""

import json
from io import BytesIO

import pytest
from docx import Document

from docx_easy import Config, build_cover_document
from docx_easy.__main__ import main
from docx_easy.exceptions import InvalidArgumentError


def _reload(document):
    stream = BytesIO()
    document.save(stream)
    stream.seek(0)
    return Document(stream)


class TestBuildCoverDocument:
    """Tests for build_cover_document function."""

    def test_title_only(self):
        """Test a cover with only a title bar."""
        doc = _reload(build_cover_document("年度报告"))
        assert len(doc.tables) == 1
        assert doc.tables[0].cell(0, 0).text == "年度报告"
        assert len(doc.sections) == 2

    def test_with_info_and_subtitle(self):
        """Test info table and subtitle are added."""
        doc = build_cover_document(
            "Report",
            info={"Name": "Xiaoming", "Date": "2024-08-28"},
            subtitle="Draft",
        )
        doc = _reload(doc)
        assert len(doc.tables) == 2
        info = doc.tables[1]
        assert [row.cells[0].text for row in info.rows] == ["Name", "Date"]
        assert "Draft" in [p.text for p in doc.paragraphs]

    def test_paper_size(self):
        """Test both sections use the requested paper."""
        doc = _reload(build_cover_document("x", paper="B5"))
        for section in doc.sections:
            assert section.page_width.inches == pytest.approx(6.93, abs=1e-3)
        assert doc.sections[1].left_margin.inches == pytest.approx(1.25)

    def test_paper_from_config(self):
        """Test paper defaults to the config value."""
        doc = _reload(build_cover_document("x", config=Config(paper="A3")))
        assert doc.sections[0].page_height.inches == pytest.approx(16.5, abs=1e-3)

    def test_unknown_paper(self):
        """Test unknown paper raises."""
        with pytest.raises(InvalidArgumentError):
            build_cover_document("x", paper="Letter")


class TestMain:
    """Tests for the docx-easy CLI."""

    def test_build(self, tmp_path, capsys):
        """Test building a document from the command line."""
        output = tmp_path / "out" / "cover.docx"
        code = main([str(output), "--title", "标题", "--info", "姓名=小明", "--paper", "A4", "-c", str(tmp_path / "none.json")])
        assert code == 0
        assert output.exists()
        doc = Document(str(output))
        assert doc.tables[1].cell(0, 1).text == "小明"
        assert "[INFO] Document saved" in capsys.readouterr().out

    def test_bad_info(self, tmp_path, capsys):
        """Test malformed --info reports an error."""
        code = main([str(tmp_path / "x.docx"), "--info", "novalue", "-c", str(tmp_path / "none.json")])
        assert code == 1
        assert "[ERROR]" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "content",
        ['{"font": {"size": "巨号"}}', "{not json"],
    )
    def test_bad_config(self, tmp_path, capsys, content):
        """Test an unusable config file reports an error."""
        config_path = tmp_path / "config.json"
        config_path.write_text(content, encoding="utf-8")
        code = main([str(tmp_path / "x.docx"), "-c", str(config_path)])
        assert code == 1
        assert "[ERROR]" in capsys.readouterr().out
        assert not (tmp_path / "x.docx").exists()

    def test_init_config(self, tmp_path):
        """Test --init-config writes the default config once."""
        config_path = tmp_path / "config.json"
        assert main(["--init-config", "-c", str(config_path)]) == 0
        assert json.loads(config_path.read_text(encoding="utf-8"))["page"]["paper"] == "A4"
        assert main(["--init-config", "-c", str(config_path)]) == 1

    def test_font_sizes(self, capsys):
        """Test listing named font sizes."""
        assert main(["--font-sizes"]) == 0
        out = capsys.readouterr().out
        assert "小四\t12" in out
        assert "五号\t10.5" in out

    def test_no_output(self, capsys):
        """Test missing output prints help."""
        assert main([]) == 1
