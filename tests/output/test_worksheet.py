"""
Tests for PDF worksheet rendering.

Uses pypdf to inspect generated PDFs.
"""

from pathlib import Path

import pytest
from pypdf import PdfReader
from reportlab.pdfgen import canvas

from yomiage.config import GenerationConfig
from yomiage.output.worksheet import MARGIN, render_worksheet
from yomiage.problem import Problem


# A4 dimensions in points (1/72 inch)
A4_WIDTH_PT = 595.276
A4_HEIGHT_PT = 841.890
TOLERANCE_PT = 1.0


def make_problems(count: int, config: GenerationConfig) -> list[Problem]:
    """Helper to create seeded problems."""
    return [Problem.from_config(config, seed=i) for i in range(count)]


@pytest.fixture
def small_config() -> GenerationConfig:
    return GenerationConfig(min_digit=1, max_digit=2, length=5, subtractions=2)


class TestRenderWorksheet:
    """Tests for render_worksheet function."""

    def test_render_when_few_problems_then_problem_page_and_answer_page(
        self, small_config, tmp_path: Path
    ):
        output = tmp_path / "sheet.pdf"
        pages = render_worksheet(make_problems(4, small_config), output, title="Practice")

        reader = PdfReader(str(output))
        assert pages == 2
        assert len(reader.pages) == 2

        first = reader.pages[0].extract_text()
        assert "Practice" in first
        assert "No. 1" in first
        assert "No. 4" in first
        assert "Answers" in reader.pages[-1].extract_text()

    def test_render_when_no_answer_key_then_single_page(self, small_config, tmp_path: Path):
        output = tmp_path / "sheet.pdf"
        pages = render_worksheet(
            make_problems(4, small_config), output, include_answer_key=False
        )
        reader = PdfReader(str(output))
        assert pages == 1
        assert len(reader.pages) == 1
        assert "Answers" not in reader.pages[0].extract_text()

    def test_render_when_many_problems_then_paginates(self, tmp_path: Path):
        config = GenerationConfig(min_digit=3, max_digit=6, length=10, subtractions=3)
        output = tmp_path / "sheet.pdf"
        pages = render_worksheet(make_problems(60, config), output)

        reader = PdfReader(str(output))
        assert pages > 2
        assert len(reader.pages) == pages

    def test_render_pages_are_a4(self, small_config, tmp_path: Path):
        output = tmp_path / "sheet.pdf"
        render_worksheet(make_problems(2, small_config), output)

        for page in PdfReader(str(output)).pages:
            assert abs(float(page.mediabox.width) - A4_WIDTH_PT) < TOLERANCE_PT
            assert abs(float(page.mediabox.height) - A4_HEIGHT_PT) < TOLERANCE_PT

    def test_render_when_nested_output_dir_then_created(self, small_config, tmp_path: Path):
        output = tmp_path / "a" / "b" / "sheet.pdf"
        render_worksheet(make_problems(1, small_config), output)
        assert output.exists()

    def test_render_when_large_terms_then_fits_single_column(self, tmp_path: Path):
        config = GenerationConfig(min_digit=60, max_digit=60, length=3, subtractions=1)
        output = tmp_path / "sheet.pdf"
        pages = render_worksheet(make_problems(3, config), output, include_answer_key=False)
        assert pages >= 1
        assert len(PdfReader(str(output)).pages) == pages

    def test_render_when_empty_then_raises(self, tmp_path: Path):
        with pytest.raises(ValueError, match="without problems"):
            render_worksheet([], tmp_path / "sheet.pdf")


@pytest.fixture
def drawn(monkeypatch):
    """Record (method, x, y, text) for every string and box drawn on a canvas."""
    calls = []

    def spy(name):
        original = getattr(canvas.Canvas, name)

        def wrapper(self, x, y, *args, **kwargs):
            calls.append((name, x, y, args[0] if args else None))
            return original(self, x, y, *args, **kwargs)

        return wrapper

    for name in ("drawString", "drawRightString", "drawCentredString", "rect"):
        monkeypatch.setattr(canvas.Canvas, name, spy(name))
    return calls


class TestWorksheetLayout:
    """Tests that everything drawn stays inside the page margins."""

    def test_render_when_problem_taller_than_page_then_continues_on_next_page(
        self, drawn, tmp_path: Path
    ):
        config = GenerationConfig(min_digit=3, max_digit=6, length=80, subtractions=20)
        problems = make_problems(3, config)
        output = tmp_path / "sheet.pdf"

        pages = render_worksheet(problems, output, include_answer_key=False)

        assert pages >= 2
        assert len(PdfReader(str(output)).pages) == pages
        for _, _, y, _ in drawn:
            assert y >= MARGIN
        terms = [text for name, _, _, text in drawn
                 if name == "drawRightString" and not text.startswith("Page")]
        assert len(terms) == 3 * 80

    def test_render_when_rows_fill_page_then_nothing_below_margin(
        self, drawn, tmp_path: Path
    ):
        config = GenerationConfig(min_digit=3, max_digit=6, length=30, subtractions=5)
        render_worksheet(make_problems(40, config), tmp_path / "sheet.pdf")

        for _, x, y, _ in drawn:
            assert y >= MARGIN
            assert x <= A4_WIDTH_PT - MARGIN + TOLERANCE_PT

    def test_render_when_terms_wider_than_page_then_raises(self, tmp_path: Path):
        config = GenerationConfig(min_digit=120, max_digit=120, length=2, subtractions=0)
        output = tmp_path / "sheet.pdf"

        with pytest.raises(ValueError, match="too wide"):
            render_worksheet(make_problems(1, config), output)
        assert not output.exists()
