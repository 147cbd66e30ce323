"""
Module: output.worksheet

Purpose:
    Render a drill to a printable A4 PDF worksheet. Each problem is a
    numbered column of right-aligned terms with an empty answer box
    under a rule; an optional answer key follows the problems.

Key Functions:
    - render_worksheet(): Create worksheet PDF

Dependencies:
    - reportlab: PDF generation
    - yomiage.problem: Problem
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from yomiage.problem import Problem

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 15 * mm
TITLE_FONT = "Helvetica-Bold"
TITLE_FONT_SIZE = 14
BODY_FONT = "Helvetica"
BODY_FONT_SIZE = 10
LINE_HEIGHT = 14
COLUMN_GAP = 4 * mm
MIN_COLUMN_WIDTH = 18 * mm
CONTENT_WIDTH = A4_WIDTH - 2 * MARGIN
CONTENT_TOP = A4_HEIGHT - MARGIN - TITLE_FONT_SIZE - 2 * LINE_HEIGHT


def _column_width(problems: Sequence[Problem]) -> float:
    """Width that fits the widest term of any problem."""
    text_width = max(
        stringWidth(_format_term(term), BODY_FONT, BODY_FONT_SIZE)
        for problem in problems
        for term in problem.terms
    )
    return max(MIN_COLUMN_WIDTH, text_width + 2 * mm)


def _format_term(term: int) -> str:
    return f"{term:,}"


def _draw_title(c: canvas.Canvas, title: str, page: int) -> float:
    """Draw page heading and return the y coordinate below it."""
    y = A4_HEIGHT - MARGIN
    c.setFont(TITLE_FONT, TITLE_FONT_SIZE)
    c.drawString(MARGIN, y - TITLE_FONT_SIZE, title)
    c.setFont(BODY_FONT, BODY_FONT_SIZE - 2)
    c.drawRightString(A4_WIDTH - MARGIN, y - TITLE_FONT_SIZE, f"Page {page}")
    c.setFont(BODY_FONT, BODY_FONT_SIZE)
    return CONTENT_TOP


def _next_page(c: canvas.Canvas, title: str, page: int) -> Tuple[int, float]:
    c.showPage()
    page += 1
    return page, _draw_title(c, title, page)


def _draw_problem_line(
    c: canvas.Canvas,
    number: int,
    problem: Problem,
    line: int,
    x: float,
    y: float,
    width: float,
) -> None:
    """Draw one line of a problem column: the number first, then a term per line."""
    if line == 0:
        c.setFont(TITLE_FONT, BODY_FONT_SIZE)
        c.drawCentredString(x + width / 2, y, f"No. {number}")
        c.setFont(BODY_FONT, BODY_FONT_SIZE)
    elif line <= len(problem.terms):
        c.drawRightString(x + width, y, _format_term(problem.terms[line - 1]))


def _draw_answer_box(c: canvas.Canvas, x: float, y: float, width: float) -> None:
    """Draw the rule under the last term (baseline y + LINE_HEIGHT) and an empty box."""
    rule_y = y + LINE_HEIGHT - 4
    c.line(x, rule_y, x + width, rule_y)
    c.rect(x, rule_y - LINE_HEIGHT - 4, width, LINE_HEIGHT)


def render_worksheet(
    problems: Sequence[Problem],
    output_path: Path,
    *,
    title: str = "Mental Calculation Drill",
    include_answer_key: bool = True,
) -> int:
    """
    Render problems to a PDF worksheet.

    Problems are laid out left to right in columns, wrapping onto new
    rows and pages as needed. A row that does not fit below the previous
    one starts a new page; a row taller than a page continues its
    columns on the following pages. The answer key, if requested, starts
    on its own page.

    Args:
        problems: Problems to render, numbered from 1 in order
        output_path: Path to write the PDF
        title: Heading printed on every page
        include_answer_key: Whether to append the answer key

    Returns:
        Number of pages written

    Raises:
        ValueError: If problems is empty or a term is wider than the page

    Example:
        >>> render_worksheet(result.problems, Path("output/drill.pdf"))
        2
    """
    if not problems:
        raise ValueError("Cannot render a worksheet without problems")

    width = _column_width(problems)
    if width > CONTENT_WIDTH:
        raise ValueError(
            f"Terms are too wide for the page: {width:.0f}pt > {CONTENT_WIDTH:.0f}pt"
        )
    columns = max(1, int((CONTENT_WIDTH + COLUMN_GAP) // (width + COLUMN_GAP)))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle(title)

    page = 1
    y = _draw_title(c, title, page)
    for start in range(0, len(problems), columns):
        row = problems[start:start + columns]
        lines = max(len(p.terms) for p in row) + 1

        # Answer box bottom sits 8pt under the line after the last term
        if y < CONTENT_TOP and y - lines * LINE_HEIGHT - 8 < MARGIN:
            page, y = _next_page(c, title, page)

        for line in range(lines):
            if y < MARGIN:
                page, y = _next_page(c, title, page)
            for col, problem in enumerate(row):
                x = MARGIN + col * (width + COLUMN_GAP)
                _draw_problem_line(c, start + col + 1, problem, line, x, y, width)
            y -= LINE_HEIGHT

        if y - 8 < MARGIN:
            page, y = _next_page(c, title, page)
        for col in range(len(row)):
            _draw_answer_box(c, MARGIN + col * (width + COLUMN_GAP), y, width)
        y -= 2 * LINE_HEIGHT

    if include_answer_key:
        page, y = _next_page(c, f"{title}: Answers", page)
        for index, problem in enumerate(problems):
            if y < MARGIN:
                page, y = _next_page(c, f"{title}: Answers", page)
            c.drawString(MARGIN, y, f"No. {index + 1}: {problem.answer:,}")
            y -= LINE_HEIGHT

    c.showPage()
    c.save()
    logger.info(f"Rendered {len(problems)} problems on {page} pages to {output_path}")
    return page
