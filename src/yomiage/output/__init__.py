"""
Module: output

Purpose:
    Printable output for drills. Converts generated problems to a PDF
    worksheet with an answer key using ReportLab.

Key Functions:
    - render_worksheet(): Render problems to PDF

Dependencies:
    - reportlab: PDF generation

Used By:
    - yomiage.drill: Drill builder
"""

from .worksheet import render_worksheet

__all__ = [
    "render_worksheet",
]
