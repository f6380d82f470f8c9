"""Rendered page checks, grading, and report formatting."""

from blog_generator.validation.checks import check_page
from blog_generator.validation.report import format_page_report

__all__ = ["check_page", "format_page_report"]
