"""HTML rendering for lessons and quizzes."""

from .markdown_renderer import MarkdownRenderer, render_markdown
from .quiz_html import render_quiz_html

__all__ = [
    "MarkdownRenderer",
    "render_markdown",
    "render_quiz_html",
]
