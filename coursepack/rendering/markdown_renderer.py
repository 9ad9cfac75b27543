"""Markdown to HTML rendering for lesson bodies."""

from __future__ import annotations

import markdown


class MarkdownRenderer:
    """
    Callable renderer backed by Python-Markdown.

    Instances are passed to LessonExtractor as its renderer strategy.
    """

    def __init__(self, extensions: list[str] | None = None):
        self.extensions = list(extensions) if extensions is not None else ["extra"]

    def __call__(self, text: str) -> str:
        return markdown.markdown(text, extensions=self.extensions, output_format="html")


def render_markdown(text: str) -> str:
    """Render markdown with the default extensions."""
    return MarkdownRenderer()(text)
