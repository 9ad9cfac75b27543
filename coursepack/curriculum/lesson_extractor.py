"""
Lesson extraction.

Derives a lesson's ordering key from its filename, its title from the first
level-1 markdown heading, and its HTML body from an injected renderer.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from loguru import logger

from .models import Lesson

Renderer = Callable[[str], str]

UNTITLED = "Untitled"
TITLE_MARKER = "# "

LEADING_DIGITS_PATTERN = re.compile(r"^([0-9]+)")


def extract_ordering_key(filename: str) -> int:
    """
    Return the leading digit run of a filename, or 0 when there is none.

    "1.intro.content" -> 1, "12_basics.md" -> 12, "intro.md" -> 0.
    """
    match = LEADING_DIGITS_PATTERN.match(filename)
    if not match:
        return 0
    return int(match.group(1))


def extract_title(content: str) -> str:
    """
    Return the text of the first "# " heading line.

    The marker is searched as a plain substring, so "## Sub" also matches at
    its second "#". No trimming is applied beyond cutting at the newline.
    """
    start = content.find(TITLE_MARKER)
    if start == -1:
        return UNTITLED

    start += len(TITLE_MARKER)
    end = content.find("\n", start)
    if end == -1:
        end = len(content)
    return content[start:end]


def render(markdown_text: str, renderer: Renderer) -> str:
    """Render markdown via the injected renderer; failures yield ""."""
    try:
        return renderer(markdown_text)
    except Exception as e:
        logger.warning(f"Markdown rendering failed, using empty content: {e}")
        return ""


class LessonExtractor:
    """Builds Lesson records from raw lesson files."""

    def __init__(self, renderer: Renderer):
        """
        Initialize extractor.

        Args:
            renderer: Callable turning markdown text into HTML.
        """
        self.renderer = renderer

    def extract(self, filename: str, content: str, source_name: str = "") -> Lesson:
        """Create a valid Lesson from an effective filename and its text."""
        return Lesson(
            ordering_key=extract_ordering_key(filename),
            title=extract_title(content),
            rendered_content=render(content, self.renderer),
            valid=True,
            source_name=source_name or filename,
        )
