"""
coursepack: rebuild a course curriculum from a flat collection of content files.

Subpackages:
- curriculum/: module aggregation, lesson extraction, quiz parsing
- storage/: storage media (local directory, in-memory)
- rendering/: markdown and quiz HTML rendering
- cli/: Typer command line
"""

__version__ = "1.0.0"
