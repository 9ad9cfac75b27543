"""
Module Aggregator.

Scans a storage medium and assembles the curriculum. Two layouts are
supported:

- flat: every file sits at the root and names its module with a prefix,
  e.g. "math_1.intro.content" and "math_quiz.quiz" both belong to "math".
  Files without a prefix go to the fallback module ("general").
- dirs: each directory is a module, either at the root or under a
  "storage/" sub-root, e.g. "storage/math/1.intro.content".

A single pass fills a CurriculumBuilder, which is then frozen into a
read-only CurriculumStore. Nothing that goes wrong with an individual file
(unreadable, oversized, failed rendering) aborts the pass.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger

from coursepack.storage import Storage, StorageEntry, StorageError

from .lesson_extractor import LessonExtractor, Renderer
from .models import ModuleDraft
from .quiz_parser import LOOKAHEAD_WINDOW, MAX_QUIZ_QUESTIONS, parse_quiz
from .store import MAX_MODULES, CurriculumBuilder, CurriculumStore

MAX_LESSONS = 10
FALLBACK_MODULE_ID = "general"
MODULE_SEPARATOR = "_"
STORAGE_SUBROOT = "storage"
MAX_FILE_BYTES = 512 * 1024

LESSON_SUFFIXES = (".content", ".md")
QUIZ_SUFFIXES = (".quiz", ".txt")

FileKind = Literal["lesson", "quiz"]
Layout = Literal["auto", "flat", "dirs"]


def classify(filename: str) -> FileKind | None:
    """Classify a file by suffix; None for files the loader ignores."""
    if filename.endswith(LESSON_SUFFIXES):
        return "lesson"
    if filename.endswith(QUIZ_SUFFIXES):
        return "quiz"
    return None


def split_module_key(name: str, fallback: str = FALLBACK_MODULE_ID) -> tuple[str, str]:
    """
    Split "math_1.intro.content" into ("math", "1.intro.content").

    Only the first "_" separates; a leading "_" does not count as a prefix.
    Names without a prefix map to the fallback module.
    """
    index = name.find(MODULE_SEPARATOR)
    if index > 0:
        return name[:index], name[index + 1 :]
    return fallback, name


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _default_renderer() -> Renderer:
    from coursepack.rendering.markdown_renderer import MarkdownRenderer

    return MarkdownRenderer()


class ModuleAggregator:
    """Builds a CurriculumStore from the files on a storage medium."""

    def __init__(
        self,
        storage: Storage,
        renderer: Renderer | None = None,
        max_modules: int = MAX_MODULES,
        max_lessons: int = MAX_LESSONS,
        max_questions: int = MAX_QUIZ_QUESTIONS,
        lookahead: int = LOOKAHEAD_WINDOW,
        fallback_module_id: str = FALLBACK_MODULE_ID,
        max_file_bytes: int = MAX_FILE_BYTES,
    ):
        """
        Initialize aggregator.

        Args:
            storage: Medium to scan.
            renderer: Markdown -> HTML callable. Defaults to MarkdownRenderer.
            max_modules: Modules beyond this are skipped.
            max_lessons: Lessons per module beyond this are skipped.
            max_questions: Questions per quiz beyond this are skipped.
            lookahead: Quiz option/answer search window.
            fallback_module_id: Module for files without a prefix.
            max_file_bytes: Larger files are skipped unread.
        """
        self.storage = storage
        self.extractor = LessonExtractor(renderer or _default_renderer())
        self.max_modules = max_modules
        self.max_lessons = max_lessons
        self.max_questions = max_questions
        self.lookahead = lookahead
        self.fallback_module_id = fallback_module_id
        self.max_file_bytes = max_file_bytes

    @classmethod
    def from_settings(cls, storage: Storage, settings, renderer: Renderer | None = None) -> ModuleAggregator:
        """Create an aggregator using limits from config.Settings."""
        if renderer is None:
            from coursepack.rendering.markdown_renderer import MarkdownRenderer

            renderer = MarkdownRenderer(extensions=settings.markdown_extensions)

        return cls(
            storage,
            renderer=renderer,
            lookahead=settings.quiz_lookahead,
            fallback_module_id=settings.fallback_module_id,
            max_file_bytes=settings.max_file_bytes,
            **settings.get_capacity_config(),
        )

    # ========================================
    # Layouts
    # ========================================

    def aggregate(self) -> CurriculumStore:
        """Flat layout: group root files into modules by filename prefix."""
        builder = CurriculumBuilder(self.max_modules)
        logger.info("Scanning files using prefix grouping...")

        for entry in self._list("") or []:
            name = entry.name.lstrip("/")
            if entry.is_dir or _is_hidden(name):
                continue

            module_id, filename = split_module_key(name, self.fallback_module_id)
            module = builder.get_or_create(module_id)
            if module is None:
                logger.warning(f"Max modules reached. Skipping: {name}")
                continue

            self.load_file(module, entry, path=name, filename=filename)

        store = builder.build()
        logger.info(f"Total modules loaded: {store.count()}")
        return store

    def aggregate_directories(self) -> CurriculumStore:
        """Directory layout: every directory is one module."""
        builder = CurriculumBuilder(self.max_modules)
        base = STORAGE_SUBROOT if self.storage.exists(STORAGE_SUBROOT) else ""
        logger.info(f"Scanning module directories under /{base}")

        for entry in self._list(base) or []:
            name = entry.name.strip("/")
            if not entry.is_dir or _is_hidden(name):
                continue
            if not base and name == STORAGE_SUBROOT:
                continue

            module = builder.get_or_create(name)
            if module is None:
                logger.warning(f"Max modules reached. Skipping directory: {name}")
                break

            self.load_directory(module, Storage.join(base, name))
            if not module.has_content:
                # Empty directories do not use up a module slot
                logger.info(f"No lessons or quiz in {name}, skipping")
                builder.discard(module)

        store = builder.build()
        logger.info(f"Total modules loaded: {store.count()}")
        return store

    def load(self, layout: Layout = "auto") -> CurriculumStore:
        """Aggregate using the given layout, detecting it when "auto"."""
        if layout == "auto":
            layout = self.detect_layout()
            logger.debug(f"Detected {layout} layout")

        if layout == "dirs":
            return self.aggregate_directories()
        return self.aggregate()

    def detect_layout(self) -> Literal["flat", "dirs"]:
        """
        Pick "dirs" when the root holds module directories but no content files.

        A module directory is one with at least one lesson or quiz file in it.
        A "storage/" directory at the root always selects the directory layout.
        """
        entries = self._list("") or []
        visible = [e for e in entries if not _is_hidden(e.name.lstrip("/"))]

        if any(e.is_dir and e.name.strip("/") == STORAGE_SUBROOT for e in visible):
            return "dirs"

        if any(not e.is_dir and classify(e.name) for e in visible):
            return "flat"

        has_module_dirs = any(e.is_dir and self._holds_content(e.name.strip("/")) for e in visible)
        return "dirs" if has_module_dirs else "flat"

    # ========================================
    # Per-file population
    # ========================================

    def load_directory(self, module: ModuleDraft, path: str) -> None:
        for entry in self._list(path) or []:
            name = entry.base_name
            if entry.is_dir or _is_hidden(name):
                continue
            self.load_file(module, entry, path=Storage.join(path, name), filename=name)

    def load_file(self, module: ModuleDraft, entry: StorageEntry, path: str, filename: str) -> None:
        """
        Read one file and merge it into module.

        Lessons are appended while under capacity. A quiz replaces the
        module's questions, so with several quiz files the last one wins.
        """
        kind = classify(filename)
        if kind is None:
            logger.debug(f"Ignoring {path}: unknown file type")
            return

        if entry.size > self.max_file_bytes:
            logger.warning(f"Skipping oversized file {path} ({entry.size} bytes)")
            return

        if kind == "lesson" and module.lesson_count >= self.max_lessons:
            logger.info(f"Max lessons reached in {module.id}. Skipping: {path}")
            return

        content = self._read(path)
        if content is None:
            return

        if kind == "lesson":
            lesson = self.extractor.extract(filename, content, source_name=path)
            module.lessons.append(lesson)
            logger.info(f"  Added lesson to {module.id}: {lesson.title}")
        else:
            questions = parse_quiz(content, max_questions=self.max_questions, lookahead=self.lookahead)
            if module.quiz_questions:
                logger.debug(f"Quiz {path} replaces {module.question_count} questions in {module.id}")
            module.quiz_questions = questions
            module.has_quiz = len(questions) > 0
            logger.info(f"  Added quiz to {module.id}: {len(questions)} questions")

    # ========================================
    # Storage access
    # ========================================

    def _list(self, path: str) -> list[StorageEntry] | None:
        try:
            return self.storage.list_entries(path)
        except StorageError as e:
            logger.warning(f"Cannot list /{path}: {e}")
            return None

    def _holds_content(self, path: str) -> bool:
        return any(
            not e.is_dir and not _is_hidden(e.base_name) and classify(e.base_name)
            for e in self._list(path) or []
        )

    def _read(self, path: str) -> str | None:
        try:
            return self.storage.read_text(path)
        except StorageError as e:
            logger.warning(f"Skipping unreadable file {path}: {e}")
            return None


def load_curriculum(
    storage: Storage,
    layout: Layout = "auto",
    renderer: Renderer | None = None,
    **limits,
) -> CurriculumStore:
    """
    Convenience function: aggregate a storage medium in one call.

    Keyword arguments are passed to ModuleAggregator (max_modules, ...).
    """
    aggregator = ModuleAggregator(storage, renderer=renderer, **limits)
    return aggregator.load(layout)
