"""Curriculum aggregation: modules, lessons and quizzes from flat content files."""

from .aggregator import ModuleAggregator, classify, load_curriculum, split_module_key
from .lesson_extractor import LessonExtractor, extract_ordering_key, extract_title, render
from .models import Lesson, Module, ModuleDraft, QuizOption, QuizQuestion
from .quiz_parser import LOOKAHEAD_WINDOW, QuizScanner, parse_quiz
from .store import CurriculumBuilder, CurriculumStore
from .titles import normalize

__all__ = [
    "ModuleAggregator",
    "load_curriculum",
    "classify",
    "split_module_key",
    "LessonExtractor",
    "extract_ordering_key",
    "extract_title",
    "render",
    "Lesson",
    "Module",
    "ModuleDraft",
    "QuizOption",
    "QuizQuestion",
    "LOOKAHEAD_WINDOW",
    "QuizScanner",
    "parse_quiz",
    "CurriculumBuilder",
    "CurriculumStore",
    "normalize",
]
