"""Data models for curriculum aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field

OPTION_LETTERS = "abcd"
DEFAULT_ANSWER_LETTER = "a"


@dataclass(frozen=True)
class Lesson:
    """A single markdown lesson, rendered to HTML."""

    ordering_key: int  # Leading digits of the filename, 0 = unordered
    title: str
    rendered_content: str = ""
    valid: bool = False
    source_name: str = ""


@dataclass(frozen=True)
class QuizOption:
    """One lettered answer choice (a-d)."""

    letter: str
    text: str


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple-choice question parsed from quiz text."""

    prompt: str
    options: tuple[QuizOption, ...] = ()
    correct_answer_letter: str = DEFAULT_ANSWER_LETTER

    @property
    def option_count(self) -> int:
        return len(self.options)

    @property
    def correct_option(self) -> QuizOption | None:
        """The option matching the answer letter, if it was parsed."""
        for option in self.options:
            if option.letter == self.correct_answer_letter:
                return option
        return None


class _ModuleContent:
    """Counters shared by ModuleDraft and Module."""

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    @property
    def question_count(self) -> int:
        return len(self.quiz_questions)

    @property
    def has_content(self) -> bool:
        """True when the module would survive the final store filter."""
        return self.lesson_count > 0 or self.has_quiz

    def sorted_lessons(self) -> list[Lesson]:
        """
        Lessons ordered by ordering key.

        Sorting is stable, so lessons sharing a key (including the unordered
        key 0) keep their discovery order.
        """
        return sorted(self.lessons, key=lambda lesson: lesson.ordering_key)


@dataclass
class ModuleDraft(_ModuleContent):
    """A module while the aggregation pass is still filling it."""

    id: str
    display_name: str
    lessons: list[Lesson] = field(default_factory=list)
    quiz_questions: list[QuizQuestion] = field(default_factory=list)
    has_quiz: bool = False
    valid: bool = False

    def freeze(self) -> Module:
        return Module(
            id=self.id,
            display_name=self.display_name,
            lessons=tuple(self.lessons),
            quiz_questions=tuple(self.quiz_questions),
            has_quiz=self.has_quiz,
            valid=self.valid,
        )


@dataclass(frozen=True)
class Module(_ModuleContent):
    """A course unit grouping lessons and an optional quiz. Read-only."""

    id: str
    display_name: str
    lessons: tuple[Lesson, ...] = ()
    quiz_questions: tuple[QuizQuestion, ...] = ()
    has_quiz: bool = False
    valid: bool = False

    def __post_init__(self):
        object.__setattr__(self, "lessons", tuple(self.lessons))
        object.__setattr__(self, "quiz_questions", tuple(self.quiz_questions))
