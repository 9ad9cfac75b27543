"""
Quiz Text Parser.

Parses the loosely structured quiz format used by the device content packs:

    ### Question 1
    What is 2+2?

    a) 3
    b) 4
    c) 5

    **Answer: b)**

The scan is driven by plain substring searches over an immutable string and an
integer cursor rather than by tokenizing lines. Authors are inconsistent with
blank lines and markers, so every search is tolerant: anything that does not
fit is skipped silently instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .models import DEFAULT_ANSWER_LETTER, OPTION_LETTERS, QuizOption, QuizQuestion

MAX_QUIZ_QUESTIONS = 50

# Options and the answer marker must start within this many characters of the
# end of the question body. Changing it changes which malformed quizzes parse.
LOOKAHEAD_WINDOW = 500

QUESTION_MARKER = "###"
BLANK_LINE = "\n\n"
FIRST_OPTION_LINE = "\na)"
BOLD_MARKER = "**"
ANSWER_MARKERS = ("**Answer:", "**Sagot:")  # English, Filipino


@dataclass(frozen=True)
class QuestionBlock:
    """Character offsets of one question candidate."""

    header_start: int
    header_end: int  # Index of the newline closing the "###" line
    body_start: int
    body_end: int

    @property
    def next_cursor(self) -> int:
        return self.header_end + 1


class QuizScanner:
    """Cursor-based scanner over raw quiz text."""

    def __init__(self, text: str, lookahead: int = LOOKAHEAD_WINDOW):
        self.text = text
        self.lookahead = lookahead

    # ========================================
    # Delimiter searches
    # ========================================

    def find_header(self, cursor: int) -> tuple[int, int] | None:
        """Locate the next "###" line; returns (marker index, line end)."""
        start = self.text.find(QUESTION_MARKER, cursor)
        if start == -1:
            return None

        end = self.text.find("\n", start)
        if end == -1:
            # Trailing header without a body
            return None
        return start, end

    def find_body_end(self, body_start: int) -> int:
        """
        End of the question body, or -1.

        The body ends at the first blank line or at the first line opening
        with "a)", whichever comes first.
        """
        candidates = [
            index
            for index in (
                self.text.find(BLANK_LINE, body_start),
                self.text.find(FIRST_OPTION_LINE, body_start),
            )
            if index != -1
        ]
        return min(candidates) if candidates else -1

    def within_window(self, index: int, body_end: int) -> bool:
        return index <= body_end + self.lookahead

    def find_options(self, body_end: int) -> tuple[QuizOption, ...]:
        """
        Collect "a)".."d)" options after the body.

        Collection stops at the first letter that is missing or lies outside
        the lookahead window, so the result is always a prefix of a, b, c, d.
        """
        options = []
        for letter in OPTION_LETTERS:
            start = self.text.find(f"{letter})", body_end)
            if start == -1 or not self.within_window(start, body_end):
                break

            end = self.text.find("\n", start)
            if end == -1:
                end = len(self.text)
            options.append(QuizOption(letter=letter, text=self.text[start + 2 : end].strip()))
        return tuple(options)

    def find_answer_letter(self, body_end: int) -> str:
        """
        Resolve the correct answer letter.

        "**Sagot:" is only consulted when no "**Answer:" follows the body at
        all. The letter is the character right before the first ")" after the
        marker.
        """
        marker_pos = -1
        for marker in ANSWER_MARKERS:
            marker_pos = self.text.find(marker, body_end)
            if marker_pos != -1:
                break

        if marker_pos == -1 or marker_pos >= body_end + self.lookahead:
            return DEFAULT_ANSWER_LETTER

        letter_pos = self.text.find(")", marker_pos) - 1
        if letter_pos <= marker_pos:
            return DEFAULT_ANSWER_LETTER
        return self.text[letter_pos]

    # ========================================
    # Question assembly
    # ========================================

    def next_block(self, cursor: int) -> QuestionBlock | None:
        """Find the next question candidate at or after cursor."""
        header = self.find_header(cursor)
        if header is None:
            return None

        header_start, header_end = header
        body_start = header_end + 1
        return QuestionBlock(
            header_start=header_start,
            header_end=header_end,
            body_start=body_start,
            body_end=self.find_body_end(body_start),
        )

    def build_question(self, block: QuestionBlock) -> QuizQuestion | None:
        """Turn a candidate block into a question, or None if rejected."""
        if block.body_end <= block.body_start:
            return None

        prompt = self.text[block.body_start : block.body_end].strip()
        if not prompt or prompt.startswith(BOLD_MARKER):
            return None

        return QuizQuestion(
            prompt=prompt,
            options=self.find_options(block.body_end),
            correct_answer_letter=self.find_answer_letter(block.body_end),
        )

    def scan(self, max_questions: int = MAX_QUIZ_QUESTIONS) -> list[QuizQuestion]:
        questions: list[QuizQuestion] = []
        cursor = 0

        while cursor < len(self.text) and len(questions) < max_questions:
            block = self.next_block(cursor)
            if block is None:
                break

            question = self.build_question(block)
            if question is not None:
                questions.append(question)
            else:
                logger.debug(f"Skipped quiz block at offset {block.header_start}")

            cursor = block.next_cursor

        return questions


def parse_quiz(
    text: str,
    max_questions: int = MAX_QUIZ_QUESTIONS,
    lookahead: int = LOOKAHEAD_WINDOW,
) -> list[QuizQuestion]:
    """
    Parse raw quiz text into an ordered list of questions.

    Pure function: the same text always yields the same questions. At most
    max_questions are returned; later blocks are ignored.
    """
    return QuizScanner(text, lookahead=lookahead).scan(max_questions=max_questions)
