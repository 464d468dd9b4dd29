"""Service for editing and validating the batch of questions before it is sent."""

from __future__ import annotations

import logging

from quiz_host.constants.quiz_constants import (
    BULK_PASTE_MIN_LINES,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    OPTION_COUNT,
)
from quiz_host.core.errors import BulkPasteFormatError, QuestionValidationError
from quiz_host.core.models import QuestionDraft, SubmittedQuestion

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("text", "correct", "time_limit")


class QuestionSetBuilder:
    """Holds the editable question batch and turns it into a submission."""

    def __init__(self, question_count: int = DEFAULT_QUESTION_COUNT) -> None:
        self._questions: list[QuestionDraft] = []
        self._question_count: int = 0
        self.set_question_count(question_count)

    def set_question_count(self, count: int) -> None:
        """Regenerate the batch as ``count`` blank questions, dropping all edits."""
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ValueError("Question count must be a positive integer.")
        self._question_count = count
        self._questions = [QuestionDraft() for _ in range(count)]

    def get_question_count(self) -> int:
        return self._question_count

    def get_questions(self) -> list[QuestionDraft]:
        return list(self._questions)

    def get_question_at_index(self, index: int) -> QuestionDraft:
        self._check_index(index)
        return self._questions[index]

    def edit_field(self, index: int, field: str, value: object) -> None:
        self._check_index(index)
        if field not in _EDITABLE_FIELDS:
            raise ValueError(f"Unknown question field '{field}'")
        setattr(self._questions[index], field, value)

    def edit_option(self, index: int, option_index: int, value: str) -> None:
        self._check_index(index)
        if not 0 <= option_index < OPTION_COUNT:
            raise IndexError(f"Option index {option_index} out of range")
        self._questions[index].options[option_index] = value

    def apply_bulk_paste(self, index: int, raw_text: str) -> QuestionDraft:
        """Replace the question at ``index`` with one parsed from pasted lines.

        Expected layout, one item per line: the prompt, four options, then the
        correct-answer marker. Blank lines are ignored. The slot keeps its
        current time limit.
        """
        self._check_index(index)
        lines = [line.strip() for line in raw_text.splitlines()]
        lines = [line for line in lines if line]
        if len(lines) < BULK_PASTE_MIN_LINES:
            raise BulkPasteFormatError(
                "Paste needs a question, 4 options and the correct answer number, "
                f"one per line ({len(lines)} line(s) found)."
            )

        replacement = QuestionDraft(
            text=lines[0],
            options=lines[1 : 1 + OPTION_COUNT],
            correct=lines[-1],
            time_limit=self._questions[index].time_limit,
        )
        self._questions[index] = replacement
        return replacement

    def validate_and_submit(self) -> list[SubmittedQuestion]:
        """Validate the whole batch and return it in wire form.

        Nothing is changed when any question fails; the error names the
        first failing question by its 1-based position.
        """
        submitted: list[SubmittedQuestion] = []
        for position, question in enumerate(self._questions, start=1):
            submitted.append(self._prepare_question(position, question))
        return submitted

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")

    def _prepare_question(self, position: int, question: QuestionDraft) -> SubmittedQuestion:
        cleaned_text = (question.text or "").strip()
        if not cleaned_text:
            raise self._invalid(position, "question text must not be empty.")

        options = self._validate_options(position, question.options)
        correct_index = self._parse_correct_marker(position, question.correct)
        time_limit = self._normalize_time_limit(position, question.time_limit)

        return SubmittedQuestion(
            text=cleaned_text,
            options=tuple(options),
            correct=options[correct_index],
            time_limit=time_limit,
        )

    @classmethod
    def _validate_options(cls, position: int, options: list[str]) -> list[str]:
        if len(options) != OPTION_COUNT:
            raise cls._invalid(position, "each question must have exactly four options.")
        cleaned = [(option or "").strip() for option in options]
        if any(not option for option in cleaned):
            raise cls._invalid(position, "option text cannot be empty.")
        return cleaned

    @classmethod
    def _parse_correct_marker(cls, position: int, marker: object) -> int:
        raw_value = str(marker).strip() if marker is not None else ""
        if not raw_value:
            raise cls._invalid(position, "the correct answer is missing.")
        try:
            correct_index = int(raw_value)
        except ValueError:
            raise cls._invalid(
                position, f"correct answer '{raw_value}' must be a number from 0 to 3."
            ) from None
        if not 0 <= correct_index < OPTION_COUNT:
            raise cls._invalid(position, "correct answer must be between 0 and 3.")
        return correct_index

    @classmethod
    def _normalize_time_limit(cls, position: int, time_limit: object) -> int:
        if time_limit is None:
            return DEFAULT_TIME_LIMIT_SECONDS
        if isinstance(time_limit, bool) or not isinstance(time_limit, int):
            raise cls._invalid(position, "time limit must be a whole number of seconds.")
        if time_limit <= 0:
            raise cls._invalid(position, "time limit must be a positive integer.")
        return time_limit

    @staticmethod
    def _invalid(position: int, reason: str) -> QuestionValidationError:
        logger.info("Rejected question %d: %s", position, reason)
        return QuestionValidationError(position, reason)
