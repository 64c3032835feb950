"""Exam hierarchy and grading rules.

``Exam`` is the abstract base.  Construction enforces the only shared
invariant (a strictly positive duration); the variants own their own
grading state machines:

- ``MultipleChoiceExam``: no questions -> questions with unset answers
  -> some or all answers submitted.
- ``EssayExam``: ungraded (score sentinel) -> graded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from polydemo.domain.exceptions import (
    CapacityExceededError,
    GradingError,
    InvalidDurationError,
    NotYetGradedError,
    QuestionIndexError,
    ValidationError,
)

# ---------------------------------------------------------------------------
# Constants for grading rules
# ---------------------------------------------------------------------------
MAX_QUESTIONS = 50
OPTIONS_PER_QUESTION = 4
MIN_ESSAY_SCORE = 0
MAX_ESSAY_SCORE = 100
UNGRADED = -1


@dataclass(frozen=True)
class Question:
    """A multiple choice question with exactly four options."""

    text: str
    options: tuple[str, ...]
    correct_answer: str

    def __post_init__(self) -> None:
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValidationError(
                f"A question needs exactly {OPTIONS_PER_QUESTION} options, "
                f"got {len(self.options)}"
            )


@dataclass
class Exam(ABC):
    """Aggregate root shared by every exam type.

    Raises InvalidDurationError whenever ``duration`` is set to a value
    that is not strictly positive, so an invalid exam never exists.
    """

    score_label: ClassVar[str] = "Exam Score"

    exam_id: int
    subject: str
    duration: int  # minutes

    def __setattr__(self, name: str, value: object) -> None:
        # checked on construction and on every later reassignment
        if name == "duration" and value <= 0:  # type: ignore[operator]
            raise InvalidDurationError()
        super().__setattr__(name, value)

    @abstractmethod
    def grade(self) -> int:
        """Return the exam score or raise a grading error."""

    def describe(self) -> list[str]:
        """Return the display lines for this exam."""
        return [
            f"Exam ID: {self.exam_id}",
            f"Subject: {self.subject}",
            f"Duration: {self.duration} minutes",
        ]


@dataclass
class MultipleChoiceExam(Exam):
    """Exam made of up to ``MAX_QUESTIONS`` four-option questions.

    Submitted answers are kept parallel to the questions; ``None`` marks
    a question the student has not answered.
    """

    score_label: ClassVar[str] = "MC Exam Score"

    _questions: list[Question] = field(default_factory=list, init=False, repr=False)
    _answers: list[str | None] = field(default_factory=list, init=False, repr=False)

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def answers(self) -> tuple[str | None, ...]:
        return tuple(self._answers)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    def add_question(
        self,
        text: str,
        options: Sequence[str],
        correct_answer: str,
    ) -> Question:
        """Append a question; raises CapacityExceededError past the limit."""
        if self.question_count >= MAX_QUESTIONS:
            raise CapacityExceededError()
        question = Question(text=text, options=tuple(options), correct_answer=correct_answer)
        self._questions.append(question)
        self._answers.append(None)
        return question

    def submit_answer(self, index: int, answer: str) -> None:
        """Record *answer* for question *index*; the last write wins."""
        if index < 0 or index >= self.question_count:
            raise QuestionIndexError()
        self._answers[index] = answer

    def grade(self) -> int:
        """Score the exam: +1 per correct answer, -1 per wrong answer.

        Blank answers count 0, so the net score may be negative.
        """
        if not self._questions:
            raise GradingError()

        score = 0
        for question, answer in zip(self._questions, self._answers):
            if answer == question.correct_answer:
                score += 1
            elif answer:
                score -= 1  # penalty for wrong answer
        return score

    def describe(self) -> list[str]:
        return super().describe() + [f"Total Questions: {self.question_count}"]


@dataclass
class EssayExam(Exam):
    """Free-form exam scored manually on a 0-100 scale."""

    score_label: ClassVar[str] = "Essay Exam Score"

    topic: str
    _score: int = field(default=UNGRADED, init=False, repr=False)

    @property
    def score(self) -> int:
        return self._score

    @property
    def is_graded(self) -> bool:
        return self._score != UNGRADED

    def assign_score(self, score: int) -> None:
        if score < MIN_ESSAY_SCORE or score > MAX_ESSAY_SCORE:
            raise GradingError(
                f"Essay score must be between {MIN_ESSAY_SCORE} and "
                f"{MAX_ESSAY_SCORE}, got {score}"
            )
        self._score = score

    def grade(self) -> int:
        if not self.is_graded:
            raise NotYetGradedError()
        return self._score

    def describe(self) -> list[str]:
        return super().describe() + [f"Essay Topic: {self.topic}"]
