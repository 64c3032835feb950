"""Domain-level exceptions.

Every rule violation in the rental and exam models is a subclass of
DomainException, so the CLI driver can catch the specific kinds first and
fall back to the base class.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    default_message = "Domain error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    default_message = "Validation failed."


class InvalidDurationError(ValidationError):
    """An exam was constructed with a non-positive duration."""

    default_message = "Exam duration must be greater than 0."


class CapacityExceededError(ValidationError):
    """A multiple choice exam already holds the maximum number of questions."""

    default_message = "Too many questions."


class QuestionIndexError(ValidationError):
    """An answer was submitted for a question that does not exist."""

    default_message = "Invalid question index."


class GradingError(DomainException):
    """Grading is impossible, or a score is out of range."""

    default_message = "Error occurred during grading."


class NotYetGradedError(DomainException):
    """An essay score was read before one was assigned."""

    default_message = "Essay has not been graded yet."
