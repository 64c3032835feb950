"""Unit tests for the shared Exam invariants."""

import pytest

from polydemo.domain.exceptions import InvalidDurationError, ValidationError
from polydemo.domain.model.exam import EssayExam, Exam, MultipleChoiceExam


class TestExamDuration:

    @pytest.mark.parametrize("duration", [0, -1, -60])
    def test_non_positive_duration_rejected_for_essay(self, duration):
        with pytest.raises(InvalidDurationError, match="greater than 0"):
            EssayExam(103, "Science", duration, "Explain photosynthesis.")

    @pytest.mark.parametrize("duration", [0, -1, -60])
    def test_non_positive_duration_rejected_for_multiple_choice(self, duration):
        with pytest.raises(InvalidDurationError, match="greater than 0"):
            MultipleChoiceExam(101, "Math", duration)

    @pytest.mark.parametrize("duration", [1, 45, 180])
    def test_positive_duration_accepted(self, duration):
        exam = MultipleChoiceExam(101, "Math", duration)
        assert exam.duration == duration

    def test_invalid_duration_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            MultipleChoiceExam(101, "Math", 0)

    @pytest.mark.parametrize("duration", [0, -5])
    def test_reassigning_non_positive_duration_rejected(self, duration):
        exam = MultipleChoiceExam(101, "Math", 60)
        with pytest.raises(InvalidDurationError):
            exam.duration = duration
        assert exam.duration == 60

    def test_reassigning_positive_duration_accepted(self):
        exam = EssayExam(102, "English", 45, "Discuss the impact of social media.")
        exam.duration = 90
        assert exam.describe()[2] == "Duration: 90 minutes"


class TestExamContract:

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Exam(1, "Nothing", 10)

    def test_shared_detail_lines(self):
        exam = EssayExam(102, "English", 45, "Discuss the impact of social media.")
        assert exam.describe()[:3] == [
            "Exam ID: 102",
            "Subject: English",
            "Duration: 45 minutes",
        ]
