"""Unit tests for the EssayExam aggregate."""

import pytest

from polydemo.domain.exceptions import GradingError, NotYetGradedError
from polydemo.domain.model.exam import UNGRADED, EssayExam


def _essay() -> EssayExam:
    return EssayExam(102, "English", 45, "Discuss the impact of social media.")


class TestAssignScore:

    def test_starts_ungraded(self):
        essay = _essay()
        assert essay.score == UNGRADED
        assert not essay.is_graded

    @pytest.mark.parametrize("score", [0, 50, 100])
    def test_in_range_accepted(self, score):
        essay = _essay()
        essay.assign_score(score)
        assert essay.score == score
        assert essay.is_graded

    @pytest.mark.parametrize("score", [-1, 101, 250])
    def test_out_of_range_rejected(self, score):
        essay = _essay()
        with pytest.raises(GradingError, match="between 0 and 100"):
            essay.assign_score(score)
        assert not essay.is_graded

    def test_score_cannot_be_set_directly(self):
        essay = _essay()
        with pytest.raises(AttributeError):
            essay.score = 500
        assert not essay.is_graded

    def test_reassign_overwrites(self):
        essay = _essay()
        essay.assign_score(40)
        essay.assign_score(85)
        assert essay.score == 85


class TestGrade:

    def test_grade_before_assignment_rejected(self):
        with pytest.raises(NotYetGradedError, match="not been graded"):
            _essay().grade()

    def test_not_yet_graded_is_not_a_grading_error(self):
        with pytest.raises(NotYetGradedError) as excinfo:
            _essay().grade()
        assert not isinstance(excinfo.value, GradingError)

    def test_grade_returns_assigned_score(self):
        essay = _essay()
        essay.assign_score(85)
        assert essay.grade() == 85


class TestDescribe:

    def test_includes_topic(self):
        assert _essay().describe()[-1] == "Essay Topic: Discuss the impact of social media."
