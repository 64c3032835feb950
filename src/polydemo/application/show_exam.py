"""Application service: Show Exam use case (query).

Collects an exam's details through the abstract ``Exam`` interface.
Never grades, so it works on exams that cannot be graded yet.
"""

from __future__ import annotations

from polydemo.application.dto import ExamDetailsDTO
from polydemo.domain.model.exam import Exam


class ShowExamHandler:

    def handle(self, exam: Exam) -> ExamDetailsDTO:
        return ExamDetailsDTO(exam_id=exam.exam_id, lines=exam.describe())
