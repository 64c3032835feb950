"""Application service: Grade Exam use case.

Works against the abstract ``Exam`` interface.  Grading errors are
not handled here; they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging

from polydemo.application.dto import ExamScoreDTO
from polydemo.domain.model.exam import Exam

logger = logging.getLogger(__name__)


class GradeExamHandler:

    def handle(self, exam: Exam) -> ExamScoreDTO:
        """Grade *exam*."""
        score = exam.grade()
        logger.debug("Graded exam #%d (%s): %d", exam.exam_id, exam.subject, score)
        return ExamScoreDTO(exam_id=exam.exam_id, label=exam.score_label, score=score)
