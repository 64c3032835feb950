"""CLI command for the exam grading demo.

The demo ends by constructing an exam with a zero duration, which
raises.  Domain errors are reported on stderr and the command still
exits 0.  Details are always shown before an exam is scored, so they
are on stdout even when grading fails.
"""

from __future__ import annotations

import logging

import click

from polydemo.application.grade_exam import GradeExamHandler
from polydemo.application.show_exam import ShowExamHandler
from polydemo.domain.exceptions import (
    DomainException,
    GradingError,
    InvalidDurationError,
)
from polydemo.domain.model.exam import EssayExam, Exam
from polydemo.infrastructure.bootstrap import demo_multiple_choice_exam

logger = logging.getLogger(__name__)


def _display_details(exam: Exam) -> None:
    for line in ShowExamHandler().handle(exam).lines:
        click.echo(line)


def _display_score(exam: Exam) -> None:
    click.echo(GradeExamHandler().handle(exam).score_line)
    click.echo()


def _report_error(label: str, exc: DomainException) -> None:
    logger.debug("Demo raised %r", exc)
    click.echo(f"Caught {label}: {exc}", err=True)
    click.echo(err=True)


@click.command("exams")
def exams() -> None:
    """Grade the demo exams and show error handling."""
    try:
        mc_exam = demo_multiple_choice_exam()
        _display_details(mc_exam)
        _display_score(mc_exam)

        essay = EssayExam(102, "English", 45, "Discuss the impact of social media.")
        _display_details(essay)
        essay.assign_score(85)
        _display_score(essay)

        # Zero duration: the constructor raises, nothing after this runs
        EssayExam(103, "Science", 0, "Explain photosynthesis.")
    except InvalidDurationError as exc:
        _report_error("InvalidDurationError", exc)
    except GradingError as exc:
        _report_error("GradingError", exc)
    except DomainException as exc:
        _report_error(f"DomainException ({type(exc).__name__})", exc)
