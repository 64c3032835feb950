"""Composition root — builds the demo entities the CLI drivers use.

This is the only place that knows which concrete vehicles make up the
demo fleet and which questions go into the demo exam.
"""

from __future__ import annotations

from polydemo.domain.model.exam import MultipleChoiceExam
from polydemo.domain.model.vehicle import SUV, Car, Truck, Vehicle

DEFAULT_RENTAL_DAYS = 3


def demo_fleet() -> list[Vehicle]:
    return [
        Car("Toyota", "Corolla", 2022, num_doors=4),
        SUV("Ford", "Explorer", 2021, four_wheel_drive=True),
        Truck("Volvo", "FH16", 2020, cargo_capacity=10.5),
    ]


def demo_multiple_choice_exam() -> MultipleChoiceExam:
    """Math exam with two questions, one answered right and one wrong."""
    exam = MultipleChoiceExam(101, "Math", 60)
    exam.add_question("What is 2 + 2?", ["2", "3", "4", "5"], "C")
    exam.add_question("What color is the sky?", ["Blue", "Red", "Green", "Yellow"], "A")

    exam.submit_answer(0, "C")
    exam.submit_answer(1, "B")
    return exam
