"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display lines and computed figures from the application
handlers to the CLI without exposing the entity objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleQuoteDTO:
    """Output: one vehicle's description and its rental price."""

    lines: list[str]
    days: int
    cost: int
    currency: str

    @property
    def cost_line(self) -> str:
        return f"Rental Cost for {self.days} days: {self.currency}{self.cost}"


@dataclass(frozen=True)
class ExamDetailsDTO:
    """Output: one exam's display lines, before any grading."""

    exam_id: int
    lines: list[str]


@dataclass(frozen=True)
class ExamScoreDTO:
    """Output: one exam's grade and the label it is shown under."""

    exam_id: int
    label: str
    score: int

    @property
    def score_line(self) -> str:
        return f"{self.label}: {self.score}"
