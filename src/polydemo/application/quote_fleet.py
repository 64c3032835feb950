"""Application service: Quote Fleet use case (query).

Prices every vehicle in a fleet through the abstract ``Vehicle``
interface only; the handler never looks at the concrete type.
"""

from __future__ import annotations

import logging
from typing import Iterable

from polydemo.application.dto import VehicleQuoteDTO
from polydemo.domain.model.vehicle import CURRENCY, Vehicle

logger = logging.getLogger(__name__)


class QuoteFleetHandler:

    def __init__(self, fleet: Iterable[Vehicle]) -> None:
        self._fleet = list(fleet)

    def handle(self, days: int) -> list[VehicleQuoteDTO]:
        quotes: list[VehicleQuoteDTO] = []
        for vehicle in self._fleet:
            cost = vehicle.rental_cost(days)
            logger.debug(
                "Quoted %s %s for %d days: %s%d",
                vehicle.make, vehicle.model, days, CURRENCY, cost,
            )
            quotes.append(
                VehicleQuoteDTO(
                    lines=vehicle.describe(),
                    days=days,
                    cost=cost,
                    currency=CURRENCY,
                )
            )
        return quotes
