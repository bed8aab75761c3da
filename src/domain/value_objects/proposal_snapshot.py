"""Price proposal snapshot value objects.

A proposal snapshot holds everything the evaluation handlers need: the
author (statistics, user-stats cache key, notification), the station
(station cache prefix, notification body) and the proposed price.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.value_objects.user_snapshot import UserSnapshot


@dataclass(frozen=True, slots=True, kw_only=True)
class StationSnapshot:
    """Immutable station identity and address.

    Attributes:
        id: Station identifier (used in "station:<id>" cache keys).
        brand_name: Brand shown to the driver (e.g. "Orlen").
        street: Street name.
        house_number: House number.
        city: City name.
    """

    id: UUID
    brand_name: str
    street: str
    house_number: str
    city: str

    def describe(self) -> str:
        """Human-readable one-line station description.

        Returns:
            str: e.g. "Orlen, Main 12, Warsaw".
        """
        return f"{self.brand_name}, {self.street} {self.house_number}, {self.city}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ProposalSnapshot:
    """Immutable price proposal details at event time.

    Attributes:
        id: Proposal identifier.
        author: Driver who submitted the proposal.
        station: Station the proposal refers to.
        fuel_type_code: Fuel type code (e.g. "PB95", "ON").
        proposed_price: Proposed price per litre.
    """

    id: UUID
    author: UserSnapshot
    station: StationSnapshot
    fuel_type_code: str
    proposed_price: Decimal
