from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Vehicle:
    registration_number: str
    color: str


@dataclass
class Slot:
    slot_number: int
    vehicle: Optional[Vehicle] = None

    @property
    def is_occupied(self) -> bool:
        return self.vehicle is not None

    def park(self, vehicle: Vehicle) -> None:
        self.vehicle = vehicle

    def clear(self) -> None:
        self.vehicle = None
