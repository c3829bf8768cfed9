from __future__ import annotations

from typing import AsyncContextManager, Protocol

from ..models import Slot


class ParkingLotRepository(Protocol):
    @property
    def total_slots(self) -> int: ...

    @property
    def next_slot_number(self) -> int: ...

    @property
    def initialized(self) -> bool: ...

    def transaction(self) -> AsyncContextManager[None]: ...

    def list_slots(self) -> list[Slot]: ...

    def get(self, slot_number: int) -> Slot | None: ...

    def find_by_registration(self, registration_number: str) -> Slot | None: ...

    def append(self, count: int) -> list[Slot]: ...

    def remove(self, slot_number: int) -> Slot | None: ...
