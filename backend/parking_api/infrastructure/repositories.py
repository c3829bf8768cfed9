from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from ..domain.repositories import ParkingLotRepository
from ..models import Slot

logger = logging.getLogger(__name__)


class InMemoryParkingLotRepository(ParkingLotRepository):
    """Process-local registry holding every slot of the lot in slot-number order."""

    def __init__(self) -> None:
        self._slots: List[Slot] = []
        self._next_slot_number = 1
        self._lock = asyncio.Lock()

    @property
    def total_slots(self) -> int:
        return len(self._slots)

    @property
    def next_slot_number(self) -> int:
        return self._next_slot_number

    @property
    def initialized(self) -> bool:
        # Numbers are never handed out twice, so any slot ever created moves the counter.
        return self._next_slot_number > 1

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            yield

    def list_slots(self) -> List[Slot]:
        return list(self._slots)

    def get(self, slot_number: int) -> Optional[Slot]:
        for slot in self._slots:
            if slot.slot_number == slot_number:
                return slot
        return None

    def find_by_registration(self, registration_number: str) -> Optional[Slot]:
        for slot in self._slots:
            if slot.vehicle is not None and slot.vehicle.registration_number == registration_number:
                return slot
        return None

    def append(self, count: int) -> List[Slot]:
        start = self._next_slot_number
        new_slots = [Slot(slot_number=start + offset) for offset in range(count)]
        self._slots.extend(new_slots)
        self._next_slot_number = start + count
        logger.debug("appended slots %d..%d", start, self._next_slot_number - 1)
        return new_slots

    def remove(self, slot_number: int) -> Optional[Slot]:
        slot = self.get(slot_number)
        if slot is None:
            return None
        self._slots.remove(slot)
        logger.debug("removed slot %d", slot_number)
        return slot

    def reset(self) -> None:
        self._slots.clear()
        self._next_slot_number = 1
