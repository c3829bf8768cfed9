import asyncio

import pytest
from parking_api.infrastructure.repositories import InMemoryParkingLotRepository
from parking_api.models import Vehicle


def test_append_numbers_slots_sequentially() -> None:
    repo = InMemoryParkingLotRepository()
    assert not repo.initialized
    repo.append(3)
    repo.append(2)
    assert [slot.slot_number for slot in repo.list_slots()] == [1, 2, 3, 4, 5]
    assert repo.total_slots == 5
    assert repo.next_slot_number == 6
    assert repo.initialized


def test_remove_keeps_counter_monotonic() -> None:
    repo = InMemoryParkingLotRepository()
    repo.append(3)
    removed = repo.remove(3)
    assert removed is not None and removed.slot_number == 3
    assert repo.remove(3) is None
    new_slots = repo.append(1)
    assert new_slots[0].slot_number == 4
    assert [slot.slot_number for slot in repo.list_slots()] == [1, 2, 4]


def test_find_by_registration_ignores_free_slots() -> None:
    repo = InMemoryParkingLotRepository()
    repo.append(2)
    repo.list_slots()[1].park(Vehicle("KA-02", "Blue"))
    slot = repo.find_by_registration("KA-02")
    assert slot is not None and slot.slot_number == 2
    assert repo.find_by_registration("KA-99") is None


def test_list_slots_returns_a_copy() -> None:
    repo = InMemoryParkingLotRepository()
    repo.append(1)
    repo.list_slots().clear()
    assert repo.total_slots == 1


def test_reset_discards_everything() -> None:
    repo = InMemoryParkingLotRepository()
    repo.append(2)
    repo.reset()
    assert repo.total_slots == 0
    assert not repo.initialized


@pytest.mark.asyncio
async def test_transaction_serializes_callers() -> None:
    repo = InMemoryParkingLotRepository()
    order: list[str] = []

    async def worker(name: str) -> None:
        async with repo.transaction():
            order.append(f"{name}-in")
            await asyncio.sleep(0)
            order.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))
    assert order == ["a-in", "a-out", "b-in", "b-out"]
