from typing import List, Optional

from ..domain.errors import AlreadyInitializedError, InvalidArgumentError, SlotAlreadyFreeError, SlotNotFoundError
from ..domain.repositories import ParkingLotRepository
from ..domain.services import SlotSummary, first_free_slot, matches_color, merge_vehicle, require_positive, summarize
from ..models import Slot, Vehicle


def initialize_lot(repo: ParkingLotRepository, *, capacity: int) -> int:
    if repo.initialized:
        raise AlreadyInitializedError("Parking lot already initialized")
    require_positive(capacity, message="Number of slots must be greater than 0")
    repo.append(capacity)
    return repo.total_slots


def expand_lot(repo: ParkingLotRepository, *, increment: int) -> int:
    require_positive(increment, message="Increment slot must be greater than 0")
    repo.append(increment)
    return repo.total_slots


def allocate_slot(repo: ParkingLotRepository, *, vehicle: Vehicle) -> Slot:
    slot = first_free_slot(repo.list_slots())
    slot.park(vehicle)
    return slot


def free_slot(
    repo: ParkingLotRepository,
    *,
    slot_number: Optional[int] = None,
    registration_number: Optional[str] = None,
) -> tuple[Slot, Vehicle]:
    """Free an occupied slot. Returns the slot together with the vehicle that left it."""
    # Slot numbers start at 1, so 0 counts as no selector.
    if slot_number:
        slot = repo.get(slot_number)
    elif registration_number:
        slot = repo.find_by_registration(registration_number)
    else:
        raise InvalidArgumentError("Invalid request. Provide either slot_number or car_registration_no")

    if slot is None:
        raise SlotNotFoundError("Slot not found")
    vehicle = slot.vehicle
    if vehicle is None:
        raise SlotAlreadyFreeError("Slot is already free")

    slot.clear()
    return slot, vehicle


def get_slot(repo: ParkingLotRepository, *, slot_number: int) -> Slot:
    slot = repo.get(slot_number)
    if slot is None:
        raise SlotNotFoundError("Slot not found")
    return slot


def update_slot(
    repo: ParkingLotRepository,
    *,
    slot_number: int,
    registration_number: Optional[str] = None,
    color: Optional[str] = None,
) -> Slot:
    slot = get_slot(repo, slot_number=slot_number)
    vehicle = merge_vehicle(slot.vehicle, registration_number=registration_number, color=color)
    if vehicle is None:
        slot.clear()
    else:
        slot.park(vehicle)
    return slot


def delete_slot(repo: ParkingLotRepository, *, slot_number: int) -> int:
    """Remove a slot for good. Returns the number of slots left; remaining slots keep their numbers."""
    if repo.remove(slot_number) is None:
        raise SlotNotFoundError("Slot not found")
    return repo.total_slots


def registration_numbers_by_color(repo: ParkingLotRepository, *, color: str) -> List[str]:
    return [
        slot.vehicle.registration_number
        for slot in repo.list_slots()
        if slot.vehicle is not None and matches_color(slot, color)
    ]


def slot_numbers_by_color(repo: ParkingLotRepository, *, color: str) -> List[int]:
    return [slot.slot_number for slot in repo.list_slots() if matches_color(slot, color)]


def occupied_slots(repo: ParkingLotRepository) -> List[SlotSummary]:
    return [summarize(slot) for slot in repo.list_slots() if slot.is_occupied]


def slot_number_by_registration(repo: ParkingLotRepository, *, registration_number: str) -> Optional[int]:
    slot = repo.find_by_registration(registration_number)
    return slot.slot_number if slot is not None else None
