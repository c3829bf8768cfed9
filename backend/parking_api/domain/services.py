from typing import Iterable, NamedTuple, Optional

from ..models import Slot, Vehicle
from .errors import InvalidArgumentError, LotFullError

NOT_AVAILABLE = "N/A"


class SlotSummary(NamedTuple):
    slot_no: int
    registration_no: str
    color: str


def require_positive(value: int, *, message: str) -> int:
    if value <= 0:
        raise InvalidArgumentError(message)
    return value


def first_free_slot(slots: Iterable[Slot]) -> Slot:
    """
    Pure selection: returns the lowest-numbered free slot.
    `slots` must already be in slot-number order. Raises LotFullError when every slot is taken.
    """
    for slot in slots:
        if not slot.is_occupied:
            return slot
    raise LotFullError("Parking lot is full")


def merge_vehicle(
    current: Optional[Vehicle],
    *,
    registration_number: Optional[str],
    color: Optional[str],
) -> Optional[Vehicle]:
    """
    Combine supplied vehicle fields with the vehicle already parked.
    Returns None when no non-empty field is supplied, meaning the slot should be cleared.
    Otherwise only fields left as None fall back to the parked vehicle, then to "".
    """
    if not registration_number and not color:
        return None
    return Vehicle(
        registration_number=(
            registration_number
            if registration_number is not None
            else (current.registration_number if current else "")
        ),
        color=color if color is not None else (current.color if current else ""),
    )


def summarize(slot: Slot) -> SlotSummary:
    vehicle = slot.vehicle
    return SlotSummary(
        slot_no=slot.slot_number,
        registration_no=vehicle.registration_number if vehicle is not None else NOT_AVAILABLE,
        color=vehicle.color if vehicle is not None else NOT_AVAILABLE,
    )


def matches_color(slot: Slot, color: str) -> bool:
    return slot.vehicle is not None and slot.vehicle.color == color
