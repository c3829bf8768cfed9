from typing import Optional

from pydantic import BaseModel, Field

from .domain.services import SlotSummary
from .models import Slot, Vehicle


class ParkingLotCreate(BaseModel):
    no_of_slot: int


class ParkingLotExpand(BaseModel):
    increment_slot: int


class ParkingLotRead(BaseModel):
    total_slot: int


class CarPark(BaseModel):
    registrationNumber: str = Field(min_length=1)
    color: str = Field(min_length=1)

    def to_vehicle(self) -> Vehicle:
        return Vehicle(registration_number=self.registrationNumber, color=self.color)


class AllocatedSlotRead(BaseModel):
    allocated_slot_number: int


class SlotClear(BaseModel):
    slot_number: Optional[int] = None
    car_registration_no: Optional[str] = None


class FreedSlotRead(BaseModel):
    freed_slot_number: int


class SlotStatusRead(BaseModel):
    slot_no: int
    registration_no: str
    color: str

    @classmethod
    def from_summary(cls, summary: SlotSummary) -> "SlotStatusRead":
        return cls(slot_no=summary.slot_no, registration_no=summary.registration_no, color=summary.color)


class SlotNumberRead(BaseModel):
    slot_number: Optional[int]


class SlotUpdate(BaseModel):
    slotNumber: int
    registrationNumber: Optional[str] = None
    color: Optional[str] = None


class CarRead(BaseModel):
    registrationNumber: str
    color: str


class SlotRead(BaseModel):
    slotNumber: int
    isOccupied: bool
    car: Optional[CarRead] = None

    @classmethod
    def from_domain(cls, *, slot: Slot) -> "SlotRead":
        car = None
        if slot.vehicle is not None:
            car = CarRead(registrationNumber=slot.vehicle.registration_number, color=slot.vehicle.color)
        return cls(slotNumber=slot.slot_number, isOccupied=slot.is_occupied, car=car)


class SlotDeleted(BaseModel):
    message: str
    total_slot: int
