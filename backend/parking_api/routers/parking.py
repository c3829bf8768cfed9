from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..deps import get_parking_lot
from ..domain.errors import (
    AlreadyInitializedError,
    InvalidArgumentError,
    LotFullError,
    SlotAlreadyFreeError,
    SlotNotFoundError,
)
from ..infrastructure.repositories import InMemoryParkingLotRepository
from ..schemas import (
    AllocatedSlotRead,
    CarPark,
    FreedSlotRead,
    ParkingLotCreate,
    ParkingLotExpand,
    ParkingLotRead,
    SlotClear,
    SlotDeleted,
    SlotNumberRead,
    SlotRead,
    SlotStatusRead,
    SlotUpdate,
)
from ..usecases import parking_lot as parking_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="/parking", tags=["parking"])


def _parse_slot_number(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid slot number") from exc


@router.post("/parking_lot", response_model=ParkingLotRead, status_code=status.HTTP_201_CREATED)
async def initialize_parking_lot(
    payload: ParkingLotCreate,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> ParkingLotRead:
    async with repo.transaction():
        try:
            total = parking_usecase.initialize_lot(repo, capacity=payload.no_of_slot)
        except (AlreadyInitializedError, InvalidArgumentError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    emit_audit_log(action="parking_lot.initialized", total_slots=total)
    return ParkingLotRead(total_slot=total)


@router.patch("/parking_lot", response_model=ParkingLotRead)
async def expand_parking_lot(
    payload: ParkingLotExpand,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> ParkingLotRead:
    async with repo.transaction():
        try:
            total = parking_usecase.expand_lot(repo, increment=payload.increment_slot)
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    emit_audit_log(action="parking_lot.expanded", total_slots=total, extra={"increment": payload.increment_slot})
    return ParkingLotRead(total_slot=total)


@router.post("/park", response_model=AllocatedSlotRead, status_code=status.HTTP_201_CREATED)
async def park_car(
    payload: CarPark,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> AllocatedSlotRead:
    vehicle = payload.to_vehicle()
    async with repo.transaction():
        try:
            slot = parking_usecase.allocate_slot(repo, vehicle=vehicle)
        except LotFullError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    emit_audit_log(
        action="slot.allocated",
        slot_number=slot.slot_number,
        registration_number=vehicle.registration_number,
        color=vehicle.color,
    )
    return AllocatedSlotRead(allocated_slot_number=slot.slot_number)


@router.post("/clear", response_model=FreedSlotRead, status_code=status.HTTP_201_CREATED)
async def clear_slot(
    payload: SlotClear,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> FreedSlotRead:
    async with repo.transaction():
        try:
            slot, vehicle = parking_usecase.free_slot(
                repo,
                slot_number=payload.slot_number,
                registration_number=payload.car_registration_no,
            )
        except SlotNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        except (InvalidArgumentError, SlotAlreadyFreeError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    emit_audit_log(
        action="slot.freed",
        slot_number=slot.slot_number,
        registration_number=vehicle.registration_number,
        color=vehicle.color,
    )
    return FreedSlotRead(freed_slot_number=slot.slot_number)


@router.get("/registration_numbers/{color}", response_model=List[str])
async def list_registration_numbers_by_color(
    color: str,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> list[str]:
    return parking_usecase.registration_numbers_by_color(repo, color=color)


@router.get("/slot_numbers/{color}", response_model=List[int])
async def list_slot_numbers_by_color(
    color: str,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> list[int]:
    return parking_usecase.slot_numbers_by_color(repo, color=color)


@router.get("/status", response_model=List[SlotStatusRead])
async def list_occupied_slots(
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> list[SlotStatusRead]:
    return [SlotStatusRead.from_summary(summary) for summary in parking_usecase.occupied_slots(repo)]


@router.get("/slot_number", response_model=SlotNumberRead)
async def get_slot_number_by_registration(
    registrationNumber: Optional[str] = Query(default=None),
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> SlotNumberRead:
    if not registrationNumber:
        return SlotNumberRead(slot_number=None)
    slot_number = parking_usecase.slot_number_by_registration(repo, registration_number=registrationNumber)
    return SlotNumberRead(slot_number=slot_number)


@router.get("/{slot_number}", response_model=SlotRead)
async def get_slot(
    slot_number: str,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> SlotRead:
    number = _parse_slot_number(slot_number)
    try:
        slot = parking_usecase.get_slot(repo, slot_number=number)
    except SlotNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return SlotRead.from_domain(slot=slot)


@router.put("/{slot_number}", response_model=SlotRead)
async def update_slot(
    slot_number: str,
    payload: SlotUpdate,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> SlotRead:
    number = _parse_slot_number(slot_number)
    async with repo.transaction():
        try:
            slot = parking_usecase.update_slot(
                repo,
                slot_number=number,
                registration_number=payload.registrationNumber,
                color=payload.color,
            )
        except SlotNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        result = SlotRead.from_domain(slot=slot)

    emit_audit_log(
        action="slot.updated",
        slot_number=result.slotNumber,
        registration_number=result.car.registrationNumber if result.car else None,
        color=result.car.color if result.car else None,
        extra={"occupied": result.isOccupied},
    )
    return result


@router.delete("/{slot_number}", response_model=SlotDeleted)
async def delete_slot(
    slot_number: str,
    repo: InMemoryParkingLotRepository = Depends(get_parking_lot),
) -> SlotDeleted:
    number = _parse_slot_number(slot_number)
    async with repo.transaction():
        try:
            total = parking_usecase.delete_slot(repo, slot_number=number)
        except SlotNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    emit_audit_log(action="slot.deleted", slot_number=number, total_slots=total)
    return SlotDeleted(message=f"Slot {number} deleted successfully", total_slot=total)
