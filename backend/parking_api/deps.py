from fastapi import Request

from .infrastructure.repositories import InMemoryParkingLotRepository


async def get_parking_lot(request: Request) -> InMemoryParkingLotRepository:
    return request.app.state.parking_lot
