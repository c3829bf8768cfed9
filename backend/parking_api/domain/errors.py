class ParkingError(Exception):
    """Base class for parking lot domain errors."""


class AlreadyInitializedError(ParkingError):
    pass


class InvalidArgumentError(ParkingError):
    pass


class LotFullError(ParkingError):
    pass


class SlotNotFoundError(ParkingError):
    pass


class SlotAlreadyFreeError(ParkingError):
    pass
