class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Input rejected before any state change"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidTransitionError(DomainError):
    """Booking status machine violation, e.g. approving a cancelled booking"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """Lost the race for a seat; the booking was not created"""


class AuthenticationFailedError(CustomBaseError):
    def __init__(self, message: str = 'Invalid credentials') -> None:
        super().__init__(message, 401)


class StoreUnavailableError(CustomBaseError):
    """Transient persistence failure; the operation was rolled back and may be retried"""

    def __init__(self, message: str = 'Store temporarily unavailable') -> None:
        super().__init__(message, 503)


# ========== Seat Registry ==========


class SeatUnavailableError(ConflictError):
    def __init__(self, seat_number: int) -> None:
        self.seat_number = seat_number
        super().__init__(f'Seat {seat_number} is not available')


class SeatOccupiedError(ConflictError):
    def __init__(self, seat_number: int) -> None:
        self.seat_number = seat_number
        super().__init__(f'Seat {seat_number} is occupied by an active booking')


class InvalidSeatError(NotFoundError):
    def __init__(self, seat_number: int) -> None:
        self.seat_number = seat_number
        super().__init__(f'Seat {seat_number} does not exist')


class AlreadyInitializedError(ConflictError):
    def __init__(self, *, existing: int, requested: int) -> None:
        super().__init__(
            f'Seat registry already holds {existing} seats, cannot initialize with {requested}'
        )
