from fastapi import status


class TravelyError(Exception):
    """Base class for errors raised by the booking and identity services"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(TravelyError):
    """Entity id absent (also used when a booking belongs to someone else)"""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthenticatedError(TravelyError):
    """Operation requires a logged-in identity"""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(TravelyError):
    """Login with an unknown username"""

    status_code = status.HTTP_401_UNAUTHORIZED


class InsufficientInventoryError(TravelyError):
    """Seat request exceeds the option's availability"""

    status_code = status.HTTP_409_CONFLICT


class AlreadyCancelledError(TravelyError):
    """Booking is already in its terminal state"""

    status_code = status.HTTP_409_CONFLICT


class ConflictError(TravelyError):
    """Duplicate registration"""

    status_code = status.HTTP_409_CONFLICT


class InputValidationError(TravelyError):
    """Blank or invalid required field"""

    status_code = status.HTTP_400_BAD_REQUEST
