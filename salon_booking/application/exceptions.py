class BookingError(RuntimeError):
    """Base class for booking and salon administration failures."""
    pass


class ServiceNotFoundError(BookingError):
    """Raised when a service id is not in the catalog."""
    pass


class SlotUnavailableError(BookingError):
    """Raised when the requested start time is no longer bookable."""
    pass


class BookingWindowError(BookingError):
    """Raised when a booking date is in the past or too far ahead."""
    pass


class AppointmentNotFoundError(BookingError):
    pass


class InvalidStatusTransitionError(BookingError):
    """Raised when an appointment status change is not allowed (e.g. out of cancelled)."""
    pass


class DayOffNotFoundError(BookingError):
    pass


class DuplicateDayOffError(BookingError):
    """Raised when a day off already exists for the date."""
    pass
