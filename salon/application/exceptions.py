class SchedulingError(ValueError):
    """Base class for appointment validation failures."""
    pass


class InvalidTimeError(SchedulingError):
    """Raised for malformed HH:MM input or a duration outside a single day."""
    pass


class BookingValidationError(SchedulingError):
    """Raised when an appointment draft cannot be booked as submitted."""
    pass


class InvalidStatusTransitionError(SchedulingError):
    """Raised when moving an appointment out of a terminal status."""
    pass


class AppointmentNotFoundError(LookupError):
    pass


class BackendUpstreamError(RuntimeError):
    """Raised when the hosted data store fails (timeouts, network errors, error responses)."""
    pass
