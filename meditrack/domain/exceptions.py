class ClinicError(Exception):
    """Base exception for all clinic business failures."""


class InvalidDataError(ClinicError):
    """Raised when input is malformed or breaks a booking rule."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class AppointmentNotFoundError(ClinicError):
    """Raised when a lifecycle operation references an unknown appointment."""

    MESSAGE = "Appointment not found"

    def __init__(self, appointment_id: str | None = None) -> None:
        self.appointment_id = appointment_id
        super().__init__(self.MESSAGE)
