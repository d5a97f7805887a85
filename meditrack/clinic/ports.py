from typing import Protocol, runtime_checkable

from meditrack.domain.models import Doctor, Patient


@runtime_checkable
class Searchable(Protocol):
    """An entity that can be found by identifier or name."""

    def matches_id(self, id: str | None) -> bool:
        """Case-insensitive identifier match. ``None`` never matches."""
        ...

    def matches_name(self, name: str | None) -> bool:
        """Case-insensitive name match. ``None`` never matches."""
        ...


@runtime_checkable
class Payable(Protocol):
    """Something that carries an amount and can be settled."""

    @property
    def amount(self) -> float:
        """Total amount due."""
        ...

    @property
    def is_paid(self) -> bool:
        """Whether the amount has been settled."""
        ...

    def mark_as_paid(self) -> None:
        """Settle the amount now."""
        ...


class DoctorLookup(Protocol):
    """Read-only view of the doctor registry used by the appointment engine."""

    def get_by_id(self, doctor_id: str) -> Doctor | None:
        """Return the first doctor whose id matches, or None."""
        ...


class PatientLookup(Protocol):
    """Read-only view of the patient registry used by the appointment engine."""

    def get_by_id(self, patient_id: str) -> Patient | None:
        """Return the first patient whose id matches, or None."""
        ...
