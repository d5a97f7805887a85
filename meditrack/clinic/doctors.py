from typing import Any

from loguru import logger

from meditrack.clinic.ids import IdIssuer
from meditrack.clinic.store import EntityStore
from meditrack.clinic.validation import validate_doctor
from meditrack.domain.models import Contact, Doctor, DoctorAvailability, Identity

# Marks an omitted availability, as opposed to an explicit None.
_REGISTRY_DEFAULT: Any = object()


class DoctorRegistry:
    """Registers doctors and answers queries about them."""

    def __init__(
        self,
        ids: IdIssuer,
        default_availability: DoctorAvailability = DoctorAvailability.AVAILABLE,
    ) -> None:
        self._ids = ids
        self._default_availability = default_availability
        self._store: EntityStore[Doctor] = EntityStore()

    def register(
        self,
        name: str,
        email: str,
        phone_number: str,
        specialty: str,
        license_number: str,
        availability: DoctorAvailability | None = _REGISTRY_DEFAULT,
    ) -> Doctor:
        """Validate the fields, issue an id and store the new doctor.

        Args:
            name: Display name, e.g. ``"Dr. Jane Smith"``.
            email: Contact email.
            phone_number: Ten-digit phone number.
            specialty: Free-text specialty; see ``Specialty`` for common ones.
            license_number: Medical license number.
            availability: Initial state.  Omitted means the registry default;
                an explicit None means NOT_AVAILABLE.

        Returns:
            The registered doctor.

        Raises:
            InvalidDataError: If name, email or phone is invalid.
            ValidationError: If specialty or license number is not a string.
                That is a caller contract violation, not bad user input.
        """
        validate_doctor(name, email, phone_number)
        if availability is _REGISTRY_DEFAULT:
            availability = self._default_availability

        doctor = Doctor(
            identity=Identity(id=self._ids.next_doctor_id(), name=name),
            contact=Contact(email=email, phone_number=phone_number),
            specialty=specialty,
            license_number=license_number,
            availability=availability,
        )
        self._store.add(doctor)

        logger.info(
            "Doctor registered: id={}, specialty={}, availability={}",
            doctor.id,
            doctor.specialty,
            doctor.availability.value,
        )
        return doctor

    def get_by_id(self, doctor_id: str) -> Doctor | None:
        doctor = next((d for d in self._store.get_all() if d.matches_id(doctor_id)), None)
        if doctor is None:
            logger.debug("No doctor found for id={}", doctor_id)
        return doctor

    def get_by_name(self, name: str) -> Doctor | None:
        return next((d for d in self._store.get_all() if d.matches_name(name)), None)

    def get_by_specialty(self, specialty: str | None) -> list[Doctor]:
        if specialty is None:
            return []
        wanted = specialty.lower()
        return [d for d in self._store.get_all() if d.specialty.lower() == wanted]

    def get_available(self) -> list[Doctor]:
        return [d for d in self._store.get_all() if d.available]

    def set_availability(self, doctor_id: str, availability: DoctorAvailability | bool) -> None:
        """Change a doctor's availability.  Unknown ids are ignored.

        A bool is accepted as a shortcut for AVAILABLE / NOT_AVAILABLE.
        """
        doctor = self.get_by_id(doctor_id)
        if doctor is None:
            return

        if isinstance(availability, bool):
            doctor.set_available(availability)
        else:
            doctor.availability = availability

        logger.info("Doctor {} availability set to {}", doctor.id, doctor.availability.value)

    def update_contact(self, doctor_id: str, email: str, phone_number: str) -> bool:
        """Replace a doctor's email and phone.

        Returns:
            True if the doctor exists and was updated, False if the id is unknown.

        Raises:
            InvalidDataError: If the new email or phone is invalid.
        """
        doctor = self.get_by_id(doctor_id)
        if doctor is None:
            return False

        validate_doctor(doctor.name, email, phone_number)
        doctor.contact = Contact(email=email, phone_number=phone_number)

        logger.info("Doctor {} contact details updated", doctor.id)
        return True

    def remove(self, doctor_id: str) -> bool:
        """Remove a doctor.  Existing appointments keep their reference to the id."""
        doctor = self.get_by_id(doctor_id)
        if doctor is None:
            return False

        removed = self._store.remove(doctor)
        if removed:
            logger.info("Doctor removed: id={}", doctor.id)
        return removed

    def get_all(self) -> list[Doctor]:
        return self._store.get_all()
