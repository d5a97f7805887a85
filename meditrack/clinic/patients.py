from loguru import logger

from meditrack.clinic.ids import IdIssuer
from meditrack.clinic.store import EntityStore
from meditrack.clinic.validation import validate_patient
from meditrack.domain.models import Contact, Identity, Patient


class PatientRegistry:
    """Registers patients and answers queries about them."""

    def __init__(self, ids: IdIssuer) -> None:
        self._ids = ids
        self._store: EntityStore[Patient] = EntityStore()

    def register(
        self,
        name: str,
        email: str,
        phone_number: str,
        age: int,
        medical_history: str = "",
    ) -> Patient:
        """Validate the fields, issue an id and store the new patient.

        Raises:
            InvalidDataError: If name, email, phone or age is invalid.
        """
        validate_patient(name, email, phone_number, age)

        patient = Patient(
            identity=Identity(id=self._ids.next_patient_id(), name=name),
            contact=Contact(email=email, phone_number=phone_number),
            age=age,
            medical_history=medical_history or "",
        )
        self._store.add(patient)

        logger.info("Patient registered: id={}", patient.id)
        return patient

    def get_by_id(self, patient_id: str) -> Patient | None:
        patient = next((p for p in self._store.get_all() if p.matches_id(patient_id)), None)
        if patient is None:
            logger.debug("No patient found for id={}", patient_id)
        return patient

    def get_by_name(self, name: str) -> Patient | None:
        return next((p for p in self._store.get_all() if p.matches_name(name)), None)

    def get_by_age_range(self, min_age: int, max_age: int) -> list[Patient]:
        """Patients whose age lies in ``[min_age, max_age]``."""
        return [p for p in self._store.get_all() if min_age <= p.age <= max_age]

    def update_contact(self, patient_id: str, email: str, phone_number: str) -> bool:
        """Replace a patient's email and phone.

        Returns:
            True if the patient exists and was updated, False if the id is unknown.

        Raises:
            InvalidDataError: If the new email or phone is invalid.
        """
        patient = self.get_by_id(patient_id)
        if patient is None:
            return False

        validate_patient(patient.name, email, phone_number, patient.age)
        patient.contact = Contact(email=email, phone_number=phone_number)

        logger.info("Patient {} contact details updated", patient.id)
        return True

    def update_medical_history(self, patient_id: str, medical_history: str) -> bool:
        patient = self.get_by_id(patient_id)
        if patient is None:
            return False

        patient.medical_history = medical_history
        logger.info("Patient {} medical history updated", patient.id)
        return True

    def remove(self, patient_id: str) -> bool:
        """Remove a patient.  Existing appointments keep their reference to the id."""
        patient = self.get_by_id(patient_id)
        if patient is None:
            return False

        removed = self._store.remove(patient)
        if removed:
            logger.info("Patient removed: id={}", patient.id)
        return removed

    def get_all(self) -> list[Patient]:
        return self._store.get_all()
