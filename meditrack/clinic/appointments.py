import datetime as dt
from typing import Callable, NoReturn

from loguru import logger

from meditrack.clinic.datetime_helpers import is_in_future
from meditrack.clinic.ids import IdIssuer
from meditrack.clinic.ports import DoctorLookup, PatientLookup
from meditrack.clinic.store import EntityStore
from meditrack.domain.exceptions import AppointmentNotFoundError, InvalidDataError
from meditrack.domain.models import Appointment, AppointmentStatus

DOCTOR_NOT_FOUND = "Doctor not found"
PATIENT_NOT_FOUND = "Patient not found"
DOCTOR_NOT_AVAILABLE = "Doctor is not available at this time"
BOOKED_IN_PAST = "Appointment cannot be booked in the past"
RESCHEDULED_IN_PAST = "New appointment time cannot be in the past"


class AppointmentEngine:
    """Books appointments and moves them through their lifecycle.

    SCHEDULED → COMPLETED | CANCELLED.  Status changes are applied without a
    current-state guard, so completing or cancelling a terminal appointment
    again is allowed.  Doctor availability is never touched here, and there is
    no overlap detection: one doctor may hold many bookings at the same instant.

    The doctor and patient registries are only read, never mutated.
    """

    def __init__(
        self,
        doctors: DoctorLookup,
        patients: PatientLookup,
        ids: IdIssuer,
        clock: Callable[[], dt.datetime] | None = None,
    ) -> None:
        self._doctors = doctors
        self._patients = patients
        self._ids = ids
        self._clock = clock
        self._store: EntityStore[Appointment] = EntityStore()

    def _now(self) -> dt.datetime | None:
        return self._clock() if self._clock else None

    def book(
        self,
        doctor_id: str,
        patient_id: str,
        scheduled_at: dt.datetime,
        notes: str | None = "",
    ) -> Appointment:
        """Book a new SCHEDULED appointment.

        Checks run in order and stop at the first failure: doctor exists,
        patient exists, doctor is AVAILABLE, ``scheduled_at`` is strictly in
        the future.

        Args:
            doctor_id: Id of a registered doctor (case-insensitive).
            patient_id: Id of a registered patient (case-insensitive).
            scheduled_at: When the appointment takes place.
            notes: Free-text notes.

        Returns:
            The stored appointment.

        Raises:
            InvalidDataError: If any check fails or the appointment could not
                be stored.
        """
        logger.info("Booking appointment: doctor={}, patient={}", doctor_id, patient_id)

        doctor = self._doctors.get_by_id(doctor_id)
        if doctor is None:
            self._reject(DOCTOR_NOT_FOUND)
        patient = self._patients.get_by_id(patient_id)
        if patient is None:
            self._reject(PATIENT_NOT_FOUND)
        if not doctor.available:
            self._reject(DOCTOR_NOT_AVAILABLE)
        if not is_in_future(scheduled_at, self._now()):
            self._reject(BOOKED_IN_PAST)

        try:
            appointment = Appointment(
                appointment_id=self._ids.next_appointment_id(),
                doctor_id=doctor.id,
                patient_id=patient.id,
                scheduled_at=scheduled_at,
                status=AppointmentStatus.SCHEDULED,
                notes=notes or "",
            )
            self._store.add(appointment)
        except ValueError as exc:
            raise InvalidDataError(f"Failed to book appointment: {exc}") from exc

        if not self._store.contains(appointment):
            raise InvalidDataError("Failed to book appointment: it was not stored")

        logger.info(
            "Appointment booked: id={}, at={}", appointment.appointment_id, scheduled_at
        )
        return appointment

    @staticmethod
    def _reject(reason: str) -> NoReturn:
        logger.warning("Booking rejected: {}", reason)
        raise InvalidDataError(reason)

    def get_by_id(self, appointment_id: str) -> Appointment | None:
        return next(
            (a for a in self._store.get_all() if a.matches_id(appointment_id)),
            None,
        )

    def get_by_patient(self, patient_id: str | None) -> list[Appointment]:
        if patient_id is None:
            return []
        wanted = patient_id.lower()
        return [a for a in self._store.get_all() if a.patient_id.lower() == wanted]

    def get_by_doctor(self, doctor_id: str | None) -> list[Appointment]:
        if doctor_id is None:
            return []
        wanted = doctor_id.lower()
        return [a for a in self._store.get_all() if a.doctor_id.lower() == wanted]

    def get_by_status(self, status: AppointmentStatus | None) -> list[Appointment]:
        """Appointments with exactly ``status``.  ``None`` matches nothing."""
        if status is None:
            return []
        return [a for a in self._store.get_all() if a.status == status]

    def get_all(self) -> list[Appointment]:
        return self._store.get_all()

    def _require(self, appointment_id: str) -> Appointment:
        appointment = self.get_by_id(appointment_id)
        if appointment is None:
            logger.info("Appointment lookup failed: id={}", appointment_id)
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def _set_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        appointment = self._require(appointment_id)
        previous = appointment.status
        appointment.status = status
        logger.info(
            "Appointment {}: {} -> {}", appointment.appointment_id, previous.value, status.value
        )
        return appointment

    def complete(self, appointment_id: str) -> Appointment:
        """Mark an appointment COMPLETED.

        Raises:
            AppointmentNotFoundError: If no appointment has that id.
        """
        return self._set_status(appointment_id, AppointmentStatus.COMPLETED)

    def cancel(self, appointment_id: str) -> Appointment:
        """Mark an appointment CANCELLED.

        Raises:
            AppointmentNotFoundError: If no appointment has that id.
        """
        return self._set_status(appointment_id, AppointmentStatus.CANCELLED)

    def reschedule(self, appointment_id: str, new_datetime: dt.datetime) -> Appointment:
        """Move an appointment to ``new_datetime``, keeping its status.

        Raises:
            AppointmentNotFoundError: If no appointment has that id.
            InvalidDataError: If ``new_datetime`` is not strictly in the future.
        """
        appointment = self._require(appointment_id)
        if not is_in_future(new_datetime, self._now()):
            raise InvalidDataError(RESCHEDULED_IN_PAST)

        appointment.scheduled_at = new_datetime
        logger.info(
            "Appointment rescheduled: id={}, at={}", appointment.appointment_id, new_datetime
        )
        return appointment
