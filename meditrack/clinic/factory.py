import datetime as dt
from typing import Callable

from loguru import logger

from meditrack.clinic.appointments import AppointmentEngine
from meditrack.clinic.doctors import DoctorRegistry
from meditrack.clinic.ids import IdIssuer
from meditrack.clinic.patients import PatientRegistry
from meditrack.config import AppConfig


class Clinic:
    """The registries and the engine of one running clinic, sharing one id issuer."""

    def __init__(
        self,
        doctors: DoctorRegistry,
        patients: PatientRegistry,
        appointments: AppointmentEngine,
    ) -> None:
        self.doctors = doctors
        self.patients = patients
        self.appointments = appointments


def build_id_issuer(config: AppConfig) -> IdIssuer:
    return IdIssuer(
        doctor_base=config.ids.doctor_base,
        patient_base=config.ids.patient_base,
        appointment_base=config.ids.appointment_base,
        bill_base=config.ids.bill_base,
    )


def build_clinic(
    config: AppConfig | None = None,
    clock: Callable[[], dt.datetime] | None = None,
) -> Clinic:
    """Build the registries and the appointment engine from config."""
    config = config or AppConfig()
    ids = build_id_issuer(config)

    doctors = DoctorRegistry(ids, default_availability=config.default_doctor_availability)
    patients = PatientRegistry(ids)
    appointments = AppointmentEngine(doctors, patients, ids, clock=clock)

    logger.info(
        "Clinic built: id bases doctor={}, patient={}, appointment={}",
        config.ids.doctor_base,
        config.ids.patient_base,
        config.ids.appointment_base,
    )
    return Clinic(doctors=doctors, patients=patients, appointments=appointments)
