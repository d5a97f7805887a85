import datetime as dt

import pytest

from meditrack.clinic.appointments import AppointmentEngine
from meditrack.clinic.doctors import DoctorRegistry
from meditrack.clinic.ids import IdIssuer
from meditrack.clinic.patients import PatientRegistry
from meditrack.domain.models import Doctor, Patient, Specialty

FIXED_NOW = dt.datetime(2026, 3, 1, 9, 0)


@pytest.fixture
def now() -> dt.datetime:
    """The instant the ``engine`` fixture's clock is frozen at."""
    return FIXED_NOW


@pytest.fixture
def next_week(now: dt.datetime) -> dt.datetime:
    return now + dt.timedelta(days=7)


@pytest.fixture
def ids() -> IdIssuer:
    return IdIssuer()


@pytest.fixture
def doctors(ids: IdIssuer) -> DoctorRegistry:
    return DoctorRegistry(ids)


@pytest.fixture
def patients(ids: IdIssuer) -> PatientRegistry:
    return PatientRegistry(ids)


@pytest.fixture
def engine(
    doctors: DoctorRegistry, patients: PatientRegistry, ids: IdIssuer, now: dt.datetime
) -> AppointmentEngine:
    """Engine whose clock is frozen at ``now``."""
    return AppointmentEngine(doctors, patients, ids, clock=lambda: now)


@pytest.fixture
def doctor(doctors: DoctorRegistry) -> Doctor:
    return doctors.register(
        "Dr. A", "a@x.com", "1234567890", Specialty.CARDIOLOGY.value, "LIC-001"
    )


@pytest.fixture
def patient(patients: PatientRegistry) -> Patient:
    return patients.register("B", "b@x.com", "0987654321", 30, "No known allergies")
