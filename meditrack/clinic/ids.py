import itertools
import threading
from enum import Enum


class IdKind(Enum):
    """Entity kinds that receive identifiers, valued by their prefix."""

    DOCTOR = "DOC"
    PATIENT = "PAT"
    APPOINTMENT = "APT"
    BILL = "BILL"


class IdIssuer:
    """Issues ``{PREFIX}{counter}`` identifiers, one monotonic counter per kind.

    Counters are never rewound, so an identifier is never reissued even after
    the entity it named is removed.  Issuance is safe across threads.

    Build one instance at startup and share it with every registry; tests can
    build their own with deterministic bases.
    """

    def __init__(
        self,
        doctor_base: int = 1000,
        patient_base: int = 2000,
        appointment_base: int = 3000,
        bill_base: int = 4000,
    ) -> None:
        self._counters = {
            IdKind.DOCTOR: itertools.count(doctor_base),
            IdKind.PATIENT: itertools.count(patient_base),
            IdKind.APPOINTMENT: itertools.count(appointment_base),
            IdKind.BILL: itertools.count(bill_base),
        }
        self._lock = threading.Lock()

    def issue(self, kind: IdKind) -> str:
        with self._lock:
            value = next(self._counters[kind])
        return f"{kind.value}{value}"

    def next_doctor_id(self) -> str:
        return self.issue(IdKind.DOCTOR)

    def next_patient_id(self) -> str:
        return self.issue(IdKind.PATIENT)

    def next_appointment_id(self) -> str:
        return self.issue(IdKind.APPOINTMENT)

    def next_bill_id(self) -> str:
        return self.issue(IdKind.BILL)
