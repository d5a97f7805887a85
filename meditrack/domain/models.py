import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class DoctorAvailability(str, Enum):
    """Administrative availability of a doctor."""

    AVAILABLE = "available"
    NOT_AVAILABLE = "not_available"
    ON_LEAVE = "on_leave"
    BUSY = "busy"


class AppointmentStatus(str, Enum):
    """Possible states of an appointment. COMPLETED and CANCELLED are terminal."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Specialty(str, Enum):
    """Well-known specialties. ``Doctor.specialty`` accepts any text."""

    CARDIOLOGY = "CARDIOLOGY"
    NEUROLOGY = "NEUROLOGY"
    ORTHOPEDICS = "ORTHOPEDICS"
    DERMATOLOGY = "DERMATOLOGY"
    GENERAL = "GENERAL"


def _require_text(value: str, info: ValidationInfo) -> str:
    if not value or not value.strip():
        raise ValueError(f"{info.field_name} cannot be null or empty")
    return value


def _matches(own: str, other: str | None) -> bool:
    if other is None:
        return False
    return own.lower() == other.lower()


class Identity(BaseModel):
    """Who a person is. Immutable once issued."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    _check_text = field_validator("id", "name")(_require_text)


class Contact(BaseModel):
    """How to reach a person. Replaced wholesale on update."""

    model_config = ConfigDict(validate_assignment=True)

    email: str
    phone_number: str

    _check_text = field_validator("email", "phone_number")(_require_text)


class _ContactableMixin:
    """Shared Searchable behaviour over the embedded identity and contact."""

    @property
    def id(self) -> str:
        return self.identity.id

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone_number(self) -> str:
        return self.contact.phone_number

    def matches_id(self, id: str | None) -> bool:
        return _matches(self.identity.id, id)

    def matches_name(self, name: str | None) -> bool:
        return _matches(self.identity.name, name)


class Doctor(_ContactableMixin, BaseModel):
    """A doctor registered at the clinic."""

    model_config = ConfigDict(validate_assignment=True)

    identity: Identity
    contact: Contact
    specialty: str
    license_number: str
    availability: DoctorAvailability = DoctorAvailability.AVAILABLE

    @field_validator("availability", mode="before")
    @classmethod
    def _missing_means_not_available(cls, value: object) -> object:
        return DoctorAvailability.NOT_AVAILABLE if value is None else value

    @property
    def available(self) -> bool:
        return self.availability == DoctorAvailability.AVAILABLE

    def set_available(self, available: bool) -> None:
        """Boolean shortcut: ``True`` → AVAILABLE, ``False`` → NOT_AVAILABLE."""
        self.availability = (
            DoctorAvailability.AVAILABLE if available else DoctorAvailability.NOT_AVAILABLE
        )


class Patient(_ContactableMixin, BaseModel):
    """A patient registered at the clinic."""

    model_config = ConfigDict(validate_assignment=True)

    identity: Identity
    contact: Contact
    age: int
    medical_history: str = ""


class Appointment(BaseModel):
    """A booked appointment. Never deleted, only moved between statuses."""

    model_config = ConfigDict(validate_assignment=True)

    appointment_id: str
    doctor_id: str
    patient_id: str
    scheduled_at: dt.datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.status in (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED)

    def matches_id(self, appointment_id: str | None) -> bool:
        return _matches(self.appointment_id, appointment_id)


class BillSummary(BaseModel):
    """Read-only snapshot of a bill."""

    model_config = ConfigDict(frozen=True)

    bill_id: str
    patient_id: str
    appointment_id: str
    total_amount: float
    paid: bool
    billed_at: dt.datetime
    paid_at: dt.datetime | None = None


class Bill(BaseModel):
    """Charges for an appointment. Not produced by any booking flow."""

    model_config = ConfigDict(validate_assignment=True)

    bill_id: str
    patient_id: str
    appointment_id: str
    consultation_fee: float = Field(default=0.0, ge=0)
    lab_charges: float = Field(default=0.0, ge=0)
    other_charges: float = Field(default=0.0, ge=0)
    paid: bool = False
    billed_at: dt.datetime = Field(default_factory=dt.datetime.now)
    paid_at: dt.datetime | None = None

    @property
    def total_amount(self) -> float:
        return self.consultation_fee + self.lab_charges + self.other_charges

    @property
    def amount(self) -> float:
        return self.total_amount

    @property
    def is_paid(self) -> bool:
        return self.paid

    def mark_as_paid(self) -> None:
        self.paid = True
        self.paid_at = dt.datetime.now()

    def summary(self) -> BillSummary:
        return BillSummary(
            bill_id=self.bill_id,
            patient_id=self.patient_id,
            appointment_id=self.appointment_id,
            total_amount=self.total_amount,
            paid=self.paid,
            billed_at=self.billed_at,
            paid_at=self.paid_at,
        )
