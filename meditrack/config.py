from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from meditrack.domain.models import DoctorAvailability


class IdConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEDITRACK_ID_", env_file=".env", extra="ignore")

    doctor_base: int = Field(default=1000, ge=0)
    patient_base: int = Field(default=2000, ge=0)
    appointment_base: int = Field(default=3000, ge=0)
    bill_base: int = Field(default=4000, ge=0)


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEDITRACK_", env_file=".env", extra="ignore")

    default_doctor_availability: DoctorAvailability = DoctorAvailability.AVAILABLE
    ids: IdConfig = Field(default_factory=lambda: IdConfig())
