import pytest
from pydantic import ValidationError

from meditrack.clinic.doctors import DoctorRegistry
from meditrack.clinic.ids import IdIssuer
from meditrack.domain.exceptions import InvalidDataError
from meditrack.domain.models import Doctor, DoctorAvailability, Specialty

# Fixtures (ids, doctors, doctor) provided by tests/conftest.py


class TestRegister:
    def test_issues_id_and_stores(self, doctors: DoctorRegistry) -> None:
        doctor = doctors.register(
            "Dr. A", "a@x.com", "1234567890", Specialty.CARDIOLOGY.value, "LIC-001"
        )

        assert doctor.id == "DOC1000"
        assert doctor.availability == DoctorAvailability.AVAILABLE
        assert doctors.get_by_id("DOC1000") == doctor

    def test_ids_are_unique(self, doctors: DoctorRegistry) -> None:
        registered = [
            doctors.register(f"Dr. {i}", f"d{i}@x.com", "1234567890", "GENERAL", f"L{i}")
            for i in range(5)
        ]

        assert len({d.id for d in registered}) == 5

    def test_initial_availability(self, doctors: DoctorRegistry) -> None:
        doctor = doctors.register(
            "Dr. A", "a@x.com", "1234567890", "GENERAL", "L1", DoctorAvailability.ON_LEAVE
        )

        assert doctor.availability == DoctorAvailability.ON_LEAVE

    def test_registry_default_availability(self, ids: IdIssuer) -> None:
        registry = DoctorRegistry(ids, default_availability=DoctorAvailability.NOT_AVAILABLE)

        doctor = registry.register("Dr. A", "a@x.com", "1234567890", "GENERAL", "L1")

        assert doctor.available is False

    def test_explicit_none_availability_means_not_available(self, ids: IdIssuer) -> None:
        registry = DoctorRegistry(ids, default_availability=DoctorAvailability.AVAILABLE)

        doctor = registry.register("Dr. A", "a@x.com", "1234567890", "GENERAL", "L1", None)

        assert doctor.availability == DoctorAvailability.NOT_AVAILABLE

    @pytest.mark.parametrize(
        ("specialty", "license_number"),
        [(None, "L1"), ("GENERAL", None)],
        ids=["no-specialty", "no-license"],
    )
    def test_missing_specialty_or_license_is_a_contract_violation(
        self, doctors: DoctorRegistry, specialty: str | None, license_number: str | None
    ) -> None:
        with pytest.raises(ValidationError):
            doctors.register(
                "Dr. A",
                "a@x.com",
                "1234567890",
                specialty,  # type: ignore[arg-type]
                license_number,  # type: ignore[arg-type]
            )

        assert doctors.get_all() == []

    def test_rejects_invalid_data_without_storing(self, doctors: DoctorRegistry) -> None:
        with pytest.raises(InvalidDataError, match="Invalid email format"):
            doctors.register("Dr. A", "not-an-email", "1234567890", "GENERAL", "L1")

        assert doctors.get_all() == []


class TestLookup:
    def test_by_id_is_case_insensitive(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        assert doctors.get_by_id("doc1000") == doctor

    def test_unknown_id_is_absent(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        assert doctors.get_by_id("DOC9999") is None

    def test_by_name(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        assert doctors.get_by_name("dr. a") == doctor
        assert doctors.get_by_name("Dr. Nobody") is None

    def test_by_specialty(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        doctors.register("Dr. N", "n@x.com", "1234567890", "NEUROLOGY", "L2")

        assert doctors.get_by_specialty("cardiology") == [doctor]

    def test_by_specialty_none_matches_nothing(
        self, doctors: DoctorRegistry, doctor: Doctor
    ) -> None:
        assert doctors.get_by_specialty(None) == []

    def test_available(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        other = doctors.register("Dr. N", "n@x.com", "1234567890", "NEUROLOGY", "L2")
        assert len(doctors.get_available()) == 2

        doctors.set_availability(other.id, False)

        assert doctors.get_available() == [doctor]


class TestSetAvailability:
    def test_sets_enum_state(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        doctors.set_availability(doctor.id, DoctorAvailability.BUSY)

        assert doctor.availability == DoctorAvailability.BUSY

    def test_unknown_id_is_a_no_op(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        doctors.set_availability("DOC9999", DoctorAvailability.ON_LEAVE)

        assert doctor.availability == DoctorAvailability.AVAILABLE


class TestUpdateContact:
    def test_updates_existing(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        assert doctors.update_contact(doctor.id, "new@x.com", "5555555555") is True

        assert doctor.email == "new@x.com"
        assert doctor.phone_number == "5555555555"

    def test_unknown_id(self, doctors: DoctorRegistry) -> None:
        assert doctors.update_contact("DOC9999", "new@x.com", "5555555555") is False

    def test_invalid_phone_leaves_contact_untouched(
        self, doctors: DoctorRegistry, doctor: Doctor
    ) -> None:
        with pytest.raises(InvalidDataError, match="10 digits"):
            doctors.update_contact(doctor.id, "new@x.com", "555")

        assert doctor.email == "a@x.com"


class TestRemove:
    def test_removes_once(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        assert doctors.remove(doctor.id) is True
        assert doctors.remove(doctor.id) is False
        assert doctors.get_by_id(doctor.id) is None

    def test_ids_are_not_reused(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        doctors.remove(doctor.id)

        replacement = doctors.register("Dr. A", "a@x.com", "1234567890", "GENERAL", "L1")

        assert replacement.id == "DOC1001"

    def test_get_all_is_a_snapshot(self, doctors: DoctorRegistry, doctor: Doctor) -> None:
        snapshot = doctors.get_all()

        doctors.remove(doctor.id)

        assert snapshot == [doctor]
        assert doctors.get_all() == []
