import re

from meditrack.domain.exceptions import InvalidDataError

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@(.+)")
_PHONE_PATTERN = re.compile(r"[0-9]{10}")

MIN_AGE = 1
MAX_AGE = 150


def is_valid_email(email: str | None) -> bool:
    return email is not None and _EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone: str | None) -> bool:
    """Exactly ten ASCII digits, nothing else."""
    return phone is not None and _PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_age(age: object) -> bool:
    if isinstance(age, bool) or not isinstance(age, int):
        return False
    return MIN_AGE <= age <= MAX_AGE


def is_not_empty(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def is_positive(value: float) -> bool:
    return value > 0


def _validate_person(role: str, name: str | None, email: str | None, phone: str | None) -> None:
    if not is_not_empty(name):
        raise InvalidDataError(f"{role} name cannot be empty")
    if not is_valid_email(email):
        raise InvalidDataError("Invalid email format")
    if not is_valid_phone_number(phone):
        raise InvalidDataError("Phone number must be 10 digits")


def validate_doctor(name: str | None, email: str | None, phone: str | None) -> None:
    """Raise ``InvalidDataError`` for the first bad field: name, email, then phone."""
    _validate_person("Doctor", name, email, phone)


def validate_patient(
    name: str | None, email: str | None, phone: str | None, age: object
) -> None:
    """Raise ``InvalidDataError`` for the first bad field: name, email, phone, then age."""
    _validate_person("Patient", name, email, phone)
    if not is_valid_age(age):
        raise InvalidDataError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
