"""Field validation for employee records submitted from the add/edit forms."""

from __future__ import annotations

import re

from roster.models.employee import EmployeeRecord

# Shape check only, kept permissive so previously accepted data still passes.
_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
_NON_DIGITS = re.compile(r"\D")

MIN_PHONE_DIGITS = 10


def validate(record: EmployeeRecord) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not record.name.strip():
        errors["name"] = "Name is required"

    email = record.email.strip()
    if not email:
        errors["email"] = "Email is required"
    elif not _EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid"

    phone = record.phone.strip()
    if not phone:
        errors["phone"] = "Phone is required"
    elif len(_NON_DIGITS.sub("", phone)) < MIN_PHONE_DIGITS:
        errors["phone"] = f"Phone must be at least {MIN_PHONE_DIGITS} digits"

    if not record.position.strip():
        errors["position"] = "Position is required"

    return errors


def is_valid(record: EmployeeRecord) -> bool:
    return not validate(record)
