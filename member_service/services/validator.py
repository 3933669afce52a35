# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Field rules for a member.

Every rule is evaluated; the caller receives all violations together.
"""

import re
from datetime import date
from typing import Optional

from member_service.models.domain import Member

USERNAME_LENGTH = (3, 20)
NAME_LENGTH = (3, 16)
AGE_RANGE = (18, 100)

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PHONE_PATTERN = re.compile(r"[0-9]{11}")


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Whole years elapsed; the birthday itself counts as reached."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def validate_member(member: Member, today: Optional[date] = None) -> list[str]:
    errors: list[str] = []

    if not USERNAME_LENGTH[0] <= len(member.username) <= USERNAME_LENGTH[1]:
        errors.append("Username must be between 3 and 20 characters.")

    if not NAME_LENGTH[0] <= len(member.name) <= NAME_LENGTH[1]:
        errors.append("Name must be between 3 and 16 characters.")

    if not EMAIL_PATTERN.fullmatch(member.email):
        errors.append(
            "Email format is invalid. Please enter a valid email (e.g., abc@abc.abc)."
        )

    if not PHONE_PATTERN.fullmatch(member.phone_number):
        errors.append("Phone number must be exactly 11 numeric digits.")

    age = calculate_age(member.date_of_birth, today)
    if not AGE_RANGE[0] <= age <= AGE_RANGE[1]:
        errors.append("Age must be between 18 and 100 years.")

    return errors
