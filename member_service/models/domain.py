# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Field values are carried raw; the rules live in ``services.validator`` so
that every violation can be reported at once.
"""

from datetime import date

from pydantic import BaseModel, Field


class Member(BaseModel):
    """Editable fields of a registered person."""
    username: str = Field(..., description="Unique login name")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    phone_number: str = Field(..., description="Unique 11-digit phone number")
    date_of_birth: date = Field(..., description="Birth date")


class MemberRecord(Member):
    """A member row as stored, with its database-assigned id."""
    user_id: int
