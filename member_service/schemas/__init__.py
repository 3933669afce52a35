# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import List

from pydantic import BaseModel

from member_service.models.domain import Member, MemberRecord


class MemberIn(Member):
    """Request body for create and update; rules are checked by the service."""


class MemberOut(MemberRecord):
    pass


class MemberList(BaseModel):
    total: int
    members: List[MemberOut]
