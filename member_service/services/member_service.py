# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Business logic for member records: validate, check duplicates, then write.

The duplicate check and the write run on separate connections, so a
concurrent writer can still slip in between them. That case surfaces as a
driver error from the write.
"""
from datetime import date
from typing import Callable, List

from member_service.core.logging import get_logger
from member_service.errors import DuplicateError, MemberValidationError, NotFoundError
from member_service.metrics import MEMBER_OPERATIONS
from member_service.models.domain import Member, MemberRecord
from member_service.repositories.member_repository import MemberRepository
from member_service.services.validator import validate_member

logger = get_logger(__name__)


class MemberService:
    def __init__(self, repo: MemberRepository, today: Callable[[], date] = date.today):
        self._repo = repo
        self._today = today

    def list_members(self) -> List[MemberRecord]:
        members = self._repo.list_all()
        MEMBER_OPERATIONS.labels(operation="list", outcome="ok").inc()
        return members

    def get_member(self, user_id: int) -> MemberRecord:
        record = self._repo.get(user_id)
        if record is None:
            raise NotFoundError(user_id)
        return record

    def validate(self, member: Member, operation: str = "validate") -> None:
        """Raise ``MemberValidationError`` carrying every violated rule."""
        errors = validate_member(member, today=self._today())
        if errors:
            self._reject(operation, "invalid", username=member.username)
            raise MemberValidationError(errors)

    def create_member(self, member: Member) -> MemberRecord:
        self.validate(member, "create")
        if self._repo.has_duplicate(member):
            self._reject("create", "duplicate", username=member.username)
            raise DuplicateError()

        user_id = self._repo.insert(member)
        self._accept("create", user_id, member.username)
        return MemberRecord(user_id=user_id, **member.model_dump())

    def update_member(self, user_id: int, member: Member) -> MemberRecord:
        self.validate(member, "update")
        if self._repo.has_duplicate_except(user_id, member):
            self._reject("update", "duplicate", user_id, member.username)
            raise DuplicateError()

        if self._repo.update(user_id, member) == 0:
            self._reject("update", "not_found", user_id, member.username)
            raise NotFoundError(user_id)
        self._accept("update", user_id, member.username)
        return MemberRecord(user_id=user_id, **member.model_dump())

    def delete_member(self, user_id: int) -> None:
        if self._repo.delete(user_id) == 0:
            self._reject("delete", "not_found", user_id)
            raise NotFoundError(user_id)
        self._accept("delete", user_id)

    # ── Private ────────────────────────────────────────────────────────

    def _accept(self, operation: str, user_id: int, username=None):
        MEMBER_OPERATIONS.labels(operation=operation, outcome="ok").inc()
        logger.info("Member %s ok", operation, extra={
            "operation": operation, "outcome": "ok", "userid": user_id, "username": username,
        })

    def _reject(self, operation: str, outcome: str, user_id=None, username=None):
        MEMBER_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
        logger.warning("Member %s rejected", operation, extra={
            "operation": operation, "outcome": outcome, "userid": user_id, "username": username,
        })
