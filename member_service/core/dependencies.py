# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from member_service.core.database import engine
from member_service.repositories.member_repository import MemberRepository
from member_service.services.member_service import MemberService

_repo = MemberRepository(engine)
_service = MemberService(_repo)


def get_member_repo() -> MemberRepository:
    return _repo


def get_member_service() -> MemberService:
    return _service
