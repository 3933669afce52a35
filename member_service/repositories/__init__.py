# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports MemberRepository."""
from member_service.repositories.member_repository import MemberRepository

__all__ = ["MemberRepository"]
