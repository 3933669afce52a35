# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared fixtures: an in-memory SQLite member table per test."""
import os

# Must be set before member_service.core.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from member_service.models.domain import Member
from member_service.repositories.member_repository import MemberRepository
from member_service.services.member_service import MemberService

TODAY = date(2026, 6, 15)


def years_ago(years: int, today: date = TODAY) -> date:
    return today.replace(year=today.year - years)


def make_member(**overrides) -> Member:
    fields = {
        "username": "abc",
        "name": "John",
        "email": "a@b.co",
        "phone_number": "12345678901",
        "date_of_birth": years_ago(20),
    }
    fields.update(overrides)
    return Member(**fields)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    MemberRepository(eng).create_schema()
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine):
    return MemberRepository(engine)


@pytest.fixture
def service(repo):
    return MemberService(repo, today=lambda: TODAY)
