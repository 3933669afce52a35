# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Data-access layer for the ``member`` table.
Every statement uses bound parameters; each call holds its own connection.
NO business rules here — pure CRUD.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import Date, Integer, Text, bindparam, text
from sqlalchemy.engine import Engine

from member_service.core.database import metadata
from member_service.core.logging import get_logger
from member_service.models.domain import Member, MemberRecord

logger = get_logger(__name__)

MEMBER_COLS = "userid, username, name, email, phonenumber, dateofbirth"

_RESULT_TYPES = {
    "userid": Integer, "username": Text, "name": Text,
    "email": Text, "phonenumber": Text, "dateofbirth": Date,
}

_SELECT_ALL = text(f"SELECT {MEMBER_COLS} FROM member").columns(**_RESULT_TYPES)

_SELECT_ONE = text(
    f"SELECT {MEMBER_COLS} FROM member WHERE userid = :userid"
).columns(**_RESULT_TYPES)

_DUPLICATE_WHERE = (
    "(username = :username OR email = :email OR phonenumber = :phonenumber)"
)

_COUNT_DUPLICATES = text(f"SELECT COUNT(*) FROM member WHERE {_DUPLICATE_WHERE}")

_COUNT_DUPLICATES_EXCEPT = text(
    f"SELECT COUNT(*) FROM member WHERE {_DUPLICATE_WHERE} AND userid != :userid"
)

_INSERT = text("""
    INSERT INTO member (username, name, email, phonenumber, dateofbirth)
    VALUES (:username, :name, :email, :phonenumber, :dateofbirth)
    RETURNING userid
""").bindparams(bindparam("dateofbirth", type_=Date))

_UPDATE = text("""
    UPDATE member
    SET username = :username, name = :name, email = :email,
        phonenumber = :phonenumber, dateofbirth = :dateofbirth
    WHERE userid = :userid
""").bindparams(bindparam("dateofbirth", type_=Date))

_DELETE = text("DELETE FROM member WHERE userid = :userid")


def _row_to_record(row) -> MemberRecord:
    return MemberRecord(
        user_id=row[0],
        username=row[1],
        name=row[2],
        email=row[3],
        phone_number=row[4],
        date_of_birth=row[5],
    )


def _member_params(member: Member) -> Dict[str, Any]:
    return {
        "username": member.username,
        "name": member.name,
        "email": member.email,
        "phonenumber": member.phone_number,
        "dateofbirth": member.date_of_birth,
    }


def _key_params(member: Member) -> Dict[str, Any]:
    return {
        "username": member.username,
        "email": member.email,
        "phonenumber": member.phone_number,
    }


class MemberRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Read ───────────────────────────────────────────────────────────

    def list_all(self) -> List[MemberRecord]:
        with self._engine.connect() as conn:
            rows = conn.execute(_SELECT_ALL).fetchall()
        return [_row_to_record(r) for r in rows]

    def get(self, user_id: int) -> Optional[MemberRecord]:
        with self._engine.connect() as conn:
            row = conn.execute(_SELECT_ONE, {"userid": user_id}).fetchone()
        return _row_to_record(row) if row else None

    def has_duplicate(self, member: Member) -> bool:
        """True if any row shares the username, email or phone number."""
        with self._engine.connect() as conn:
            count = conn.execute(_COUNT_DUPLICATES, _key_params(member)).scalar()
        return (count or 0) > 0

    def has_duplicate_except(self, user_id: int, member: Member) -> bool:
        """Same as ``has_duplicate`` but ignores the row being edited."""
        params = _key_params(member)
        params["userid"] = user_id
        with self._engine.connect() as conn:
            count = conn.execute(_COUNT_DUPLICATES_EXCEPT, params).scalar()
        return (count or 0) > 0

    # ── Write ──────────────────────────────────────────────────────────

    def insert(self, member: Member) -> int:
        with self._engine.begin() as conn:
            user_id = conn.execute(_INSERT, _member_params(member)).scalar_one()
        logger.debug("Inserted member row userid=%s", user_id)
        return user_id

    def update(self, user_id: int, member: Member) -> int:
        params = _member_params(member)
        params["userid"] = user_id
        with self._engine.begin() as conn:
            return conn.execute(_UPDATE, params).rowcount

    def delete(self, user_id: int) -> int:
        with self._engine.begin() as conn:
            return conn.execute(_DELETE, {"userid": user_id}).rowcount

    # ── Lifecycle ──────────────────────────────────────────────────────

    def create_schema(self):
        metadata.create_all(self._engine, checkfirst=True)

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self):
        self._engine.dispose()
