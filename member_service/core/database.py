# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and the ``member`` table definition."""
from sqlalchemy import Column, Date, Integer, MetaData, Table, Text, create_engine
from sqlalchemy.engine import Engine

from member_service.core.config import settings

metadata = MetaData()

# userid renders as SERIAL on PostgreSQL
member_table = Table(
    "member",
    metadata,
    Column("userid", Integer, primary_key=True, autoincrement=True),
    Column("username", Text),
    Column("name", Text),
    Column("email", Text),
    Column("phonenumber", Text),
    Column("dateofbirth", Date),
)


def build_engine(url: str) -> Engine:
    # SQLite pools reject the sizing arguments
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


engine = build_engine(settings.DATABASE_URL)
