"""
Database engine and table definition for saved scenarios.
"""

from pathlib import Path

from sqlalchemy import create_engine, Column, Text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base

from .config import DB_FILENAME

# Base class for SQLAlchemy models
Base = declarative_base()


class ScenarioRow(Base):
    """Database model for storing saved scenarios"""
    __tablename__ = "scenarios"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    data = Column(Text, nullable=False)  # opaque payload, stored as given
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)


def database_path(base_dir: Path) -> Path:
    return Path(base_dir) / DB_FILENAME


def make_engine(db_path: Path) -> Engine:
    """Create a pooled SQLite engine usable from any worker thread"""
    # Built from parts so "?" or "#" in the path stay part of the file name
    return create_engine(
        URL.create("sqlite", database=str(db_path)),
        connect_args={"check_same_thread": False}
    )


def create_tables(engine: Engine) -> None:
    """Create tables if they don't exist"""
    Base.metadata.create_all(engine)
