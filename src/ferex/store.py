"""
Scenario store backed by an embedded SQLite database.

A ``ScenarioStore`` starts out uninitialized. ``initialize`` prepares the data
directory and the ``scenarios`` table and keeps a pooled engine for the
lifetime of the store; every other operation uses that engine and fails with
a ``StorageError`` subclass if the store was never initialized.
"""

import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import RECENT_SCENARIOS_LIMIT
from .database import ScenarioRow, create_tables, database_path, make_engine
from .errors import StorageInitError, StorageReadError, StorageWriteError
from .models import SavedScenario

logger = logging.getLogger(__name__)


class ScenarioStore:
    """Create, read and delete saved scenarios."""

    def __init__(self):
        self.engine: Optional[Engine] = None
        self.db_path: Optional[Path] = None

    @property
    def ready(self) -> bool:
        return self.engine is not None

    def initialize(self, base_dir) -> "ScenarioStore":
        """
        Open (or create) ``ferex.db`` under ``base_dir``.

        Missing parent directories are created. Safe to call again on a
        directory that already holds a database; existing rows are kept.

        Raises:
            StorageInitError: the directory or database could not be prepared
        """
        base_dir = Path(base_dir)
        db_path = database_path(base_dir)
        try:
            base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Cannot create data directory %s: %s", base_dir, exc)
            raise StorageInitError(exc) from exc

        engine = make_engine(db_path)
        try:
            create_tables(engine)
        except (SQLAlchemyError, UnicodeError) as exc:
            engine.dispose()
            logger.error("Cannot open database %s: %s", db_path, exc)
            raise StorageInitError(exc) from exc

        if self.engine is not None:
            self.engine.dispose()
        self.engine = engine
        self.db_path = db_path
        logger.info("Database initialized at %s", db_path)
        return self

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.db_path = None

    def _require_engine(self, error_cls) -> Engine:
        if self.engine is None:
            raise error_cls(RuntimeError("scenario store is not initialized"))
        return self.engine

    def save(self, scenario: SavedScenario) -> None:
        """Insert the scenario, or replace every field of the row with its id."""
        engine = self._require_engine(StorageWriteError)
        values = scenario.model_dump()
        stmt = insert(ScenarioRow).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ScenarioRow.id],
            set_={
                "name": stmt.excluded.name,
                "data": stmt.excluded.data,
                "created_at": stmt.excluded.created_at,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        try:
            with Session(engine) as s:
                s.execute(stmt)
                s.commit()
        except (SQLAlchemyError, UnicodeError) as exc:
            logger.error("Saving scenario %r failed: %s", scenario.id, exc)
            raise StorageWriteError(exc) from exc
        logger.debug("Saved scenario %r", scenario.id)

    def list(self) -> List[SavedScenario]:
        """All scenarios, most recently updated first."""
        return self._select(None)

    def recent(self, limit: int = RECENT_SCENARIOS_LIMIT) -> List[SavedScenario]:
        if limit <= 0:
            self._require_engine(StorageReadError)
            return []
        return self._select(limit)

    def get(self, scenario_id: str) -> Optional[SavedScenario]:
        engine = self._require_engine(StorageReadError)
        try:
            with Session(engine) as s:
                row = s.get(ScenarioRow, scenario_id)
                return SavedScenario.model_validate(row) if row else None
        except (SQLAlchemyError, UnicodeError) as exc:
            logger.error("Loading scenario %r failed: %s", scenario_id, exc)
            raise StorageReadError(exc) from exc

    def delete(self, scenario_id: str) -> None:
        """Remove the scenario with this id. Unknown ids are ignored."""
        engine = self._require_engine(StorageWriteError)
        try:
            with Session(engine) as s:
                result = s.execute(delete(ScenarioRow).where(ScenarioRow.id == scenario_id))
                s.commit()
        except (SQLAlchemyError, UnicodeError) as exc:
            logger.error("Deleting scenario %r failed: %s", scenario_id, exc)
            raise StorageWriteError(exc) from exc
        logger.debug("Deleted scenario %r (%d row(s))", scenario_id, result.rowcount)

    def _select(self, limit: Optional[int]) -> List[SavedScenario]:
        engine = self._require_engine(StorageReadError)
        query = select(ScenarioRow).order_by(ScenarioRow.updated_at.desc())
        if limit is not None:
            query = query.limit(limit)
        try:
            with Session(engine) as s:
                rows = s.scalars(query).all()
                return [SavedScenario.model_validate(r) for r in rows]
        except (SQLAlchemyError, UnicodeError) as exc:
            logger.error("Listing scenarios failed: %s", exc)
            raise StorageReadError(exc) from exc


def init_database(base_dir) -> ScenarioStore:
    """Return a ready store for ``base_dir``."""
    return ScenarioStore().initialize(base_dir)
