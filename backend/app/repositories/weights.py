"""Data access for the weights table.

Every method maps to one or two SQL round-trips. Integrity failures are
classified here from the exception type so callers receive ConflictError
instead of having to inspect driver messages.
"""
import logging
from datetime import date
from typing import Optional

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError, StorageError
from app.core.time_utils import utc_now
from app.models.weight import WeightEntry

logger = logging.getLogger(__name__)


class WeightRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self, start_date: Optional[date] = None, end_date: Optional[date] = None) -> list[WeightEntry]:
        """Entries within [start_date, end_date], newest date first.

        Either bound may be omitted; with neither, every entry is returned.
        """
        stmt = select(WeightEntry)
        if start_date is not None:
            stmt = stmt.where(WeightEntry.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(WeightEntry.date <= end_date)
        stmt = stmt.order_by(WeightEntry.date.desc())
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise self._storage_error("retrieve weights", e)

    def get(self, entry_id: int) -> WeightEntry:
        try:
            row = self.db.get(WeightEntry, entry_id, populate_existing=True)
        except SQLAlchemyError as e:
            raise self._storage_error("retrieve weight entry", e)
        if row is None:
            raise NotFoundError()
        return row

    def exists(self, entry_id: int) -> bool:
        try:
            return bool(self.db.execute(select(exists().where(WeightEntry.id == entry_id))).scalar())
        except SQLAlchemyError as e:
            raise self._storage_error("retrieve weight entry", e)

    def create(self, entry_date: date, pounds: float) -> WeightEntry:
        now = utc_now()
        row = WeightEntry(date=entry_date, pounds=pounds, created_at=now, updated_at=now)
        try:
            self.db.add(row)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Rejected duplicate weight entry for %s", entry_date.isoformat())
            raise ConflictError()
        except SQLAlchemyError as e:
            raise self._storage_error("create weight entry", e)

        logger.info("Created weight entry id=%s date=%s pounds=%s", row.id, row.date, row.pounds)
        # Re-read so the caller sees exactly what storage holds
        return self.get(row.id)

    def update(self, entry_id: int, entry_date: date, pounds: float) -> WeightEntry:
        if not self.exists(entry_id):
            raise NotFoundError()

        stmt = (
            update(WeightEntry)
            .where(WeightEntry.id == entry_id)
            .values(date=entry_date, pounds=pounds, updated_at=utc_now())
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Rejected update of id=%s to taken date %s", entry_id, entry_date.isoformat())
            raise ConflictError()
        except SQLAlchemyError as e:
            raise self._storage_error("update weight entry", e)

        logger.info("Updated weight entry id=%s date=%s pounds=%s", entry_id, entry_date, pounds)
        return self.get(entry_id)

    def delete(self, entry_id: int) -> None:
        if not self.exists(entry_id):
            raise NotFoundError()
        try:
            self.db.execute(delete(WeightEntry).where(WeightEntry.id == entry_id))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error("delete weight entry", e)
        logger.info("Deleted weight entry id=%s", entry_id)

    def _storage_error(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error("Storage failure during '%s': %s", operation, exc)
        return StorageError(operation)
