import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.constants import GOAL_WEIGHT_KEY
from app.core.errors import StorageError
from app.core.time_utils import utc_now
from app.models.setting import Setting

logger = logging.getLogger(__name__)


@dataclass
class GoalState:
    pounds: Optional[float] = None
    updated_at: Optional[datetime] = None


def _decode_value(value: Optional[str]) -> Optional[float]:
    # NULL, '' and anything non-numeric all mean "no goal"
    if value is None or value.strip() == "":
        return None
    try:
        pounds = float(value)
    except ValueError:
        logger.warning("Ignoring unparsable %s value %r", GOAL_WEIGHT_KEY, value)
        return None
    if not math.isfinite(pounds):
        logger.warning("Ignoring non-finite %s value %r", GOAL_WEIGHT_KEY, value)
        return None
    return pounds


def _encode_value(pounds: Optional[float]) -> Optional[str]:
    if pounds is None:
        return None
    return repr(float(pounds))


class GoalRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self) -> GoalState:
        try:
            row = self._row()
        except SQLAlchemyError as e:
            raise self._storage_error("retrieve goal weight", e)
        if row is None:
            return GoalState()
        return GoalState(pounds=_decode_value(row.value), updated_at=row.updated_at)

    def set(self, pounds: Optional[float]) -> GoalState:
        """Overwrite the goal (None clears it) and bump updated_at either way."""
        try:
            row = self._row()
            if row is None:
                row = Setting(key=GOAL_WEIGHT_KEY)
                self.db.add(row)
            row.value = _encode_value(pounds)
            row.updated_at = utc_now()
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error("update goal weight", e)

        if pounds is None:
            logger.info("Cleared goal weight")
        else:
            logger.info("Set goal weight to %s", pounds)
        return self.get()

    def _row(self) -> Optional[Setting]:
        stmt = select(Setting).where(Setting.key == GOAL_WEIGHT_KEY).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def _storage_error(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error("Storage failure during '%s': %s", operation, exc)
        return StorageError(operation)
