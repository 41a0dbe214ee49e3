from sqlalchemy import Column, Date, DateTime, Float, Index, Integer
from app.core.constants import WEIGHTS_DATE_INDEX
from app.core.time_utils import utc_now
from app.db import Base


class WeightEntry(Base):
    __tablename__ = "weights"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # One entry per calendar day, enforced by the database
    date = Column(Date, nullable=False, unique=True)

    pounds = Column(Float, nullable=False)

    # Timestamps are set from Python so updates within the same second
    # still move updated_at forward
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    __table_args__ = (
        Index(WEIGHTS_DATE_INDEX, date.desc()),
    )
