from sqlalchemy import Column, DateTime, String
from app.db import Base


class Setting(Base):
    __tablename__ = "settings"

    # e.g. 'goal_weight'
    key = Column(String, primary_key=True)

    # NULL means "not set"; numbers are stored as their text form
    value = Column(String, nullable=True)

    # NULL until the row is written for the first time
    updated_at = Column(DateTime(timezone=True), nullable=True)
