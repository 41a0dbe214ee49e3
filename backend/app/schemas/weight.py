from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.time_utils import format_timestamp, format_ymd


class WeightInput(BaseModel):
    """Body for creating or replacing a weight entry.

    Both fields are optional at the schema level so that a missing value is
    reported by the validation layer with the same error shape as a bad one.
    """

    date: Optional[str] = None  # 'YYYY-MM-DD'
    pounds: Optional[float] = Field(None, strict=True)

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class WeightRead(BaseModel):
    """Schema returned to the frontend when reading a weight entry."""

    id: int
    date: str
    pounds: float
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, row) -> "WeightRead":
        return cls(
            id=row.id,
            date=format_ymd(row.date),
            pounds=float(row.pounds),
            created_at=format_timestamp(row.created_at),
            updated_at=format_timestamp(row.updated_at),
        )


class WeightsResponse(BaseModel):
    weights: list[WeightRead]
