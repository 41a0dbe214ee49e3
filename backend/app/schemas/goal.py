from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.time_utils import format_timestamp


class GoalRead(BaseModel):
    pounds: Optional[float] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_state(cls, state) -> "GoalRead":
        return cls(pounds=state.pounds, updated_at=format_timestamp(state.updated_at))


class GoalUpdate(BaseModel):
    # null (or omitted) clears the goal
    pounds: Optional[float] = Field(None, strict=True)

    model_config = ConfigDict(extra="ignore")
