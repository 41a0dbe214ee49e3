from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.constants import API_V1_PREFIX
from app.core.validation import validate_goal_pounds
from app.db import get_db
from app.repositories.goals import GoalRepository
from app.schemas.goal import GoalRead, GoalUpdate


router = APIRouter(prefix=f"{API_V1_PREFIX}/goal", tags=["goal"])


@router.get("", response_model=GoalRead)
def get_goal(db: Session = Depends(get_db)):
    return GoalRead.from_state(GoalRepository(db).get())


@router.put("", response_model=GoalRead)
def update_goal(payload: GoalUpdate, db: Session = Depends(get_db)):
    pounds = validate_goal_pounds(payload.pounds)
    return GoalRead.from_state(GoalRepository(db).set(pounds))
