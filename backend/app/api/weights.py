from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from app.core.constants import API_V1_PREFIX, MAX_ENTRY_ID
from app.core.validation import validate_filter_date, validate_weight_input
from app.db import get_db
from app.repositories.weights import WeightRepository
from app.schemas.weight import WeightInput, WeightRead, WeightsResponse


router = APIRouter(prefix=f"{API_V1_PREFIX}/weights", tags=["weights"])

# Ids are assigned by storage starting at 1 and never exceed SQLite's INTEGER range
EntryId = Annotated[int, Path(ge=1, le=MAX_ENTRY_ID)]


@router.get("", response_model=WeightsResponse)
def list_weights(
    start_date: Optional[str] = Query(None),
    end_date: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List entries, optionally filtered by [start_date, end_date].

    The chart and the history list both call this:
      GET /api/v1/weights?start_date=2026-01-01&end_date=2026-01-31
    """
    start = validate_filter_date(start_date, "start_date")
    end = validate_filter_date(end_date, "end_date")

    rows = WeightRepository(db).list(start_date=start, end_date=end)
    return WeightsResponse(weights=[WeightRead.from_row(r) for r in rows])


@router.get("/{entry_id}", response_model=WeightRead)
def get_weight(entry_id: EntryId, db: Session = Depends(get_db)):
    return WeightRead.from_row(WeightRepository(db).get(entry_id))


@router.post("", response_model=WeightRead, status_code=status.HTTP_201_CREATED)
def create_weight(payload: WeightInput, db: Session = Depends(get_db)):
    entry_date, pounds = validate_weight_input(payload.date, payload.pounds)
    row = WeightRepository(db).create(entry_date, pounds)
    return WeightRead.from_row(row)


@router.put("/{entry_id}", response_model=WeightRead)
def update_weight(entry_id: EntryId, payload: WeightInput, db: Session = Depends(get_db)):
    # Input is validated before we look the entry up
    entry_date, pounds = validate_weight_input(payload.date, payload.pounds)
    row = WeightRepository(db).update(entry_id, entry_date, pounds)
    return WeightRead.from_row(row)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_weight(entry_id: EntryId, db: Session = Depends(get_db)):
    WeightRepository(db).delete(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
