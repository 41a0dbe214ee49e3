from datetime import date

import pytest

from app.core.errors import ConflictError, NotFoundError
from app.repositories.goals import GoalRepository
from app.repositories.weights import WeightRepository


def test_create_and_get_roundtrip(db_session):
    repo = WeightRepository(db_session)
    created = repo.create(date(2025, 6, 1), 175.5)
    assert created.id > 0
    assert created.created_at == created.updated_at

    fetched = repo.get(created.id)
    assert fetched.date == date(2025, 6, 1)
    assert fetched.pounds == 175.5


def test_same_date_from_two_sessions_conflicts_once(database):
    first, second = database.session(), database.session()
    try:
        WeightRepository(first).create(date(2025, 6, 1), 175.5)
        with pytest.raises(ConflictError):
            WeightRepository(second).create(date(2025, 6, 1), 176.0)
        assert len(WeightRepository(second).list()) == 1
    finally:
        first.close()
        second.close()


def test_update_missing_id_raises_not_found(db_session):
    repo = WeightRepository(db_session)
    repo.create(date(2025, 6, 1), 175.5)
    with pytest.raises(NotFoundError):
        repo.update(42, date(2025, 6, 2), 170.0)
    assert [e.date for e in repo.list()] == [date(2025, 6, 1)]


def test_update_refreshes_updated_at_only(db_session):
    repo = WeightRepository(db_session)
    created = repo.create(date(2025, 6, 1), 175.5)
    created_at, updated_at = created.created_at, created.updated_at

    updated = repo.update(created.id, date(2025, 6, 1), 174.0)
    assert updated.pounds == 174.0
    assert updated.created_at == created_at
    assert updated.updated_at > updated_at


def test_delete_removes_row(db_session):
    repo = WeightRepository(db_session)
    created = repo.create(date(2025, 6, 1), 175.5)
    repo.delete(created.id)
    assert not repo.exists(created.id)
    with pytest.raises(NotFoundError):
        repo.get(created.id)
    with pytest.raises(NotFoundError):
        repo.delete(created.id)


def test_list_bounds_are_inclusive(db_session):
    repo = WeightRepository(db_session)
    for day in (1, 15, 31):
        repo.create(date(2026, 1, day), 180.0)

    rows = repo.list(start_date=date(2026, 1, 15), end_date=date(2026, 1, 31))
    assert [r.date for r in rows] == [date(2026, 1, 31), date(2026, 1, 15)]


def test_goal_set_and_clear(db_session):
    repo = GoalRepository(db_session)
    assert repo.get().pounds is None
    assert repo.get().updated_at is None

    state = repo.set(160.5)
    assert state.pounds == 160.5
    assert state.updated_at is not None

    cleared = repo.set(None)
    assert cleared.pounds is None
    assert cleared.updated_at > state.updated_at


def test_goal_ignores_blank_stored_value(db_session):
    from app.models.setting import Setting

    row = db_session.get(Setting, "goal_weight")
    row.value = ""
    db_session.commit()
    assert GoalRepository(db_session).get().pounds is None


def test_goal_ignores_non_finite_stored_value(db_session):
    from app.models.setting import Setting

    row = db_session.get(Setting, "goal_weight")
    for stored in ("nan", "inf", "-inf"):
        row.value = stored
        db_session.commit()
        assert GoalRepository(db_session).get().pounds is None
