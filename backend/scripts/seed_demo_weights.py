"""Seed a few months of demo weigh-ins plus a goal weight.

Run from the backend directory:
    python -m scripts.seed_demo_weights
"""
from datetime import timedelta
import random

from sqlalchemy import delete

from app.core.config import settings
from app.core.time_utils import utc_today
from app.db import Database
from app.models.weight import WeightEntry
from app.repositories.goals import GoalRepository
from app.repositories.weights import WeightRepository


def clear_recent_weights(db, days: int = 120) -> None:
    """Delete entries in the last N days so we can reseed cleanly."""
    cutoff = utc_today() - timedelta(days=days)
    db.execute(delete(WeightEntry).where(WeightEntry.date >= cutoff))
    db.commit()


def seed_demo_weights(db, days: int = 90, start_pounds: float = 185.0) -> int:
    """Insert one weigh-in per day trending slowly downward, skipping ~1 in 5 days."""
    repo = WeightRepository(db)
    today = utc_today()
    pounds = start_pounds
    created = 0

    for offset in range(days, -1, -1):
        d = today - timedelta(days=offset)
        # Drift ~0.1 lb/day with daily noise
        pounds -= 0.1
        if random.random() < 0.2:
            continue
        repo.create(d, round(pounds + random.uniform(-0.8, 0.8), 1))
        created += 1

    GoalRepository(db).set(round(start_pounds - 20.0, 1))
    return created


def main():
    database = Database(settings.sqlalchemy_url)
    database.init_schema()
    db = database.session()
    try:
        clear_recent_weights(db, days=150)
        created = seed_demo_weights(db)
        print(f"Seeded {created} demo weight entries")
    finally:
        db.close()
        database.close()


if __name__ == "__main__":
    main()
