#!/usr/bin/env python3
"""
Seed the system default breeds into the configured database.

Breeds already stored (by id) are left untouched, so the script can be run
any number of times.

Usage:
  python scripts/seed_presets.py [--show-vaccines]
"""

import asyncio
import sys

from granjafacil.application.use_cases.breeds import seed_default_breeds
from granjafacil.config.settings import get_settings
from granjafacil.domain.presets.vaccines import VACCINE_PRESETS
from granjafacil.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def seed() -> int:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            added = await seed_default_breeds.execute(uow)
            breeds = await uow.breeds.list(active=None)
    finally:
        await engine.dispose()

    print(f"Added {added} breed(s)")
    for breed in breeds:
        marker = "*" if breed.is_system_default else " "
        print(f" {marker} {breed.id:<24} {breed.name} ({breed.total_weeks} weeks)")
    return added


def show_vaccines() -> None:
    print("\nVaccination programme:")
    for vaccine in sorted(VACCINE_PRESETS, key=lambda v: v.age_in_days):
        print(f"  day {vaccine.age_in_days:>3}  {vaccine.name} ({vaccine.route.value})")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed default breed presets")
    parser.add_argument(
        "--show-vaccines", action="store_true", help="Also print the vaccination programme"
    )
    args = parser.parse_args()

    try:
        asyncio.run(seed())
    except Exception as exc:
        print(f"Error seeding presets: {exc}")
        sys.exit(1)
    if args.show_vaccines:
        show_vaccines()
