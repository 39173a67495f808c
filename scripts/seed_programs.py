#!/usr/bin/env python3
"""
Seed the programs table with the deterministic sample catalog.

Features:
- Deterministic: fixed seed → same dataset every run (ids included)
- Idempotent: safe to run multiple times (clears before seeding)

Usage:
    python scripts/seed_programs.py
"""

from __future__ import annotations

import sys
from uuid import UUID

from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.infra.db.models.program import ProgramRow
from afterschool_catalog.infra.db.session import get_session
from afterschool_catalog.infra.sample_catalog import RANDOM_SEED, sample_programs


def to_row(record: ProgramRecord) -> ProgramRow:
    return ProgramRow(
        id=UUID(record.id),
        title=record.title,
        description=record.description,
        schedule=record.schedule,
        age_range=record.age_range,
        price=record.price,
        pricing_period=record.pricing_period,
        spots_available=record.spots_available,
        gradient_class=record.gradient_class,
        icon_path=record.icon_path,
    )


def seed_programs(seed: int = RANDOM_SEED) -> None:
    """
    Replace the programs table contents with the sample catalog.

    Args:
        seed: Random seed for deterministic results
    """
    programs = sample_programs(seed=seed)

    print(f"Seeding database with {len(programs)} programs (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        deleted_count = session.query(ProgramRow).delete()
        print(f"   Deleted {deleted_count} existing programs")

        # Step 2: Insert the sample catalog
        session.add_all([to_row(program) for program in programs])
        # get_session() is read-only (rolls back on exit), so commit here
        session.commit()

    print(f"Successfully seeded {len(programs)} programs!")

    print("\nSample programs:")
    for i, program in enumerate(programs[:5], 1):
        print(f"   {i}. {program.title} ({program.age_range}) - {program.price} {program.pricing_period}")

    if len(programs) > 5:
        print(f"   ... and {len(programs) - 5} more")


if __name__ == "__main__":
    try:
        seed_programs()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
