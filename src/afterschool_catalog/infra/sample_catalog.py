"""
Deterministic sample catalog.

Backs the in-memory gateway (CATALOG_BACKEND=memory) and the database seed
script, so local runs show the same programs either way.
"""

from __future__ import annotations

import random
import uuid
from decimal import Decimal

from afterschool_catalog.domain.program import ProgramRecord

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_GENERATED = 44  # On top of the featured programs

# Stable ids: same namespace + title always yields the same UUID
_ID_NAMESPACE = uuid.UUID("6f1c3f0e-8d1b-4c55-9a57-0f6b7d2f4a10")


# ==============================================================================
# Featured programs
# ==============================================================================

FEATURED_PROGRAMS: list[dict] = [
    {
        "title": "Art Adventures",
        "description": "Explore painting, drawing, and sculpture in a supportive studio.",
        "schedule": "Mon, Wed 3:30-5:00 PM",
        "age_range": "6-10 years",
        "price": Decimal("120.00"),
        "pricing_period": "per month",
        "spots_available": 5,
        "gradient_class": "bg-gradient-to-br from-pink-400 to-purple-600",
    },
    {
        "title": "Chess Club",
        "description": "Openings, tactics, and friendly tournaments for every level.",
        "schedule": "Tue 4:00-5:30 PM",
        "age_range": "8-14 years",
        "price": Decimal("0.00"),
        "pricing_period": "per semester",
        "spots_available": 12,
        "gradient_class": "bg-gradient-to-br from-gray-500 to-gray-700",
    },
    {
        "title": "Creative Art Studio",
        "description": "Painting, drawing, and sculpture. Unleash your creativity!",
        "schedule": "Sat 10:00 AM-12:00 PM",
        "age_range": "5-12 years",
        "price": Decimal("0.00"),
        "pricing_period": "per program",
        "spots_available": 15,
        "gradient_class": None,
    },
    {
        "title": "Online Coding for Kids",
        "description": "Programming basics through fun projects and games.",
        "schedule": "Wed, Fri 5:00-6:00 PM",
        "age_range": "8-14 years",
        "price": Decimal("175.00"),
        "pricing_period": "per program",
        "spots_available": 0,
        "gradient_class": "bg-gradient-to-br from-green-400 to-teal-600",
    },
    {
        "title": "Basketball Skills Camp",
        "description": "Shooting, defense, and game strategy with professional coaching.",
        "schedule": "Tue, Thu 4:00-5:30 PM",
        "age_range": "8-14 years",
        "price": Decimal("200.00"),
        "pricing_period": "per program",
        "spots_available": 3,
        "gradient_class": "bg-gradient-to-br from-orange-400 to-red-600",
    },
    {
        "title": "After School Soccer",
        "description": "Dribbling, passing, and teamwork. Perfect for beginners!",
        "schedule": "Mon, Wed 3:00-4:30 PM",
        "age_range": "6-10 years",
        "price": Decimal("150.00"),
        "pricing_period": "per session",
        "spots_available": 20,
        "gradient_class": "bg-gradient-to-br from-hero-blue-400 to-hero-blue-600",
    },
]


# ==============================================================================
# Generated programs
# ==============================================================================

ACTIVITIES = [
    "Robotics Lab",
    "Swim School",
    "Drama Workshop",
    "Piano Lessons",
    "Junior Science Explorers",
    "Hip-Hop Dance",
    "Creative Writing",
    "Martial Arts",
    "Nature Club",
    "Math Olympiad Prep",
    "Photography Basics",
]
LEVELS = ["Beginners", "Intermediate", "Advanced", "Summer Camp"]
DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
AGE_RANGES = ["4-6 years", "5-8 years", "6-10 years", "8-12 years", "10-14 years", "12-16 years"]
PERIODS = ["per month", "per session", "per semester", "per program"]


def _program_id(title: str) -> str:
    return str(uuid.uuid5(_ID_NAMESPACE, title))


def _generate_program(index: int) -> dict:
    activity = ACTIVITIES[index % len(ACTIVITIES)]
    level = LEVELS[(index // len(ACTIVITIES)) % len(LEVELS)]
    start_hour = random.randint(2, 5)
    days = ", ".join(sorted(random.sample(DAYS, k=random.randint(1, 2)), key=DAYS.index))

    # A few free programs, the rest priced in whole euros
    if random.random() < 0.1:
        price = Decimal("0.00")
    else:
        price = Decimal(random.randint(40, 300)).quantize(Decimal("0.01"))

    return {
        "title": f"{activity} ({level})",
        "description": f"{activity} for {level.lower()}, led by certified instructors.",
        "schedule": f"{days} {start_hour}:00-{start_hour + 1}:30 PM",
        "age_range": random.choice(AGE_RANGES),
        "price": price,
        "pricing_period": random.choice(PERIODS),
        "spots_available": random.choice([0, 1, 2, 4, 6, 8, 10, 15, 20]),
        "gradient_class": None,
    }


def sample_programs(
    num_generated: int = NUM_GENERATED, seed: int = RANDOM_SEED
) -> list[ProgramRecord]:
    """
    Build the sample catalog in catalog order (title, then id).

    Args:
        num_generated: Programs to generate on top of the featured ones
        seed: Random seed for deterministic results
    """
    rng_state = random.getstate()
    random.seed(seed)
    try:
        generated = [_generate_program(index) for index in range(num_generated)]
    finally:
        random.setstate(rng_state)

    records = [
        ProgramRecord(id=_program_id(data["title"]), **data)
        for data in [*FEATURED_PROGRAMS, *generated]
    ]
    for record in records:
        record.validate()

    return sorted(records, key=lambda record: (record.title, record.id))
