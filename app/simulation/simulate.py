# app/simulation/simulate.py
"""
Simulation script: creates a fake roster, splits it into balanced groups,
and prints each group with its role mix.

Uses the domain layer directly (no HTTP calls).
    python -m app.simulation.simulate
"""

import logging
import random
from faker import Faker
from app.domain.allocation import allocate, count_roles
from app.domain.models import Person
from app.services.group_service import GroupService

NUM_PEOPLE = 23
GROUP_SIZE = 4
ROLES = {"Engineer": 0.5, "Designer": 0.2, "Product": 0.2, "Sales": 0.1}
SEED = 42


def fake_roster(num_people: int, roles: dict, seed: int = None) -> list:
    fake = Faker()
    if seed is not None:
        Faker.seed(seed)
    rng = random.Random(seed)
    names, weights = list(roles), list(roles.values())
    return [Person(name=fake.name(), role=rng.choices(names, weights)[0]) for _ in range(num_people)]


def run_simulation(num_people: int = NUM_PEOPLE, group_size: float = GROUP_SIZE,
                   roles: dict = None, seed: int = SEED):
    roster = fake_roster(num_people, roles or ROLES, seed)
    print(f"Roster of {len(roster)}: {count_roles(roster)}")

    result = allocate(roster, group_size, seed=seed)
    for entry, group in zip(GroupService().group_summary(result), result.groups):
        print(f"Group {entry['group']} (n={entry['size']}) {entry['roles']}")
        for p in group:
            print(f"  - {p.name} ({p.role})")
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simulation()
