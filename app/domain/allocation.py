# app/domain/allocation.py
"""
Pure allocation logic: turn a roster of (name, role) people into balanced groups.

Functions included:
- count_roles
- assign
- allocate

Pipeline: compute_group_sizes -> apportion -> assign.
No I/O here; the HTTP layer and the simulation script call `allocate`.
"""
import logging
import random
from typing import List, Dict, Optional, Sequence, Tuple, Union

from app.domain.apportion import QuotaTable, apportion
from app.domain.errors import AllocationInvariantViolation, InsufficientRoleSupply
from app.domain.grouping import compute_group_sizes, validate_group_size
from app.domain.models import AllocationResult, AnnotatedRecord, Person
from app.domain.randomness import make_rng, shuffle_in_place

logger = logging.getLogger(__name__)


def count_roles(roster: Sequence[Person]) -> Dict[str, int]:
    """
    Count people per role, keeping roles in order of first appearance.

    Example:
    >>> count_roles([Person(name="a", role="Dev"), Person(name="b", role="PM"), Person(name="c", role="Dev")])
    {'Dev': 2, 'PM': 1}
    """
    counts: Dict[str, int] = {}
    for person in roster:
        counts[person.role] = counts.get(person.role, 0) + 1
    return counts


def _pools_by_role(roster: Sequence[Person], rng: random.Random) -> Dict[str, List[Person]]:
    pools: Dict[str, List[Person]] = {}
    for person in roster:
        pools.setdefault(person.role, []).append(person)
    for pool in pools.values():
        shuffle_in_place(pool, rng)
    return pools


def assign(roster: Sequence[Person], quota_table: QuotaTable, capacities: List[int],
           rng: Optional[random.Random] = None) -> Tuple[List[List[Person]], List[AnnotatedRecord]]:
    """
    Fill each group with exactly quota_table[role][i] people of each role,
    drawn from shuffled per-role pools. Nobody is used twice.

    Returns (groups, records); records are ordered by group, then by
    assignment order, with 1-based group indexes.
    """
    rng = make_rng(rng=rng)
    g = len(capacities)
    pools = _pools_by_role(roster, rng)
    groups: List[List[Person]] = [[] for _ in range(g)]

    for role, per_group in quota_table.items():
        pool = pools.get(role, [])
        idx = 0
        for gi in range(g):
            for _ in range(per_group[gi]):
                if idx >= len(pool):
                    raise InsufficientRoleSupply(f"Insufficient people with role {role!r}.")
                groups[gi].append(pool[idx])
                idx += 1
        # drop consumed people so they cannot be reused
        pools[role] = pool[idx:]

    leftovers = [person for pool in pools.values() for person in pool]
    if leftovers:
        logger.warning(f"{len(leftovers)} people left after quota assignment, filling open seats")
        shuffle_in_place(leftovers, rng)
        for gi in range(g):
            while len(groups[gi]) < capacities[gi] and leftovers:
                groups[gi].append(leftovers.pop())

    for gi in range(g):
        if len(groups[gi]) != capacities[gi]:
            raise AllocationInvariantViolation(
                f"Group {gi + 1} has {len(groups[gi])} members, expected {capacities[gi]}."
            )
    assigned = sum(len(group) for group in groups)
    if assigned != len(roster):
        raise AllocationInvariantViolation(
            f"Assigned {assigned} people but the roster has {len(roster)}."
        )

    records = [
        AnnotatedRecord(name=person.name, role=person.role, group_index=gi + 1)
        for gi, group in enumerate(groups)
        for person in group
    ]
    return groups, records


def allocate(roster: Sequence[Union[Person, dict]], desired_group_size,
             rng: Optional[random.Random] = None, seed: Optional[int] = None) -> AllocationResult:
    """
    Split a roster into balanced groups whose role mix mirrors the whole roster.

    roster: Person objects or {"name": ..., "role": ...} dicts.
    rng wins over seed; with neither, a fresh generator is used for this call.
    """
    validate_group_size(desired_group_size)
    people = [p if isinstance(p, Person) else Person.model_validate(p) for p in roster]
    rng = make_rng(seed=seed, rng=rng)

    sizes = compute_group_sizes(len(people), desired_group_size)
    quotas = apportion(sizes, count_roles(people), rng=rng)
    groups, records = assign(people, quotas, sizes, rng=rng)

    logger.info(f"Allocated {len(people)} people into {len(sizes)} groups")
    return AllocationResult(sizes=sizes, quotas=quotas, groups=groups, records=records)
