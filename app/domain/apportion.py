# app/domain/apportion.py
"""
Quota apportionment: how many members of each role every group should get.

Hamilton's (largest remainder) method under group capacity constraints:
- floor every ideal quota s_i * T_r / n
- hand out the leftover units to the (group, role) cells with the largest
  fractional remainders, as long as both the role and the group still have room
- equal remainders are resolved in random order (shuffle, then stable sort)

Remainders all share the denominator n, so they are kept as integer numerators
and compared exactly.
"""
import logging
import random
from typing import List, Dict, Optional

from app.domain.errors import AllocationInvariantViolation, InsufficientRoleSupply
from app.domain.randomness import make_rng, shuffle_in_place

logger = logging.getLogger(__name__)

QuotaTable = Dict[str, List[int]]


def apportion(capacities: List[int], role_counts: Dict[str, int],
              rng: Optional[random.Random] = None) -> QuotaTable:
    """
    Compute per-group role targets.

    Returns {role: [count for group 0, count for group 1, ...]} where each group's
    counts sum to its capacity and each role's counts sum to its total.

    Example:
    >>> apportion([3, 3, 3], {"A": 6, "B": 3})
    {'A': [2, 2, 2], 'B': [1, 1, 1]}
    """
    rng = make_rng(rng=rng)
    roles = list(role_counts)
    g = len(capacities)
    n = sum(capacities)

    if any(c < 0 for c in role_counts.values()):
        raise InsufficientRoleSupply("Role counts must be non-negative.")
    if n != sum(role_counts.values()):
        raise InsufficientRoleSupply(
            f"Group capacities sum to {n} but role counts sum to {sum(role_counts.values())}."
        )

    targets: QuotaTable = {r: [0] * g for r in roles}
    remainders: Dict[str, List[int]] = {r: [0] * g for r in roles}
    extras: Dict[str, int] = {}

    for r in roles:
        total = role_counts[r]
        for i, size in enumerate(capacities):
            floor, rem = divmod(size * total, n)
            targets[r][i] = floor
            remainders[r][i] = rem
        extras[r] = total - sum(targets[r])

    deficits = [capacities[i] - sum(targets[r][i] for r in roles) for i in range(g)]

    cells = [(i, r) for r in roles for i in range(g)]
    shuffle_in_place(cells, rng)
    cells.sort(key=lambda cell: remainders[cell[1]][cell[0]], reverse=True)

    for i, r in cells:
        if extras[r] <= 0 or deficits[i] <= 0:
            continue
        targets[r][i] += 1
        extras[r] -= 1
        deficits[i] -= 1

    if any(deficits):
        fill_residual(targets, remainders, extras, deficits)

    return targets


def fill_residual(targets: QuotaTable, remainders: Dict[str, List[int]],
                  extras: Dict[str, int], deficits: List[int]) -> None:
    """
    Fill groups that still have open seats after the largest-remainder pass.
    For each such group pick the role with the highest remainder there,
    then the most extras left. Mutates its arguments.
    """
    logger.debug(f"Filling open seats left by the largest-remainder pass: deficits={deficits} extras={extras}")
    for i in range(len(deficits)):
        while deficits[i] > 0:
            candidates = [r for r in targets if extras[r] > 0]
            if not candidates:
                raise AllocationInvariantViolation(
                    f"Group {i + 1} has {deficits[i]} open seats but no role has people left."
                )
            best = max(candidates, key=lambda r: (remainders[r][i], extras[r]))
            targets[best][i] += 1
            extras[best] -= 1
            deficits[i] -= 1
