# app/domain/grouping.py
"""
Group sizing: how many groups to form and how large each one is.
"""
import logging
import math
import numbers
from typing import List

from app.domain.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def validate_group_size(desired_size) -> float:
    if isinstance(desired_size, bool) or not isinstance(desired_size, numbers.Real):
        raise InvalidConfiguration(f"Group Size must be a number, got {desired_size!r}.")
    if not math.isfinite(desired_size) or desired_size < MIN_GROUP_SIZE:
        raise InvalidConfiguration(f"Group Size must be at least {MIN_GROUP_SIZE}.")
    return float(desired_size)


def compute_group_sizes(n: int, desired_size) -> List[int]:
    """
    Split `n` people into groups as evenly as possible around `desired_size`.
    Number of groups is round(n / desired_size), rounding halves up.
    The first `remainder` groups get one extra member, so sizes differ by at most 1.

    Example:
    >>> compute_group_sizes(7, 3)
    [4, 3]
    >>> compute_group_sizes(5, 2)
    [2, 2, 1]
    """
    desired = validate_group_size(desired_size)
    if n < 2:
        raise InvalidConfiguration("Need at least 2 people to form groups.")

    num_groups = max(1, _round_half_up(n / desired))
    base_size = n // num_groups
    extra = n - base_size * num_groups  # first 'extra' groups get 1 more

    sizes = [base_size + (1 if i < extra else 0) for i in range(num_groups)]
    logger.debug(f"{n} people, target {desired_size} -> {num_groups} groups {sizes}")
    return sizes
