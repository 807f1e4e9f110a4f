from typing import List, Dict, Optional, Sequence
from app.domain.allocation import allocate
from app.domain.models import AllocationResult, Person
from app.config.settings import settings

class GroupService:
    def __init__(self, default_group_size: Optional[float] = None, seed: Optional[int] = None):
        self.default_group_size = default_group_size if default_group_size is not None else settings.GROUP_SIZE_DEFAULT
        self.seed = seed if seed is not None else settings.RANDOM_SEED

    def create_groups(self, roster: Sequence[Person], group_size: Optional[float] = None,
                      seed: Optional[int] = None) -> AllocationResult:
        size = group_size if group_size is not None else self.default_group_size
        return allocate(roster, size, seed=seed if seed is not None else self.seed)

    def group_summary(self, result: AllocationResult) -> List[Dict]:
        """Per-group member count and role mix, for display."""
        summary = []
        for i, group in enumerate(result.groups):
            roles: Dict[str, int] = {}
            for person in group:
                roles[person.role] = roles.get(person.role, 0) + 1
            summary.append({"group": i + 1, "size": len(group), "roles": roles})
        return summary
