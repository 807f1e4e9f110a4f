# tests/test_allocation.py
import random
from collections import Counter

import pytest
from faker import Faker
from app.domain.allocation import allocate, assign, count_roles
from app.domain.errors import AllocationInvariantViolation, InsufficientRoleSupply, InvalidConfiguration
from app.domain.models import Person

FAKE = Faker()


@pytest.fixture
def make_roster():
    """
    Build a roster from {role: count}. Names come from Faker and may repeat.
    """
    def _make(role_counts):
        people = []
        for role, count in role_counts.items():
            for _ in range(count):
                people.append(Person(name=FAKE.first_name(), role=role))
        random.Random(0).shuffle(people)
        return people
    return _make


def role_mix(group):
    return Counter(p.role for p in group)

# -------------------------------
# allocate
# -------------------------------

def test_allocate_two_people():
    roster = [Person(name="Ann", role="Dev"), Person(name="Bo", role="PM")]
    result = allocate(roster, 2, seed=1)
    assert result.sizes == [2]
    assert len(result.groups) == 1
    assert {id(p) for p in result.groups[0]} == {id(p) for p in roster}

def test_allocate_balanced_roles(make_roster):
    roster = make_roster({"A": 6, "B": 3})
    result = allocate(roster, 3, seed=5)
    assert result.sizes == [3, 3, 3]
    for group in result.groups:
        assert role_mix(group) == Counter({"A": 2, "B": 1})

def test_allocate_accepts_dicts():
    roster = [{"name": "Ann", "role": "Dev"}, {"name": "Bo", "role": "Dev"}, {"name": "Cy", "role": "QA"}]
    result = allocate(roster, 2, seed=3)
    assert sum(len(g) for g in result.groups) == 3
    assert all(isinstance(p, Person) for g in result.groups for p in g)

def test_allocate_duplicate_people_are_distinct():
    roster = [Person(name="Sam", role="Dev") for _ in range(4)]
    result = allocate(roster, 2, seed=2)
    assigned = [p for g in result.groups for p in g]
    assert len(assigned) == 4
    assert len({id(p) for p in assigned}) == 4

@pytest.mark.parametrize("seed", range(20))
def test_allocate_never_drops_or_duplicates(make_roster, seed):
    rng = random.Random(seed)
    role_counts = {role: rng.randint(0, 9) for role in ["Dev", "PM", "QA", "Design"]}
    role_counts["Dev"] += 2
    roster = make_roster(role_counts)
    desired = rng.choice([2, 3, 4, 5, 7])
    result = allocate(roster, desired, seed=seed)

    assigned = [p for g in result.groups for p in g]
    assert sorted(id(p) for p in assigned) == sorted(id(p) for p in roster)
    assert [len(g) for g in result.groups] == result.sizes
    assert max(result.sizes) - min(result.sizes) <= 1
    for i, group in enumerate(result.groups):
        for role, counts in result.quotas.items():
            assert role_mix(group).get(role, 0) == counts[i]

def test_allocate_records_follow_groups(make_roster):
    roster = make_roster({"A": 5, "B": 4})
    result = allocate(roster, 3, seed=9)
    expected = [(p.name, p.role, gi + 1) for gi, g in enumerate(result.groups) for p in g]
    assert [(r.name, r.role, r.group_index) for r in result.records] == expected
    assert Counter((r.name, r.role) for r in result.records) == Counter((p.name, p.role) for p in roster)

def test_allocate_same_seed_same_structure(make_roster):
    roster = make_roster({"A": 5, "B": 4, "C": 3})
    first = allocate(roster, 4, seed=21)
    second = allocate(roster, 4, seed=21)
    assert first.sizes == second.sizes
    assert first.quotas == second.quotas

def test_allocate_rng_argument(make_roster):
    roster = make_roster({"A": 4, "B": 4})
    result = allocate(roster, 4, rng=random.Random(8))
    assert result.sizes == [4, 4]

def test_allocate_invalid_group_size(make_roster):
    with pytest.raises(InvalidConfiguration):
        allocate(make_roster({"A": 4}), 1)

def test_allocate_roster_too_small():
    with pytest.raises(InvalidConfiguration):
        allocate([Person(name="Solo", role="Dev")], 2)

# -------------------------------
# assign
# -------------------------------

def test_count_roles_first_appearance_order():
    roster = [Person(name="a", role="QA"), Person(name="b", role="Dev"), Person(name="c", role="QA")]
    assert list(count_roles(roster).items()) == [("QA", 2), ("Dev", 1)]

def test_assign_insufficient_role_supply():
    roster = [Person(name="a", role="A"), Person(name="b", role="B")]
    with pytest.raises(InsufficientRoleSupply):
        assign(roster, {"A": [2], "B": [0]}, [2], rng=random.Random(0))

def test_assign_leftovers_fill_open_seats():
    # Role C is missing from the table; its people fill the open seats.
    roster = [Person(name=n, role=r) for n, r in [("a", "A"), ("b", "A"), ("c", "C"), ("d", "C")]]
    groups, records = assign(roster, {"A": [1, 1]}, [2, 2], rng=random.Random(4))
    assert [len(g) for g in groups] == [2, 2]
    assert [role_mix(g)["A"] for g in groups] == [1, 1]
    assert len(records) == 4

def test_assign_size_mismatch_is_fatal():
    roster = [Person(name=n, role="A") for n in "abc"]
    with pytest.raises(AllocationInvariantViolation):
        assign(roster, {"A": [1, 1]}, [2, 2], rng=random.Random(0))

def test_assign_total_mismatch_is_fatal():
    # Everyone fits but one person is never placed.
    roster = [Person(name=n, role="A") for n in "abc"]
    with pytest.raises(AllocationInvariantViolation):
        assign(roster, {"A": [1, 1]}, [1, 1], rng=random.Random(0))
