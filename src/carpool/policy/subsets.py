# policy/subsets.py
"""
Subsets method: one drive ledger per exact crew.

Rides are bucketed by the exact set of people in the car. Fairness is only
judged within the bucket matching today's crew; a ride with {A, B, C} says
nothing about who should drive when only {A, B} turn up.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.entities.subset import Subset, SubsetKey, subset_key
from carpool.domain.roster import Roster
from carpool.domain.selection import groups_from_scores
from carpool.engine.hooks import ComputeHooks
from carpool.policy.result import MethodResult
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class PoolSizeTotals:
    size: int
    participations: tuple[int, ...]  # rides taken in crews of this size, by person id
    drives: tuple[int, ...]  # drives made in crews of this size, by person id


@dataclass(frozen=True)
class SubsetsDiagnostics:
    pools: tuple[PoolSizeTotals, ...]  # largest crews first
    fair: tuple[float, ...]  # expected drives, by person id
    actual: tuple[int, ...]


def build_subsets(rides: Sequence[Ride]) -> dict[SubsetKey, Subset]:
    subsets: dict[SubsetKey, Subset] = {}
    for ride in rides:
        key = subset_key(ride.participants)
        subset = subsets.get(key)
        if subset is None:
            subset = subsets[key] = Subset.of(ride.participants)
        subset.add_ride(ride.driver)
    return subsets


def pool_size_diagnostics(roster: Roster, subsets: Sequence[Subset]) -> SubsetsDiagnostics:
    n = len(roster)
    by_size: dict[int, list[Subset]] = {}
    for s in subsets:
        by_size.setdefault(len(s.drives), []).append(s)

    pools = []
    fair = np.zeros(n, dtype=np.float64)
    actual = np.zeros(n, dtype=np.int64)
    for size in sorted(by_size, reverse=True):
        participations = np.zeros(n, dtype=np.int64)
        drives = np.zeros(n, dtype=np.int64)
        for s in by_size[size]:
            rides_in_subset = sum(s.drives.values())
            for person, count in s.drives.items():
                participations[person.id] += rides_in_subset
                drives[person.id] += count
        fair += participations / size
        actual += drives
        pools.append(
            PoolSizeTotals(
                size=size,
                participations=tuple(int(x) for x in participations),
                drives=tuple(int(x) for x in drives),
            )
        )
    return SubsetsDiagnostics(
        pools=tuple(pools),
        fair=tuple(float(x) for x in fair),
        actual=tuple(int(x) for x in actual),
    )


def subsets_method(
    roster: Roster,
    rides: Sequence[Ride],
    present: Sequence[Person] | None = None,
    *,
    verbose: bool = False,
    hooks: ComputeHooks | None = None,
) -> MethodResult:
    """Rank today's crew by its own drive counts; None when that crew never rode.

    `hooks` is accepted for a uniform method signature; no per-ride scores exist here.
    """
    present = roster.people if present is None else present

    subsets = build_subsets(rides)
    ordered = tuple(sorted(subsets.values(), key=lambda s: len(s.drives), reverse=True))
    diag = pool_size_diagnostics(roster, ordered) if verbose else None

    active = subsets.get(subset_key(present))
    groups = None if active is None else groups_from_scores(active.drives)
    return MethodResult(
        method=SelectionMethod.SUBSETS,
        groups=groups,
        subsets=ordered,
        diagnostics=diag,
    )
