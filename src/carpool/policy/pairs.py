# policy/pairs.py
"""
Pairs method: pairwise driver/rider imbalance.

M[d, r] counts how often d drove r. Wherever M[i, j] < M[j, i], rider i owes
driver j the difference. The ranking is over debtors: whoever should drive
next to repay someone. The other methods rank a flat score ledger instead,
lowest first; the two readings must not be swapped for one another.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from carpool.domain.entities.disparity import Disparity
from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.roster import Roster
from carpool.domain.selection import Groups
from carpool.engine.hooks import ComputeHooks
from carpool.policy.result import MethodResult
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class PairsDiagnostics:
    matrix: tuple[tuple[int, ...], ...]  # matrix[driver.id][rider.id]


def ride_matrix(n: int, rides: Sequence[Ride]) -> np.ndarray:
    matrix = np.zeros((n, n), dtype=np.int64)
    for ride in rides:
        for rider in ride.riders:
            matrix[ride.driver.id, rider.id] += 1
    return matrix


def find_disparities(roster: Roster, matrix: np.ndarray) -> list[Disparity]:
    # argwhere walks row-major: owing rider ascending, then creditor ascending
    return [
        Disparity(
            driver=roster[j],
            rider=roster[i],
            magnitude=int(matrix[j, i] - matrix[i, j]),
        )
        for i, j in np.argwhere(matrix < matrix.T)
    ]


def rank_debtors(disparities: Sequence[Disparity]) -> Groups:
    """Largest single debt first, then largest total debt; equal pairs share a tier."""
    debts: dict[Person, list[int]] = {}
    for d in disparities:
        debts.setdefault(d.rider, []).append(d.magnitude)

    tiers: dict[tuple[int, int], list[Person]] = {}
    for rider, magnitudes in debts.items():
        tiers.setdefault((max(magnitudes), sum(magnitudes)), []).append(rider)
    return tuple(tuple(tiers[k]) for k in sorted(tiers, reverse=True))


def pairs_method(
    roster: Roster,
    rides: Sequence[Ride],
    present: Sequence[Person] | None = None,
    *,
    verbose: bool = False,
    hooks: ComputeHooks | None = None,
) -> MethodResult:
    """Rank present debtors. `hooks` is accepted for a uniform signature and unused."""
    present = set(roster.people if present is None else present)

    matrix = ride_matrix(len(roster), rides)
    disparities = [
        d for d in find_disparities(roster, matrix) if d.driver in present and d.rider in present
    ]
    diag = None
    if verbose:
        diag = PairsDiagnostics(matrix=tuple(tuple(int(x) for x in row) for row in matrix))
    return MethodResult(
        method=SelectionMethod.PAIRS,
        groups=rank_debtors(disparities),
        disparities=tuple(disparities),
        diagnostics=diag,
    )
