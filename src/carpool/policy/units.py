# policy/units.py
"""
Units method (Fagin/Williams).

Every ride of k participants is worth one unit of driving credit per rider,
split evenly: the driver earns U*(k-1)/k and each rider pays U/k. U is the lcm
of 1..m, so every share is an exact integer for any ride size 2..m.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from carpool.domain.arithmetic import range_lcm
from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.ledger import check_conserved, scores_by_person
from carpool.domain.roster import Roster
from carpool.domain.selection import groups_from_scores
from carpool.engine.hooks import ComputeHooks, NoopHooks
from carpool.policy.result import MethodResult
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class UnitsDiagnostics:
    m: int
    unit: int
    # one row per ride: (U/k, per-person deltas indexed by id)
    rows: list[tuple[int, tuple[int, ...]]] = field(default_factory=list)


def ride_deltas(ride: Ride, m: int, unit: int) -> np.ndarray:
    k = ride.size
    # U outgrows int64 from m=43; object arrays keep exact Python ints
    deltas = np.zeros(m, dtype=object)
    deltas[ride.driver.id] += unit * (k - 1) // k
    for rider in ride.riders:
        deltas[rider.id] -= unit // k
    return deltas


def units_method(
    roster: Roster,
    rides: Sequence[Ride],
    present: Sequence[Person] | None = None,
    *,
    verbose: bool = False,
    hooks: ComputeHooks | None = None,
) -> MethodResult:
    hooks = hooks or NoopHooks()
    m = len(roster)
    unit = range_lcm(1, m)

    diag = UnitsDiagnostics(m=m, unit=unit) if verbose else None
    totals = np.zeros(m, dtype=object)
    for i, ride in enumerate(rides):
        deltas = ride_deltas(ride, m, unit)
        check_conserved(deltas, what=f"ride {i} ({ride.driver} driving)")
        totals += deltas
        hooks.ride_scored(method=SelectionMethod.UNITS, index=i, deltas=deltas.tolist())
        if diag is not None:
            diag.rows.append((unit // ride.size, tuple(int(x) for x in deltas)))

    check_conserved(totals, what="total units ledger")
    scores = scores_by_person(roster, totals)
    return MethodResult(
        method=SelectionMethod.UNITS,
        groups=groups_from_scores(scores),
        scores=scores,
        diagnostics=diag,
    )
