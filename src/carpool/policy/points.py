# policy/points.py
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.ledger import check_conserved, scores_by_person
from carpool.domain.roster import Roster
from carpool.domain.selection import groups_from_scores
from carpool.engine.hooks import ComputeHooks, NoopHooks
from carpool.policy.result import MethodResult
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class PointsDiagnostics:
    rows: list[tuple[int, ...]] = field(default_factory=list)


def points_method(
    roster: Roster,
    rides: Sequence[Ride],
    present: Sequence[Person] | None = None,
    *,
    verbose: bool = False,
    hooks: ComputeHooks | None = None,
) -> MethodResult:
    """One point per rider to the driver, one point off each rider.

    Cruder than the units method: a seat in a full car costs the same as a
    seat in a two-person ride.
    """
    hooks = hooks or NoopHooks()
    n = len(roster)
    diag = PointsDiagnostics() if verbose else None

    totals = np.zeros(n, dtype=np.int64)
    for i, ride in enumerate(rides):
        deltas = np.zeros(n, dtype=np.int64)
        deltas[ride.driver.id] += len(ride.riders)
        for rider in ride.riders:
            deltas[rider.id] -= 1
        check_conserved(deltas, what=f"ride {i} ({ride.driver} driving)")
        totals += deltas
        hooks.ride_scored(method=SelectionMethod.POINTS, index=i, deltas=deltas.tolist())
        if diag is not None:
            diag.rows.append(tuple(int(x) for x in deltas))

    check_conserved(totals, what="total points ledger")
    scores = scores_by_person(roster, totals)
    return MethodResult(
        method=SelectionMethod.POINTS,
        groups=groups_from_scores(scores),
        scores=scores,
        diagnostics=diag,
    )
