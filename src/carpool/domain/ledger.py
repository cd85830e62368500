# domain/ledger.py
import numpy as np

from carpool.domain.entities.person import Person
from carpool.domain.roster import Roster
from carpool.errors import InvariantViolation


def check_conserved(deltas: np.ndarray, *, what: str) -> None:
    total = int(deltas.sum())
    if total != 0:
        raise InvariantViolation(f"{what} nets to {total}, expected 0")


def scores_by_person(roster: Roster, totals: np.ndarray) -> dict[Person, int]:
    return {p: int(totals[p.id]) for p in roster}
