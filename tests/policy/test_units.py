# tests/policy/test_units.py
import random

import pytest

from carpool.domain.arithmetic import range_lcm
from carpool.domain.entities.ride import Ride
from carpool.domain.roster import Roster
from carpool.errors import DomainError
from carpool.policy.units import UnitsDiagnostics, ride_deltas, units_method
from carpool.runtime.types import SelectionMethod


def _abc():
    return Roster.from_pairs([("A", "Alice"), ("B", "Bob"), ("C", "Carol")])


def test_worked_example():
    roster = _abc()
    a, b, c = roster
    rides = [Ride.of(a, [b, c]), Ride.of(b, [a]), Ride.of(c, [a])]

    res = units_method(roster, rides)
    assert res.method is SelectionMethod.UNITS
    assert res.scores == {a: -2, b: 1, c: 1}
    assert res.groups == ((a,), (b, c))
    assert res.diagnostics is None


def test_single_ride_deltas_are_exact_and_conserved():
    roster = Roster.from_pairs([(chr(65 + i), f"P{i}") for i in range(7)])
    unit = range_lcm(1, len(roster))
    people = list(roster)
    for k in range(1, len(roster) + 1):
        ride = Ride.of(people[0], people[1:k])
        deltas = ride_deltas(ride, len(roster), unit)
        assert int(deltas.sum()) == 0
        assert deltas[0] == unit * (k - 1) // k
        assert all(deltas[i] == -(unit // k) for i in range(1, k))
        assert all(deltas[i] == 0 for i in range(k, len(roster)))


def test_total_ledger_sums_to_zero_for_random_history():
    rng = random.Random(7)
    roster = Roster.from_pairs([(chr(65 + i), f"P{i}") for i in range(6)])
    people = list(roster)
    rides = []
    for _ in range(200):
        crew = rng.sample(people, rng.randint(1, len(people)))
        rides.append(Ride.of(crew[0], crew[1:]))

    res = units_method(roster, rides)
    assert sum(res.scores.values()) == 0


def test_solo_rides_change_nothing():
    roster = _abc()
    a, b, c = roster
    res = units_method(roster, [Ride.of(a), Ride.of(b)])
    assert res.scores == {a: 0, b: 0, c: 0}
    assert res.groups == ()


def test_verbose_rows():
    roster = _abc()
    a, b, c = roster
    res = units_method(roster, [Ride.of(a, [b, c]), Ride.of(b, [a])], verbose=True)
    assert isinstance(res.diagnostics, UnitsDiagnostics)
    assert res.diagnostics.m == 3
    assert res.diagnostics.unit == 6
    assert res.diagnostics.rows == [(2, (4, -2, -2)), (3, (-3, 3, 0))]


def test_single_person_roster_is_a_domain_error():
    roster = Roster.from_pairs([("A", "Alice")])
    with pytest.raises(DomainError):
        units_method(roster, [])


def test_hooks_see_every_ride():
    class _Trace:
        def __init__(self):
            self.seen = []

        def ride_scored(self, *, method, index, deltas):
            self.seen.append((method, index, deltas))

    roster = _abc()
    a, b, c = roster
    trace = _Trace()
    units_method(roster, [Ride.of(a, [b]), Ride.of(c, [a, b])], hooks=trace)
    assert trace.seen == [
        (SelectionMethod.UNITS, 0, [3, -3, 0]),
        (SelectionMethod.UNITS, 1, [-2, -2, 4]),
    ]


@pytest.mark.parametrize("m", [41, 43, 60])
def test_large_rosters_keep_exact_scores(m):
    roster = Roster.from_pairs([(chr(0x100 + i), f"P{i}") for i in range(m)])
    people = list(roster)
    a, b = people[0], people[1]
    unit = range_lcm(1, m)
    assert unit // 2 * 100 > 2**63  # past int64

    rides = [Ride.of(a, [b])] * 100 + [Ride.of(people[2], people[3:])]
    res = units_method(roster, rides)
    assert res.scores[a] == unit // 2 * 100
    assert res.scores[b] == -(unit // 2 * 100)
    assert res.scores[people[2]] == unit * (m - 3) // (m - 2)
    assert sum(res.scores.values()) == 0
    assert res.groups[0] == (b,)
    assert res.groups[-1] == (a,)
