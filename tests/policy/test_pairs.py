# tests/policy/test_pairs.py
from carpool.domain.entities.disparity import Disparity
from carpool.domain.entities.ride import Ride
from carpool.domain.roster import Roster
from carpool.policy.pairs import (
    PairsDiagnostics,
    find_disparities,
    pairs_method,
    rank_debtors,
    ride_matrix,
)

ROSTER = Roster.from_pairs([("A", "Alice"), ("B", "Bob"), ("C", "Carol"), ("D", "Dan")])
A, B, C, D = ROSTER


def test_matrix_counts_driver_rider_pairs():
    m = ride_matrix(4, [Ride.of(A, [B, C]), Ride.of(A, [B])])
    assert m[A.id, B.id] == 2
    assert m[A.id, C.id] == 1
    assert m[B.id, A.id] == 0


def test_rider_owes_the_difference():
    rides = [Ride.of(A, [B])] * 3 + [Ride.of(B, [A])]
    disparities = find_disparities(ROSTER, ride_matrix(4, rides))
    assert disparities == [Disparity(driver=A, rider=B, magnitude=2)]

    res = pairs_method(ROSTER, rides)
    assert res.groups == ((B,),)
    assert res.disparities == (Disparity(driver=A, rider=B, magnitude=2),)


def test_largest_single_debt_ranks_first_then_total():
    disparities = [
        Disparity(driver=A, rider=B, magnitude=3),
        Disparity(driver=A, rider=C, magnitude=2),
        Disparity(driver=B, rider=C, magnitude=2),
        Disparity(driver=A, rider=D, magnitude=2),
    ]
    # B: max 3 / sum 3, C: max 2 / sum 4, D: max 2 / sum 2
    assert rank_debtors(disparities) == ((B,), (C,), (D,))


def test_equal_debts_share_a_tier():
    rides = [Ride.of(A, [B, C])]
    res = pairs_method(ROSTER, rides)
    assert res.groups == ((B, C),)


def test_absent_parties_drop_their_disparities():
    rides = [Ride.of(A, [B])] * 3 + [Ride.of(C, [D])]
    res = pairs_method(ROSTER, rides, [A, C, D])
    assert res.disparities == (Disparity(driver=C, rider=D, magnitude=1),)
    assert res.groups == ((D,),)


def test_no_history_means_no_debtors():
    res = pairs_method(ROSTER, [])
    assert res.groups == ()
    assert res.disparities == ()


def test_verbose_matrix():
    res = pairs_method(ROSTER, [Ride.of(A, [B])], verbose=True)
    assert isinstance(res.diagnostics, PairsDiagnostics)
    assert res.diagnostics.matrix[A.id][B.id] == 1
    assert res.diagnostics.matrix[B.id][A.id] == 0


def test_hooks_are_not_called():
    class _Trace:
        def __init__(self):
            self.calls = []

        def __getattr__(self, name):
            return lambda **kw: self.calls.append(name)

    trace = _Trace()
    res = pairs_method(ROSTER, [Ride.of(A, [B])], hooks=trace)
    assert res.groups == ((B,),)
    assert trace.calls == []
