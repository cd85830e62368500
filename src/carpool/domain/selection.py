# domain/selection.py
"""
Ranked tiers of candidate drivers.

A selection is one of:
  • a non-empty tuple of groups, most entitled to drive first;
  • an empty tuple: no disparity, anyone may drive;
  • None: no information (the present crew has no ride history).
"""

from collections.abc import Collection, Mapping

from carpool.domain.entities.person import Person

Group = tuple[Person, ...]
Groups = tuple[Group, ...]


def groups_from_scores(scores: Mapping[Person, int]) -> Groups:
    """Partition people into tiers of equal score, lowest score first."""
    values = set(scores.values())
    if len(values) <= 1:
        return ()
    tiers: dict[int, list[Person]] = {}
    for person, score in scores.items():
        tiers.setdefault(score, []).append(person)
    return tuple(tuple(tiers[s]) for s in sorted(tiers))


def filter_groups(groups: Groups | None, present: Collection[Person]) -> Groups | None:
    """Keep only present members, dropping tiers left empty. Order is preserved."""
    if groups is None:
        return None
    present = set(present)
    kept = (tuple(p for p in g if p in present) for g in groups)
    return tuple(g for g in kept if g)
