# domain/entities/subset.py
from collections.abc import Iterable
from dataclasses import dataclass, field

from carpool.domain.entities.person import Person
from carpool.errors import InvariantViolation

SubsetKey = tuple[int, ...]


def subset_key(participants: Iterable[Person]) -> SubsetKey:
    """Canonical crew key: participant ids, deduplicated and sorted ascending."""
    return tuple(sorted({p.id for p in participants}))


@dataclass
class Subset:
    """Drive counts for one exact crew; rides with any other crew never touch it."""

    drives: dict[Person, int] = field(default_factory=dict)

    @classmethod
    def of(cls, participants: Iterable[Person]) -> "Subset":
        ordered = sorted(set(participants), key=lambda p: p.id)
        return cls(drives={p: 0 for p in ordered})

    @property
    def participants(self) -> list[Person]:
        return list(self.drives)

    @property
    def key(self) -> SubsetKey:
        return subset_key(self.drives)

    @property
    def codes(self) -> str:
        return "".join(p.code for p in self.participants)

    def add_ride(self, driver: Person) -> None:
        if driver not in self.drives:
            raise InvariantViolation(f"{driver} is not a member of crew {self.codes}")
        self.drives[driver] += 1
