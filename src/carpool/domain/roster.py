# domain/roster.py
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from carpool.domain.entities.person import Person
from carpool.errors import MalformedInputError


@dataclass(frozen=True)
class Roster:
    """Ordered, validated set of participants. people[i].id == i."""

    people: tuple[Person, ...]
    _by_code: dict[str, Person] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        people = tuple(self.people)
        if not people:
            raise MalformedInputError("roster is empty")
        by_code: dict[str, Person] = {}
        for i, p in enumerate(people):
            if p.id != i:
                raise MalformedInputError(f"{p} has id {p.id}, expected {i}")
            if len(p.code) != 1:
                raise MalformedInputError(f"code {p.code!r} must be a single character")
            if p.code in by_code:
                raise MalformedInputError(f"duplicate code {p.code!r}")
            by_code[p.code] = p
        object.__setattr__(self, "people", people)
        object.__setattr__(self, "_by_code", by_code)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Roster":
        """Build from (code, name) pairs, assigning ids in order."""
        return cls(tuple(Person(id=i, code=c, name=n) for i, (c, n) in enumerate(pairs)))

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.people)

    def __getitem__(self, idx: int) -> Person:
        return self.people[idx]

    def by_code(self, code: str) -> Person:
        try:
            return self._by_code[code]
        except KeyError:
            raise MalformedInputError(f"unknown participant code {code!r}") from None

    def resolve(self, codes: Iterable[str], *, upper: bool = False) -> list[Person]:
        return [self.by_code(c.upper() if upper else c) for c in codes]
