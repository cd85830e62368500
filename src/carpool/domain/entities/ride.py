# domain/entities/ride.py
from collections.abc import Iterable
from dataclasses import dataclass, field

from carpool.domain.entities.person import Person
from carpool.errors import MalformedInputError


@dataclass(frozen=True)
class Ride:
    driver: Person
    riders: tuple[Person, ...] = field(default=())

    def __post_init__(self):
        riders = tuple(self.riders)
        if self.driver in riders:
            raise MalformedInputError(f"{self.driver} cannot drive and ride in the same ride")
        if len(set(riders)) != len(riders):
            raise MalformedInputError(f"duplicate rider in ride driven by {self.driver}")
        object.__setattr__(self, "riders", riders)

    @classmethod
    def of(cls, driver: Person, riders: Iterable[Person] = ()) -> "Ride":
        return cls(driver=driver, riders=tuple(riders))

    @property
    def participants(self) -> tuple[Person, ...]:
        return (self.driver, *self.riders)

    @property
    def size(self) -> int:
        """k: driver plus riders."""
        return len(self.riders) + 1
