# domain/entities/disparity.py
from dataclasses import dataclass

from carpool.domain.entities.person import Person


@dataclass(frozen=True)
class Disparity:
    """`rider` owes `driver` `magnitude` future drives."""

    driver: Person
    rider: Person
    magnitude: int

    def __str__(self) -> str:
        plural = "" if self.magnitude == 1 else "s"
        return f"{self.rider} owes {self.driver} {self.magnitude} ride{plural}"
