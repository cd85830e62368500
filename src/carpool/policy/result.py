# policy/result.py
from dataclasses import dataclass

from carpool.domain.entities.disparity import Disparity
from carpool.domain.entities.person import Person
from carpool.domain.entities.subset import Subset
from carpool.domain.selection import Groups
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class MethodResult:
    method: SelectionMethod
    groups: Groups | None  # None: no information for the present crew
    # summary data, filled by the methods that produce it
    scores: dict[Person, int] | None = None
    subsets: tuple[Subset, ...] = ()
    disparities: tuple[Disparity, ...] = ()
    # only when the caller asked for verbose output
    diagnostics: object | None = None

    @property
    def no_information(self) -> bool:
        return self.groups is None
