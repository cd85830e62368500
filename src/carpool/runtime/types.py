# runtime/types.py
from enum import Enum


class SelectionMethod(Enum):
    UNITS = "units"
    SUBSETS = "subsets"
    POINTS = "points"
    PAIRS = "pairs"

    @classmethod
    def parse(cls, name: str) -> "SelectionMethod":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown method {name!r} (choose from {choices})") from None


DEFAULT_METHOD = SelectionMethod.UNITS
