# domain/entities/person.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    id: int  # dense, 0..n-1; doubles as an array index
    code: str  # single character, unique within a roster
    name: str

    def __str__(self) -> str:
        return self.name
