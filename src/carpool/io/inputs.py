# io/inputs.py
"""
History file reader.

    A Alice B Bob C Carol
    ABC  2013-05-06
    BA
    CA   rain, took the van

The first non-blank line is the roster as CODE NAME pairs. Every later line is
a ride: the first character of its first token is the driver, the rest are the
riders. Anything after the first token is ignored.
"""

from dataclasses import dataclass
from pathlib import Path

from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.roster import Roster
from carpool.errors import MalformedInputError


@dataclass(frozen=True)
class History:
    roster: Roster
    rides: tuple[Ride, ...]

    def present(self, codes: list[str] | None) -> list[Person]:
        """Resolve present-participant codes case-insensitively; None means everyone."""
        if codes is None:
            return list(self.roster)
        people = self.roster.resolve(codes, upper=True)
        if len(set(people)) != len(people):
            raise MalformedInputError(f"participant listed twice in {''.join(codes)!r}")
        return people


def parse_roster(line: str, *, lineno: int = 1) -> Roster:
    tokens = line.split()
    if len(tokens) % 2:
        raise MalformedInputError("roster must be CODE NAME pairs", line=lineno)
    if len(tokens) < 4:
        raise MalformedInputError("roster needs at least two people", line=lineno)
    try:
        return Roster.from_pairs(zip(tokens[0::2], tokens[1::2]))
    except MalformedInputError as e:
        raise MalformedInputError(str(e), line=lineno) from None


def parse_ride(token: str, roster: Roster, *, lineno: int) -> Ride:
    try:
        driver, *riders = roster.resolve(token)
        return Ride.of(driver, riders)
    except MalformedInputError as e:
        raise MalformedInputError(str(e), line=lineno) from None


def parse_history(text: str) -> History:
    lines = [(n, line) for n, line in enumerate(text.splitlines(), start=1) if line.strip()]
    if not lines:
        raise MalformedInputError("input is empty")

    (roster_no, roster_line), *ride_lines = lines
    roster = parse_roster(roster_line, lineno=roster_no)
    rides = tuple(parse_ride(line.split()[0], roster, lineno=n) for n, line in ride_lines)
    return History(roster=roster, rides=rides)


def load_history(path: str | Path) -> History:
    return parse_history(Path(path).read_text(encoding="utf-8"))
