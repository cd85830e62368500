# io/report.py
from collections.abc import Iterable, Sequence

from carpool.domain.entities.person import Person
from carpool.domain.roster import Roster
from carpool.domain.selection import Groups
from carpool.policy.pairs import PairsDiagnostics
from carpool.policy.points import PointsDiagnostics
from carpool.policy.result import MethodResult
from carpool.policy.subsets import SubsetsDiagnostics
from carpool.policy.units import UnitsDiagnostics
from carpool.runtime.types import SelectionMethod

WIDTH = 10


def _row(label: object, cells: Iterable[object]) -> str:
    return str(label).rjust(WIDTH) + "".join(str(c).rjust(WIDTH) for c in cells)


def _one_decimal(x: float) -> str:
    s = f"{x:.1f}"
    return s[:-2] if s.endswith(".0") else s


# ------------------------ Method tables ------------------------


def _units_lines(result: MethodResult, roster: Roster) -> list[str]:
    diag = result.diagnostics
    lines = []
    if isinstance(diag, UnitsDiagnostics):
        lines += [f"m={diag.m}", f"U={diag.unit}", "", ""]
    lines.append(_row("PERSON->", roster))
    if isinstance(diag, UnitsDiagnostics):
        lines += [_row(f"U/k={share}", deltas) for share, deltas in diag.rows]
        lines.append("Final Scores:")
    lines.append(_row("", (result.scores[p] for p in roster)))
    return lines


def _points_lines(result: MethodResult, roster: Roster) -> list[str]:
    diag = result.diagnostics
    lines = [_row("PERSON->", roster)]
    if isinstance(diag, PointsDiagnostics):
        lines += [_row("", deltas) for deltas in diag.rows]
        lines.append("Final Scores:")
    lines.append(_row("", (result.scores[p] for p in roster)))
    return lines


def _subsets_lines(result: MethodResult, roster: Roster) -> list[str]:
    lines = [_row("DRIVER->", roster)]
    for subset in result.subsets:
        lines.append(_row(subset.codes, (subset.drives.get(p, "") for p in roster)))

    diag = result.diagnostics
    if isinstance(diag, SubsetsDiagnostics):
        lines += ["", "Participations in pool size:"]
        lines += [_row(f"b{pool.size}", pool.participations) for pool in diag.pools]
        lines += ["", "Drives in pool size:"]
        lines += [_row(f"d{pool.size}", pool.drives) for pool in diag.pools]
        lines += ["", "Current Fairness:"]
        lines.append(_row("fair d", (_one_decimal(x) for x in diag.fair)))
        lines.append(_row("actual d", diag.actual))
    return lines


def _pairs_lines(result: MethodResult, roster: Roster) -> list[str]:
    lines = []
    diag = result.diagnostics
    if isinstance(diag, PairsDiagnostics):
        lines.append(_row("DRIVER->", roster))
        for rider in roster:
            cells = (
                "X" if rider == driver else diag.matrix[driver.id][rider.id] for driver in roster
            )
            lines.append(_row(rider, cells))
        lines.append("")
    lines.append("Current disparities:" if result.disparities else "There are no disparities!")
    lines += [f"\t{d}" for d in result.disparities]
    return lines


_TABLES = {
    SelectionMethod.UNITS: _units_lines,
    SelectionMethod.POINTS: _points_lines,
    SelectionMethod.SUBSETS: _subsets_lines,
    SelectionMethod.PAIRS: _pairs_lines,
}


def method_lines(result: MethodResult, roster: Roster) -> list[str]:
    return _TABLES[result.method](result, roster)


# ------------------------ Selection ----------------------------


def presence_line(present: Sequence[Person]) -> str:
    return "Given " + ", ".join(p.name for p in present) + " show up..."


def selection_lines(groups: Groups | None, people_count: int) -> list[str]:
    if groups is None:
        return ["No rides recorded with exactly this group."]
    if not groups or not groups[0] or len(groups[0]) == people_count:
        return ["All equal. Anyone can drive!"]
    lines = []
    for i, group in enumerate(groups):
        prefix = ("First " if i == 0 else "Then ") if len(groups) > 1 else ""
        lines.append("\t" + prefix + " or ".join(str(p) for p in group))
    return lines


def render(
    result: MethodResult,
    roster: Roster,
    present: Sequence[Person],
    groups: Groups | None,
) -> str:
    lines = [f"Using method: {result.method.value.capitalize()}", ""]
    lines += method_lines(result, roster)
    lines += ["", presence_line(present)]
    lines += selection_lines(groups, len(roster))
    lines.append("")
    return "\n".join(lines)
