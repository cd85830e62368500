# runtime/registries.py
from collections.abc import Callable, Sequence
from functools import partial

from carpool.config.models import MethodUnion
from carpool.domain.entities.person import Person
from carpool.domain.entities.ride import Ride
from carpool.domain.roster import Roster
from carpool.policy.pairs import pairs_method
from carpool.policy.points import points_method
from carpool.policy.result import MethodResult
from carpool.policy.subsets import subsets_method
from carpool.policy.units import units_method
from carpool.runtime.types import SelectionMethod

MethodFn = Callable[..., MethodResult]
BoundMethod = Callable[[Roster, Sequence[Ride], Sequence[Person] | None], MethodResult]

_method_registry: dict[SelectionMethod, MethodFn] = {}


def register_method(kind: SelectionMethod):
    def deco(fn: MethodFn):
        _method_registry[kind] = fn
        return fn

    return deco


def method_for(kind: SelectionMethod | str) -> MethodFn:
    if isinstance(kind, str):
        kind = SelectionMethod.parse(kind)
    try:
        return _method_registry[kind]
    except KeyError:
        raise ValueError(f"No allocation method registered for {kind.value!r}") from None


def make_method(cfg: MethodUnion, *, hooks=None) -> BoundMethod:
    """Bind a method model's options; call the result with (roster, rides, present)."""
    return partial(method_for(cfg.kind), verbose=cfg.verbose, hooks=hooks)


register_method(SelectionMethod.UNITS)(units_method)
register_method(SelectionMethod.SUBSETS)(subsets_method)
register_method(SelectionMethod.POINTS)(points_method)
register_method(SelectionMethod.PAIRS)(pairs_method)
