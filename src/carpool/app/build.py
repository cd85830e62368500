# carpool/app/build.py
import time
from collections.abc import Mapping
from dataclasses import dataclass

from carpool.config.models import RunModel
from carpool.domain.entities.person import Person
from carpool.domain.selection import Groups, filter_groups
from carpool.engine.hooks import ComputeHooks, NoopHooks
from carpool.io.inputs import History
from carpool.io.report import render
from carpool.io.run_logging import RunLogging
from carpool.policy.result import MethodResult
from carpool.runtime.registries import BoundMethod, make_method
from carpool.runtime.types import SelectionMethod


@dataclass(frozen=True)
class Outcome:
    result: MethodResult  # as computed, before presence filtering
    present: tuple[Person, ...]
    groups: Groups | None  # filtered to who showed up

    def report(self, history: History) -> str:
        return render(self.result, history.roster, self.present, self.groups)


@dataclass
class App:
    config: RunModel
    history: History
    present: tuple[Person, ...]
    method: BoundMethod
    hooks: ComputeHooks

    @property
    def kind(self) -> SelectionMethod:
        return SelectionMethod.parse(self.config.method.kind)

    def select(self) -> Outcome:
        roster, rides = self.history.roster, self.history.rides
        self.hooks.method_start(method=self.kind, people=roster, rides=rides, present=self.present)
        t0 = time.perf_counter()
        try:
            result = self.method(roster, rides, self.present)
        except Exception as exc:
            self.hooks.error(method=self.kind, exc=exc)
            raise
        groups = filter_groups(result.groups, self.present)
        self.hooks.method_end(
            method=self.kind, groups=groups, wall_ms=(time.perf_counter() - t0) * 1000
        )
        return Outcome(result=result, present=self.present, groups=groups)


def build(
    cfg: RunModel | Mapping,
    history: History,
    *,
    run_id: str = "local",
    hooks: ComputeHooks | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, RunModel) else RunModel.model_validate(cfg)

    # 1) Hooks: explicit ones win, else logging when enabled
    if hooks is None:
        hooks = (
            RunLogging(run_id=run_id, level=model.log.level) if model.log.enabled else NoopHooks()
        )

    # 2) Who showed up, and the method bound to its options
    present = tuple(history.present(model.present))
    method = make_method(model.method, hooks=hooks)

    return App(config=model, history=history, present=present, method=method, hooks=hooks)
