"""Plan model - phases, actions and the per-run context.

A Plan is data: it is built before anything runs and executed by the
Provisioner. Actions never share mutable state; what one phase learns is
handed to the next through RunContext.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from woo_test_env.model.flags import FeatureFlags

if TYPE_CHECKING:
    from woo_test_env.connector.wpcli import CommandRunner


class ActionOutcome(Enum):
    """What happened to one action."""

    APPLIED = "applied"
    SKIPPED = "skipped"
    NOT_IMPLEMENTED = "not_implemented"


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class Skip:
    """Returned by a precondition when the effect must not run."""

    reason: str
    warn: bool = False


@dataclass(frozen=True)
class RunContext:
    """Flags plus facts discovered so far in this run."""

    flags: FeatureFlags
    facts: dict[str, Any] = field(default_factory=dict)

    def with_fact(self, key: str, value: Any) -> "RunContext":
        return replace(self, facts={**self.facts, key: value})

    def fact(self, key: str, default: Any = None) -> Any:
        return self.facts.get(key, default)


Precondition = Callable[["CommandRunner", RunContext], Skip | None]
Effect = Callable[["CommandRunner", RunContext], RunContext | None]


@dataclass(frozen=True)
class Action:
    """A named step.

    Attributes:
        label: Human label, used in progress lines and errors.
        effect: Call into WordPress. May return an updated RunContext.
            None marks the action as intentionally not implemented.
        precondition: Checked against live state first; a Skip result
            means the effect is not run. None means always run.
    """

    label: str
    effect: Effect | None
    precondition: Precondition | None = None

    @property
    def implemented(self) -> bool:
        return self.effect is not None


@dataclass(frozen=True)
class Phase:
    name: str
    actions: tuple[Action, ...]


@dataclass(frozen=True)
class Plan:
    """Ordered phases. Order is significant and never changed at run time."""

    name: str
    phases: tuple[Phase, ...]

    @property
    def phase_names(self) -> list[str]:
        return [phase.name for phase in self.phases]

    def phase(self, name: str) -> Phase:
        for phase in self.phases:
            if phase.name == name:
                return phase
        raise KeyError(name)


@dataclass
class ActionRecord:
    phase: str
    action: str
    outcome: ActionOutcome
    detail: str = ""


@dataclass
class RunReport:
    """Result of one setup or teardown run."""

    plan: str
    state: RunState = RunState.NOT_STARTED
    phase_index: int = -1
    records: list[ActionRecord] = field(default_factory=list)
    failed_phase: str | None = None
    failed_action: str | None = None
    context: RunContext | None = None

    def count(self, outcome: ActionOutcome) -> int:
        return sum(1 for record in self.records if record.outcome == outcome)

    @property
    def phases_run(self) -> list[str]:
        seen: list[str] = []
        for record in self.records:
            if record.phase not in seen:
                seen.append(record.phase)
        return seen
