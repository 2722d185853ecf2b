"""
Benchmark scenario definitions

A scenario is a list of participants, each a statement timed against the
same setup. The first two participants compare an unconditional trace call
with a level check on an unconfigured (null) logger; the rest cover an
enabled level, the formatted variant and the Null proxy.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry


class DiscardAdapter(BaseAdapter):
    """Adapter with every level enabled that drops what it receives."""

    def write(self, entry: LogEntry) -> None:
        pass


@dataclass
class Participant:
    """One timed statement."""

    name: str
    code_template: str
    summary: str = ""
    setup: str = ""


@dataclass
class Scenario:
    """
    Set of participants sharing a setup.

    Attributes:
        name: Scenario name
        summary: One-line description
        participants: Statements to compare
        setup: Code run before each participant's own setup
    """

    name: str
    summary: str = ""
    participants: List[Participant] = field(default_factory=list)
    setup: str = ""

    def get(self, name: str) -> Optional[Participant]:
        for participant in self.participants:
            if participant.name == name:
                return participant
        return None

    def participant_names(self) -> List[str]:
        return [p.name for p in self.participants]


_LOGGER_SETUP = "from log_any import get_logger\nlog = get_logger('bench')"

_ENABLED_SETUP = (
    "from log_any import set_adapter\n"
    "from log_any.bench.scenario import DiscardAdapter\n"
    "set_adapter(DiscardAdapter)"
)

LOG_ANY_SCENARIO = Scenario(
    name="log_any",
    summary="Benchmark log_any",
    setup=_LOGGER_SETUP,
    participants=[
        Participant(
            name="log_trace",
            code_template='log.trace("")',
            summary="Unconditional trace call on a null logger",
        ),
        Participant(
            name="if_trace",
            code_template="if log.is_trace():\n    pass",
            summary="Level check only on a null logger",
        ),
        Participant(
            name="log_tracef",
            code_template='log.tracef("%s: %d", "count", 42)',
            summary="Formatted trace call on a null logger",
        ),
        Participant(
            name="null_proxy_trace",
            code_template='log.trace("")',
            summary="Trace call on a Null proxy",
            setup="log = get_logger('bench', proxy_class='Null')",
        ),
        Participant(
            name="log_trace_enabled",
            code_template='log.trace("message")',
            summary="Trace call with trace enabled",
            setup=_ENABLED_SETUP,
        ),
        Participant(
            name="if_trace_enabled",
            code_template="if log.is_trace():\n    pass",
            summary="Level check with trace enabled",
            setup=_ENABLED_SETUP,
        ),
        Participant(
            name="log_tracef_enabled",
            code_template='log.tracef("%s: %d", "count", 42)',
            summary="Formatted trace call with trace enabled",
            setup=_ENABLED_SETUP,
        ),
    ],
)

SCENARIOS = {LOG_ANY_SCENARIO.name: LOG_ANY_SCENARIO}
