"""
Scenario runner

Times each participant with timeit against a fresh manager, so bindings made
by one participant's setup never leak into the next.
"""

from __future__ import annotations

import statistics
import timeit
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from log_any.bench.scenario import Participant, Scenario
from log_any.core.manager import reset_manager


@dataclass
class BenchmarkResult:
    """
    Timing of one participant.

    Attributes:
        name: Participant name
        number: Statement executions per repeat
        best: Fastest time per call, in seconds
        mean: Mean time per call across repeats, in seconds
    """

    name: str
    number: int
    best: float
    mean: float

    @property
    def rate(self) -> float:
        """Calls per second at the best time."""
        return 1.0 / self.best if self.best > 0 else float("inf")

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "number": self.number,
            "best": self.best,
            "mean": self.mean,
            "rate": self.rate,
        }


def run_participant(
    scenario: Scenario,
    participant: Participant,
    number: Optional[int] = None,
    repeat: int = 5,
) -> BenchmarkResult:
    """
    Time one participant.

    Args:
        scenario: Scenario providing the shared setup
        participant: Participant to time
        number: Executions per repeat (default: timeit autorange)
        repeat: Number of repeats

    Raises:
        ValueError: If number or repeat is not positive
    """
    if repeat <= 0:
        raise ValueError("repeat must be positive")
    if number is not None and number <= 0:
        raise ValueError("number must be positive")

    setup = "\n".join(part for part in (scenario.setup, participant.setup) if part)

    reset_manager()
    try:
        # timeit runs the setup before every repeat
        timer = timeit.Timer(participant.code_template, setup=setup or "pass")
        if number is None:
            number, _ = timer.autorange()
        timings = timer.repeat(repeat=repeat, number=number)
    finally:
        reset_manager()

    per_call = [t / number for t in timings]
    return BenchmarkResult(
        name=participant.name,
        number=number,
        best=min(per_call),
        mean=statistics.mean(per_call),
    )


def run_scenario(
    scenario: Scenario,
    number: Optional[int] = None,
    repeat: int = 5,
    include: Optional[Iterable[str]] = None,
) -> List[BenchmarkResult]:
    """
    Time the participants of a scenario, in scenario order.

    Args:
        scenario: Scenario to run
        number: Executions per repeat (default: timeit autorange)
        repeat: Number of repeats
        include: Participant names to run (default: all)

    Raises:
        ValueError: If include names an unknown participant
    """
    participants = scenario.participants
    if include is not None:
        wanted = list(include)
        unknown = [name for name in wanted if scenario.get(name) is None]
        if unknown:
            raise ValueError(f"Unknown participants: {', '.join(unknown)}")
        participants = [p for p in participants if p.name in wanted]

    return [run_participant(scenario, p, number=number, repeat=repeat) for p in participants]


def format_results(results: List[BenchmarkResult]) -> List[Dict]:
    """
    Rows sorted fastest first, with speed relative to the slowest.

    Each row: name, rate (calls/s), time (seconds per call), vs_slowest.
    """
    if not results:
        return []

    ordered = sorted(results, key=lambda r: r.best)
    slowest = ordered[-1].best
    rows = []
    for result in ordered:
        rows.append(
            {
                "name": result.name,
                "rate": result.rate,
                "time": result.best,
                "vs_slowest": slowest / result.best if result.best > 0 else float("inf"),
            }
        )
    return rows


def format_duration(seconds: float) -> str:
    """Human readable duration (ns/us/ms/s)."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.1f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}us"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"
