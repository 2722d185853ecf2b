"""
Benchmark module - timing of logging call patterns

The CLI (``log-any-bench``) needs the ``bench`` extra (click, rich); the
scenario and runner only use the standard library.
"""

from log_any.bench.scenario import (
    DiscardAdapter,
    LOG_ANY_SCENARIO,
    Participant,
    Scenario,
    SCENARIOS,
)
from log_any.bench.runner import (
    BenchmarkResult,
    format_results,
    run_participant,
    run_scenario,
)

__all__ = [
    "DiscardAdapter",
    "LOG_ANY_SCENARIO",
    "Participant",
    "Scenario",
    "SCENARIOS",
    "BenchmarkResult",
    "format_results",
    "run_participant",
    "run_scenario",
]
