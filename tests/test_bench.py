"""Tests for the benchmark scenario, runner and CLI"""

import pytest
from click.testing import CliRunner

from log_any import FacadeConfig, get_manager, reset_manager
from log_any.adapters import NullAdapter
from log_any.bench import (
    BenchmarkResult,
    LOG_ANY_SCENARIO,
    Participant,
    Scenario,
    format_results,
    run_participant,
    run_scenario,
)
from log_any.bench.cli import main
from log_any.bench.runner import format_duration


class TestScenario:
    """Test scenario definitions."""

    def test_baseline_participants_first(self):
        names = LOG_ANY_SCENARIO.participant_names()
        assert names[:2] == ["log_trace", "if_trace"]
        assert LOG_ANY_SCENARIO.get("log_trace").code_template == 'log.trace("")'
        assert LOG_ANY_SCENARIO.get("missing") is None

    def test_participants_compile(self):
        for participant in LOG_ANY_SCENARIO.participants:
            compile(participant.code_template, participant.name, "exec")
            compile(participant.setup, participant.name, "exec")
        compile(LOG_ANY_SCENARIO.setup, "setup", "exec")


class TestRunner:
    """Test timing runs."""

    def teardown_method(self):
        reset_manager(FacadeConfig())

    def test_run_scenario(self):
        results = run_scenario(LOG_ANY_SCENARIO, number=50, repeat=2)
        assert [r.name for r in results] == LOG_ANY_SCENARIO.participant_names()
        for result in results:
            assert result.number == 50
            assert result.best > 0
            assert result.mean >= result.best

    def test_include(self):
        results = run_scenario(LOG_ANY_SCENARIO, number=10, repeat=1, include=["if_trace"])
        assert [r.name for r in results] == ["if_trace"]

    def test_include_unknown(self):
        with pytest.raises(ValueError, match="nope"):
            run_scenario(LOG_ANY_SCENARIO, number=10, repeat=1, include=["nope"])

    def test_autorange(self):
        result = run_participant(LOG_ANY_SCENARIO, LOG_ANY_SCENARIO.get("if_trace"), repeat=1)
        assert result.number >= 1

    def test_invalid_counts(self):
        participant = LOG_ANY_SCENARIO.get("log_trace")
        with pytest.raises(ValueError):
            run_participant(LOG_ANY_SCENARIO, participant, repeat=0)
        with pytest.raises(ValueError):
            run_participant(LOG_ANY_SCENARIO, participant, number=0)

    def test_bindings_do_not_leak(self):
        run_scenario(LOG_ANY_SCENARIO, number=10, repeat=1, include=["log_trace_enabled"])
        assert get_manager().bindings() == []
        assert isinstance(get_manager().get_adapter("bench"), NullAdapter)

    def test_enabled_setup_rebinds_logger(self):
        scenario = Scenario(
            name="check",
            setup=LOG_ANY_SCENARIO.setup,
            participants=[
                Participant(
                    name="check",
                    code_template="assert log.is_trace()",
                    setup=LOG_ANY_SCENARIO.get("log_trace_enabled").setup,
                )
            ],
        )
        run_scenario(scenario, number=1, repeat=1)

    def test_null_logger_trace_disabled(self):
        scenario = Scenario(
            name="check",
            setup=LOG_ANY_SCENARIO.setup,
            participants=[Participant(name="check", code_template="assert not log.is_trace()")],
        )
        run_scenario(scenario, number=1, repeat=1)


class TestFormatting:
    """Test result formatting."""

    def test_format_results(self):
        rows = format_results(
            [
                BenchmarkResult(name="slow", number=1, best=2e-6, mean=3e-6),
                BenchmarkResult(name="fast", number=1, best=1e-6, mean=1e-6),
            ]
        )
        assert [row["name"] for row in rows] == ["fast", "slow"]
        assert rows[0]["vs_slowest"] == pytest.approx(2.0)
        assert rows[1]["vs_slowest"] == pytest.approx(1.0)
        assert rows[0]["rate"] == pytest.approx(1e6)

    def test_format_empty(self):
        assert format_results([]) == []

    def test_to_dict(self):
        data = BenchmarkResult(name="x", number=3, best=0.5, mean=0.5).to_dict()
        assert data["rate"] == pytest.approx(2.0)

    def test_format_duration(self):
        assert format_duration(5e-8) == "50.0ns"
        assert format_duration(2.5e-6) == "2.50us"
        assert format_duration(0.0125) == "12.50ms"
        assert format_duration(3) == "3.00s"


class TestCli:
    """Test the log-any-bench command."""

    def teardown_method(self):
        reset_manager(FacadeConfig())

    def test_list(self):
        result = CliRunner().invoke(main, ["--list"])
        assert result.exit_code == 0
        assert "log_trace" in result.output
        assert "if_trace" in result.output

    def test_run(self):
        result = CliRunner().invoke(
            main, ["-i", "log_trace", "-i", "if_trace", "-n", "20", "-r", "1"]
        )
        assert result.exit_code == 0, result.output
        assert "log_trace" in result.output
        assert "if_trace" in result.output
        assert "log_tracef" not in result.output

    def test_unknown_participant(self):
        result = CliRunner().invoke(main, ["-i", "nope", "-n", "1", "-r", "1"])
        assert result.exit_code != 0
        assert "nope" in result.output

    def test_invalid_repeat(self):
        result = CliRunner().invoke(main, ["-r", "0"])
        assert result.exit_code != 0
