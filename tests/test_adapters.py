"""Tests for the built-in adapters and adapter name resolution"""

import io
import json
import logging
import sys
import types
from datetime import datetime

import pytest

from log_any import FacadeConfig, LogLevel
from log_any.adapters import (
    BaseAdapter,
    CaptureAdapter,
    CaptureStore,
    FileAdapter,
    NullAdapter,
    StderrAdapter,
    StdlibAdapter,
    StdoutAdapter,
    available_adapters,
    register_adapter,
    resolve_adapter_class,
    unregister_adapter,
)
from log_any.core.log_entry import LogEntry
from log_any.core.manager import Manager
from log_any.core.proxy import Proxy
from log_any.formatters import JSONFormatter, TextFormatter


class TestBaseAdapter:
    """Test generated adapter methods."""

    class ListAdapter(BaseAdapter):
        def __init__(self, category="", log_level="trace"):
            super().__init__(category, log_level)
            self.entries = []

        def write(self, entry):
            self.entries.append(entry)

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseAdapter()

    def test_level_methods(self):
        adapter = self.ListAdapter(category="app")
        adapter.notice("hello", key="v")
        adapter.warn("alias")
        entry = adapter.entries[0]
        assert entry.level == LogLevel.NOTICE
        assert entry.category == "app"
        assert entry.extra == {"key": "v"}
        assert adapter.entries[1].level == LogLevel.WARNING

    def test_detection_methods(self):
        adapter = self.ListAdapter(log_level="error")
        assert adapter.is_warning() is False
        assert adapter.is_err() is True
        assert adapter.is_emergency() is True

    def test_log_by_name(self):
        adapter = self.ListAdapter(log_level="info")
        adapter.log("debug", "hidden")
        adapter.log("crit", "shown")
        assert [e.message for e in adapter.entries] == ["shown"]

    def test_log_rejects_off(self):
        adapter = self.ListAdapter()
        with pytest.raises(ValueError):
            adapter.log("off", "never written")
        assert adapter.entries == []

    def test_repr(self):
        assert "log_level=INFO" in repr(self.ListAdapter(category="a", log_level="info"))


class TestNullAdapter:
    def test_everything_disabled(self):
        adapter = NullAdapter(category="app", whatever="ignored")
        assert adapter.is_emergency() is False
        adapter.emergency("dropped")
        adapter.structured(LogLevel.ERROR, "app", "dropped")


class TestFileAdapter:
    """Test file output."""

    def test_writes_lines(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        adapter = FileAdapter(path, category="app")
        adapter.info("first")
        adapter.error("second")
        adapter.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("[")
        assert lines[0].endswith("] first")
        assert lines[1].endswith("] second")

    def test_default_timestamp_format(self, tmp_path):
        path = tmp_path / "app.log"
        adapter = FileAdapter(str(path))
        adapter.info("x")
        adapter.close()

        stamp = path.read_text(encoding="utf-8").split("] ")[0].lstrip("[")
        datetime.strptime(stamp, "%a %b %d %H:%M:%S %Y")

    def test_level_threshold(self, tmp_path):
        path = tmp_path / "app.log"
        adapter = FileAdapter(path, log_level="warn")
        adapter.info("hidden")
        adapter.warning("shown")
        adapter.close()
        assert path.read_text(encoding="utf-8").count("\n") == 1

    def test_appends(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("existing\n", encoding="utf-8")
        adapter = FileAdapter(path)
        adapter.info("new")
        adapter.close()
        assert path.read_text(encoding="utf-8").startswith("existing\n")

    def test_json_formatter(self, tmp_path):
        path = tmp_path / "app.jsonl"
        adapter = FileAdapter(path, category="svc", formatter=JSONFormatter())
        adapter.info("saved", order=3)
        adapter.close()

        record = json.loads(path.read_text(encoding="utf-8"))
        assert record["message"] == "saved"
        assert record["level"] == "INFO"
        assert record["category"] == "svc"
        assert record["extra"] == {"order": 3}

    def test_write_after_close_is_ignored(self, tmp_path):
        adapter = FileAdapter(tmp_path / "app.log")
        adapter.close()
        adapter.info("ignored")
        adapter.close()

    def test_truncating_mode_shared_across_categories(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("stale\n", encoding="utf-8")
        manager = Manager(FacadeConfig())
        manager.set_adapter("File", category="app", path=str(path), mode="w")
        manager.get_logger("app.a").info("first")
        manager.get_logger("app.b").info("second")
        manager.shutdown()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("] first")
        assert lines[1].endswith("] second")

    def test_same_path_stays_open_until_last_close(self, tmp_path):
        path = tmp_path / "app.log"
        first = FileAdapter(path, category="a")
        second = FileAdapter(str(path), category="b")
        first.close()
        second.info("still open")
        second.close()
        assert path.read_text(encoding="utf-8").rstrip().endswith("still open")

    def test_through_manager_params(self, tmp_path):
        path = tmp_path / "db.log"
        manager = Manager(FacadeConfig())
        manager.set_adapter("File", category="app.db", path=str(path), log_level="info")
        log = manager.get_logger("app.db.pool")
        log.debug("hidden")
        log.infof("pool size %d", 5)
        manager.shutdown()
        assert path.read_text(encoding="utf-8").rstrip().endswith("pool size 5")


class TestStreamAdapters:
    """Test stderr/stdout output."""

    def test_stderr(self, capsys):
        adapter = StderrAdapter(category="app")
        adapter.info("to stderr")
        captured = capsys.readouterr()
        assert captured.err == "to stderr\n"
        assert captured.out == ""

    def test_stdout(self, capsys):
        StdoutAdapter().warning("to stdout")
        assert capsys.readouterr().out == "to stdout\n"

    def test_explicit_stream_and_formatter(self):
        stream = io.StringIO()
        adapter = StderrAdapter(
            category="app",
            stream=stream,
            formatter=TextFormatter("{level}:{category}:{message}"),
        )
        adapter.error("boom")
        assert stream.getvalue() == "ERROR:app:boom\n"

    def test_colored(self):
        stream = io.StringIO()
        StdoutAdapter(stream=stream, colored=True).error("red")
        value = stream.getvalue()
        assert value.startswith(LogLevel.ERROR.color_code)
        assert value.rstrip("\n").endswith(LogLevel.ERROR.reset_code)

    def test_threshold(self):
        stream = io.StringIO()
        adapter = StdoutAdapter(stream=stream, log_level="error")
        adapter.warning("hidden")
        assert stream.getvalue() == ""


class TestCaptureAdapter:
    """Test in-memory capture."""

    def test_shared_store(self):
        store = CaptureStore()
        first = CaptureAdapter(category="a", store=store)
        second = CaptureAdapter(category="b", store=store)
        first.info("one")
        second.error("two", code=5)

        assert [m["message"] for m in store.messages] == ["one", "two"]
        assert store.messages[1] == {
            "message": "two",
            "level": "error",
            "category": "b",
            "extra": {"code": 5},
        }
        assert [m["message"] for m in first.messages_for("b")] == ["two"]
        assert first.contains(r"^tw")
        assert not first.contains("three")

    def test_clear(self):
        adapter = CaptureAdapter(store=CaptureStore())
        adapter.info("x")
        adapter.clear()
        assert adapter.messages == []

    def test_threshold(self):
        adapter = CaptureAdapter(log_level="warning", store=CaptureStore())
        adapter.info("hidden")
        assert len(adapter.store) == 0


class TestStdlibAdapter:
    """Test forwarding to the logging module."""

    def setup_method(self):
        self.logger = logging.getLogger("log_any_test.stdlib")
        self.logger.setLevel(logging.INFO)

    def teardown_method(self):
        self.logger.setLevel(logging.NOTSET)

    def test_forwards_records(self, caplog):
        adapter = StdlibAdapter(category="log_any_test.stdlib")
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            adapter.warning("careful", request_id="r1")

        record = caplog.records[-1]
        assert record.name == "log_any_test.stdlib"
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "careful"
        assert record.request_id == "r1"

    def test_detection_follows_logger_level(self):
        adapter = StdlibAdapter(category="log_any_test.stdlib")
        assert adapter.is_debug() is False
        assert adapter.is_info() is True

    def test_extra_level_names(self, caplog):
        adapter = StdlibAdapter(category="log_any_test.stdlib")
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            adapter.notice("noted")
        assert caplog.records[-1].levelname == "NOTICE"
        assert logging.getLevelName(5) == "TRACE"

    def test_logger_name_override(self):
        adapter = StdlibAdapter(category="ignored", logger_name="log_any_test.stdlib")
        assert adapter.logger is self.logger

    def test_records_point_at_caller(self, caplog):
        proxy = Proxy(StdlibAdapter(category="log_any_test.stdlib"), category="log_any_test.stdlib")
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            proxy.info("from test")
        record = caplog.records[-1]
        assert record.funcName == "test_records_point_at_caller"

    def test_direct_adapter_call_points_at_caller(self, caplog):
        adapter = StdlibAdapter(category="log_any_test.stdlib")
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            adapter.warning("direct")
            adapter.log("error", "by name")
        assert [r.funcName for r in caplog.records[-2:]] == [
            "test_direct_adapter_call_points_at_caller",
            "test_direct_adapter_call_points_at_caller",
        ]

    def test_record_attribute_keys_are_renamed(self, caplog):
        proxy = Proxy(StdlibAdapter(category="log_any_test.stdlib"), category="log_any_test.stdlib")
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            proxy.info("user logged in", name="alice", lineno=7, request_id="r2")

        record = caplog.records[-1]
        assert record.name == "log_any_test.stdlib"
        assert record.log_any_name == "alice"
        assert record.log_any_lineno == 7
        assert record.request_id == "r2"
        assert record.getMessage() == "user logged in"

    def test_write_renames_keys(self, caplog):
        adapter = StdlibAdapter(category="log_any_test.stdlib")
        entry = LogEntry(level=LogLevel.ERROR, message="raw", extra={"msg": "x", "args": 1})
        with caplog.at_level(logging.INFO, logger="log_any_test.stdlib"):
            adapter.write(entry)

        record = caplog.records[-1]
        assert record.getMessage() == "raw"
        assert record.log_any_msg == "x"
        assert record.log_any_args == 1


class TestAdapterRegistry:
    """Test adapter name resolution."""

    def teardown_method(self):
        unregister_adapter("Custom")
        sys.modules.pop("log_any_test_plugins", None)

    def test_builtin_names(self):
        assert resolve_adapter_class("Null") is NullAdapter
        assert resolve_adapter_class("File") is FileAdapter
        assert resolve_adapter_class("Stderr") is StderrAdapter
        assert resolve_adapter_class("Stdout") is StdoutAdapter
        assert resolve_adapter_class("Capture") is CaptureAdapter
        assert resolve_adapter_class("Test") is CaptureAdapter
        assert resolve_adapter_class("Stdlib") is StdlibAdapter

    def test_unknown(self):
        with pytest.raises(ValueError):
            resolve_adapter_class("Nope")

    def test_register(self):
        register_adapter("Custom", CaptureAdapter)
        assert resolve_adapter_class("Custom") is CaptureAdapter
        assert "Custom" in available_adapters()

    def test_register_invalid(self):
        with pytest.raises(ValueError):
            register_adapter("+Custom", CaptureAdapter)
        with pytest.raises(TypeError):
            register_adapter("Custom", CaptureAdapter())

    def test_dotted_path(self):
        module = types.ModuleType("log_any_test_plugins")
        module.MyAdapter = CaptureAdapter
        sys.modules["log_any_test_plugins"] = module

        assert resolve_adapter_class("+log_any_test_plugins.MyAdapter") is CaptureAdapter
        assert resolve_adapter_class("+log_any_test_plugins:MyAdapter") is CaptureAdapter

    def test_dotted_path_errors(self):
        with pytest.raises(ImportError):
            resolve_adapter_class("+no_such_module_for_log_any.Adapter")
        with pytest.raises(ImportError):
            resolve_adapter_class("+log_any.adapters.DoesNotExist")
        with pytest.raises(ImportError):
            resolve_adapter_class("+Bare")
