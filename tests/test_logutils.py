import logging

import timever.logutils as logutils
from timever.logutils import _LoggerProxy, log_result


def test_logger_proxy_formats_percent_style_messages():
    events = []

    class DummyLogger:
        def info(self, message, **kwargs):
            events.append(("info", message, kwargs))

    proxy = _LoggerProxy(DummyLogger())
    proxy.info("version=%s", "Rel202001011200")

    assert events == [("info", "version=Rel202001011200", {})]


def test_logger_proxy_respects_exc_info():
    events = []

    class DummyLogger:
        def error(self, message, **kwargs):
            events.append(("error", message, kwargs))

        def opt(self, **kwargs):
            events.append(("opt", kwargs))
            return self

    proxy = _LoggerProxy(DummyLogger())
    proxy.error("failure", exc_info=True)

    assert events == [("opt", {"exception": True}), ("error", "failure", {})]


def test_log_result_logs_call_and_result(monkeypatch):
    messages = []

    class DummyLogger:
        def debug(self, message):
            messages.append(message)

    monkeypatch.setattr(logutils, "logger", DummyLogger())

    @log_result
    def pick():
        return "Dev202001011200"

    assert pick() == "Dev202001011200"
    assert messages == ["calling pick", "pick -> Dev202001011200"]


class _SinkRecorder:
    def __init__(self):
        self.added = []

    def remove(self):
        self.added.clear()

    def add(self, sink, **kwargs):
        self.added.append(kwargs)

    def debug(self, message):
        pass


def test_setup_logging_uses_env_level(monkeypatch):
    recorder = _SinkRecorder()
    monkeypatch.setattr(logutils, "logger", recorder)
    monkeypatch.setenv("TIMEVER_LOG_LEVEL", "warning")

    logutils.setup_logging()

    assert recorder.added[0]["level"] == logging.WARNING


def test_setup_logging_debug_flag_wins(monkeypatch):
    recorder = _SinkRecorder()
    monkeypatch.setattr(logutils, "logger", recorder)
    monkeypatch.setenv("TIMEVER_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TIMEVER_DEBUG", "1")

    logutils.setup_logging()

    assert recorder.added[0]["level"] == logging.DEBUG
