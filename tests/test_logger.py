import pytest

from knxbuzzer import logger as logmod
from knxbuzzer.logger import (
    MAX_MESSAGE_LENGTH,
    BaseLogger,
    DummyLogger,
    LogLevel,
    StandardLogger,
    get_logger,
    log_error,
    log_fatal,
    log_info,
    log_trace,
    log_warning,
    set_logger,
)


class RecordingLogger(BaseLogger):
    def __init__(self):
        self.calls = []

    def init(self, level, block_till_connected=False):
        self.calls.append(("init", level))

    def set_loglevel(self, level):
        self.calls.append(("set_loglevel", level))

    def fatal(self, msg, *args):
        self.calls.append(("fatal", msg, args))

    def error(self, msg, *args):
        self.calls.append(("error", msg, args))

    def warning(self, msg, *args):
        self.calls.append(("warning", msg, args))

    def info(self, msg, *args):
        self.calls.append(("info", msg, args))

    def trace(self, msg, *args):
        self.calls.append(("trace", msg, args))


@pytest.fixture(autouse=True)
def reset_global_logger():
    set_logger(None)
    yield
    set_logger(None)


@pytest.fixture
def std_logger(request):
    return StandardLogger(f"knxbuzzer.test.{request.node.name}")


def test_loglevel_values_match_source():
    assert [LogLevel(value) for value in range(6)] == list(LogLevel)
    assert LogLevel(0) is LogLevel.OFF
    assert LogLevel(3) is LogLevel.WARNING
    assert LogLevel(4) is LogLevel.INFO
    assert LogLevel(5) is LogLevel.TRACE
    assert LogLevel.TRACE > LogLevel.INFO > LogLevel.WARNING


def test_base_logger_is_abstract():
    with pytest.raises(TypeError):
        BaseLogger()


def test_get_logger_defaults_to_shared_dummy():
    first = get_logger()
    assert isinstance(first, DummyLogger)
    assert get_logger() is first


def test_set_logger_replaces_and_resets():
    rec = RecordingLogger()
    set_logger(rec)
    assert get_logger() is rec
    set_logger(None)
    assert isinstance(get_logger(), DummyLogger)


def test_module_helpers_forward_to_installed_logger():
    rec = RecordingLogger()
    set_logger(rec)
    log_trace("t %d", 1)
    log_info("i")
    log_warning("w %s", "x")
    log_error("e")
    log_fatal("f")
    assert rec.calls == [
        ("trace", "t %d", (1,)),
        ("info", "i", ()),
        ("warning", "w %s", ("x",)),
        ("error", "e", ()),
        ("fatal", "f", ()),
    ]


def test_dummy_logger_emits_nothing(caplog):
    caplog.set_level(0)
    dummy = DummyLogger()
    dummy.init(LogLevel.TRACE)
    dummy.error("boom")
    dummy.trace("boom")
    assert caplog.records == []


def test_standard_logger_silent_before_init(std_logger, caplog):
    std_logger.error("boom")
    assert caplog.records == []


def test_standard_logger_formats_printf_style(std_logger, caplog):
    std_logger.init(LogLevel.TRACE)
    std_logger.trace("KO %d value %d", 5, True)
    assert [r.getMessage() for r in caplog.records] == ["KO 5 value 1"]


def test_standard_logger_filters_by_level(std_logger, caplog):
    std_logger.init(LogLevel.WARNING)
    std_logger.info("quiet")
    std_logger.trace("quiet")
    std_logger.error("boom")
    std_logger.warning("careful")
    assert [r.getMessage() for r in caplog.records] == ["boom", "careful"]


def test_standard_logger_level_mapping(std_logger, caplog):
    std_logger.init(LogLevel.TRACE)
    std_logger.fatal("a")
    std_logger.error("b")
    std_logger.warning("c")
    std_logger.info("d")
    std_logger.trace("e")
    assert [r.levelname for r in caplog.records] == [
        "CRITICAL",
        "ERROR",
        "WARNING",
        "INFO",
        "DEBUG",
    ]


def test_set_loglevel_off_silences(std_logger, caplog):
    std_logger.init(LogLevel.TRACE)
    std_logger.set_loglevel(LogLevel.OFF)
    std_logger.fatal("boom")
    assert caplog.records == []


def test_long_messages_are_truncated(std_logger, caplog):
    std_logger.init(LogLevel.INFO)
    std_logger.info("x" * (MAX_MESSAGE_LENGTH * 2))
    assert len(caplog.records[0].getMessage()) == MAX_MESSAGE_LENGTH


def test_global_helpers_reach_standard_logger(std_logger, caplog):
    std_logger.init(LogLevel.INFO)
    set_logger(std_logger)
    log_info("Application Version: %s", "3.13")
    log_trace("hidden")
    assert [r.getMessage() for r in caplog.records] == ["Application Version: 3.13"]
    assert logmod.get_logger() is std_logger