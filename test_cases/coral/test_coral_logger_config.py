import pytest

from src.coral.logging import colors
from src.coral.logging.errors import InvalidLogLevelError
from src.coral.logging.log_level import LogLevel
from src.coral.logging.logger_config import (
    LoggerConfig,
    create_logger_from_env,
    load_logger_config,
)


@pytest.fixture(autouse=True)
def restore_colors():
    previous = colors.is_color_enabled()
    colors.set_color_enabled(True)
    yield
    colors.set_color_enabled(previous)


def test_defaults_when_unset() -> None:
    config = load_logger_config({})
    assert config == LoggerConfig(level=LogLevel.info, color=True)


def test_level_from_env() -> None:
    assert load_logger_config({"CORAL_LOG_LEVEL": "WARN"}).level is LogLevel.warn
    assert load_logger_config({"CORAL_LOG_LEVEL": "  "}).level is LogLevel.info


def test_invalid_level_from_env_is_rejected() -> None:
    with pytest.raises(InvalidLogLevelError):
        load_logger_config({"CORAL_LOG_LEVEL": "verbose"})


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"CORAL_COLOR": "0"}, False),
        ({"CORAL_COLOR": "off"}, False),
        ({"CORAL_COLOR": "1"}, True),
        ({"NO_COLOR": "1"}, False),
        ({"NO_COLOR": ""}, True),
    ],
)
def test_color_flags(environ, expected) -> None:
    assert load_logger_config(environ).color is expected


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("CORAL_LOG_LEVEL", "error")
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CORAL_COLOR", raising=False)
    assert LoggerConfig.from_env().level is LogLevel.error


def test_create_logger_from_env(capsys) -> None:
    log = create_logger_from_env("env", {"CORAL_LOG_LEVEL": "warn", "NO_COLOR": "1"})
    assert log.current_level is LogLevel.warn
    assert log.color is False
    assert colors.is_color_enabled() is True

    log.info("hidden")
    log.warn("shown")
    out, err = capsys.readouterr()
    assert out == ""
    assert err.rstrip("\n").endswith("| env              shown")
    assert "\x1b[" not in err


def test_later_logger_does_not_restyle_earlier_one(capsys) -> None:
    first = create_logger_from_env("first", {"NO_COLOR": "1"})
    first.info("a")
    before = capsys.readouterr().out

    second = create_logger_from_env("second", {})
    assert second.color is True

    first.info("a")
    after = capsys.readouterr().out
    assert "\x1b[" not in before
    assert "\x1b[" not in after
    assert before.split(" | ", 1)[1] == after.split(" | ", 1)[1]


def test_colored_logger_from_env_keeps_escape_codes(capsys) -> None:
    log = create_logger_from_env("colored", {"CORAL_LOG_LEVEL": "info"})
    log.info("x")
    assert "\x1b[" in capsys.readouterr().out
