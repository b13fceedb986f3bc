"""Configuration tests covering option validation and environment loading."""

from __future__ import annotations

import logging

import pytest

from guild_logger import ContextCorrelator, InvalidOption, LoggerOptions, LogLevel, options_from_env


def test_defaults() -> None:
    """Default options log at info in plain text, not silenced."""

    options = LoggerOptions()
    assert options.level is LogLevel.INFO
    assert (options.json, options.pretty, options.silent) == (False, False, False)
    assert options.correlator is None


def test_level_string_is_parsed() -> None:
    """Level strings are parsed into `LogLevel` members."""

    assert LoggerOptions(level="VERBOSE").level is LogLevel.VERBOSE  # type: ignore[arg-type]


def test_non_boolean_flag_rejected() -> None:
    """Non-boolean flags are rejected with `InvalidOption`."""

    with pytest.raises(InvalidOption, match="'json'"):
        LoggerOptions(json="yes")  # type: ignore[arg-type]


def test_with_overrides_ignores_none() -> None:
    """`None` overrides keep the current value."""

    options = LoggerOptions(json=True).with_overrides(json=None, pretty=True)
    assert options.json is True
    assert options.pretty is True


def test_options_from_env_reads_prefixed_values() -> None:
    """Prefixed environment variables populate every option."""

    environ = {
        "GUILD_LOGGER_LEVEL": "debug",
        "GUILD_LOGGER_JSON": "true",
        "GUILD_LOGGER_PRETTY": "false",
        "GUILD_LOGGER_SILENT": "true",
        "OTHER_LEVEL": "error",
    }
    options = options_from_env(environ=environ)
    assert options.level is LogLevel.DEBUG
    assert options.json is True
    assert options.pretty is False
    assert options.silent is True


def test_options_from_env_keeps_correlator() -> None:
    """The correlator passed in survives environment loading."""

    correlator = ContextCorrelator()
    options = options_from_env(environ={}, correlator=correlator)
    assert options.correlator is correlator
    assert options.describe()["correlator"] == "ContextCorrelator"


def test_options_from_env_rejects_bad_flag() -> None:
    """A non-boolean environment flag raises `InvalidOption`."""

    with pytest.raises(InvalidOption):
        options_from_env(environ={"GUILD_LOGGER_PRETTY": "sometimes"})


def test_options_from_env_rejects_bad_level() -> None:
    """An unknown environment level raises `InvalidOption`."""

    with pytest.raises(InvalidOption):
        options_from_env(environ={"GUILD_LOGGER_LEVEL": "loud"})


def test_unknown_keys_reported(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognised option variables are reported on the package logger."""

    caplog.set_level(logging.DEBUG, logger="guild_logger")
    options_from_env(environ={"GUILD_LOGGER_ROTATE": "daily"})
    events = [record for record in caplog.records if record.getMessage() == "env_options_ignored"]
    assert events and getattr(events[-1], "context")["keys"] == ["rotate"]
