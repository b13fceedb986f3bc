"""Error taxonomy and outcome tests."""

from __future__ import annotations

from guild_logger.domain.errors import (
    EmitFailure,
    EnrichmentFailure,
    GuildLoggerError,
    InvalidOption,
    NormalizationFailure,
    Outcome,
    RenderFailure,
    SinkFailure,
)


def test_error_hierarchy() -> None:
    """Every failure kind derives from the package's umbrella error."""

    assert issubclass(InvalidOption, GuildLoggerError)
    assert issubclass(InvalidOption, ValueError)
    for failure_type in (EnrichmentFailure, NormalizationFailure, RenderFailure, SinkFailure):
        assert issubclass(failure_type, EmitFailure)
        assert isinstance(failure_type(""), GuildLoggerError)


def test_outcome_success_carries_value() -> None:
    """Successful outcomes carry their value and no failure."""

    outcome = Outcome.attempt(SinkFailure, lambda: 7)
    assert outcome.ok
    assert outcome.value == 7
    assert outcome.failure is None


def test_outcome_failure_wraps_cause() -> None:
    """Failed attempts wrap the original exception as the cause."""

    def _boom() -> None:
        raise KeyError("missing")

    outcome = Outcome.attempt(RenderFailure, _boom)
    assert not outcome.ok
    assert isinstance(outcome.failure, RenderFailure)
    assert isinstance(outcome.failure.__cause__, KeyError)
    assert "KeyError" in str(outcome.failure)
