"""Adapter contract tests for the default ports implementation.

Purpose
-------
Verify the default adapters keep satisfying the application-layer ports
defined in ``src/guild_logger/application/ports.py`` so dependency inversion
remains enforceable through automated tests.
"""

from __future__ import annotations

import io

import pytest

from guild_logger.adapters.caller.stack import StackCallerResolver
from guild_logger.adapters.correlation.context import ContextCorrelator, StaticCorrelator
from guild_logger.adapters.renderers.plain import PlainTextRenderer
from guild_logger.adapters.renderers.structured import StructuredRenderer
from guild_logger.adapters.sinks.console import ConsoleSink
from guild_logger.application import ports
from guild_logger.domain.entry import CallSite, Entry, LogLevel


@pytest.mark.parametrize("correlator", [ContextCorrelator(), StaticCorrelator("x")])
def test_correlators_contract(correlator) -> None:
    """Both correlators satisfy the correlation source port."""

    assert isinstance(correlator, ports.CorrelationSource)


def test_stack_resolver_contract() -> None:
    """The stack resolver satisfies the caller resolver port and returns a call site."""

    resolver = StackCallerResolver()
    assert isinstance(resolver, ports.CallerResolver)
    assert isinstance(resolver.resolve(), CallSite)


@pytest.mark.parametrize("renderer", [PlainTextRenderer(), StructuredRenderer(pretty=True)])
def test_renderers_contract(renderer) -> None:
    """Both renderers satisfy the renderer port and return text."""

    assert isinstance(renderer, ports.Renderer)
    assert isinstance(renderer.render(Entry("ts", LogLevel.INFO, "m")), str)


def test_console_sink_contract() -> None:
    """The console sink satisfies the sink port."""

    sink = ConsoleSink(stream=io.StringIO())
    assert isinstance(sink, ports.Sink)
