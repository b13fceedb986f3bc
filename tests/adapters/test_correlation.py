"""Correlation source tests covering binding lifecycles and isolation.

Context-bound ids must follow threads and asyncio tasks the way
:mod:`contextvars` does, so concurrent requests never share an id.
"""

from __future__ import annotations

import asyncio
import threading

from guild_logger import ContextCorrelator, StaticCorrelator


def test_bind_and_clear() -> None:
    """`bind` sets the id for the current context and `clear` removes it."""

    correlator = ContextCorrelator()
    correlator.bind("req-1")
    assert correlator.get_id() == "req-1"
    correlator.clear()
    assert correlator.get_id() is None


def test_scope_restores_previous_binding() -> None:
    """Leaving a scope restores whatever id was bound before it."""

    correlator = ContextCorrelator()
    correlator.bind("outer")
    with correlator.scope("inner"):
        assert correlator.get_id() == "inner"
    assert correlator.get_id() == "outer"


def test_threads_do_not_share_bindings() -> None:
    """A new thread starts without the parent's binding."""

    correlator = ContextCorrelator()
    correlator.bind("main")
    seen: list[str | None] = []
    worker = threading.Thread(target=lambda: seen.append(correlator.get_id()))
    worker.start()
    worker.join()
    assert seen == [None]
    assert correlator.get_id() == "main"


def test_tasks_keep_their_own_ids() -> None:
    """Interleaved asyncio tasks each observe their own scoped id."""

    correlator = ContextCorrelator()

    async def handle(request_id: str) -> str | None:
        with correlator.scope(request_id):
            await asyncio.sleep(0)
            return correlator.get_id()

    async def run() -> list[str | None]:
        return list(await asyncio.gather(handle("a"), handle("b"), handle("c")))

    assert asyncio.run(run()) == ["a", "b", "c"]


def test_static_correlator() -> None:
    """Static correlators return their fixed id, including `None`."""

    assert StaticCorrelator("fixed").get_id() == "fixed"
    assert StaticCorrelator(None).get_id() is None
