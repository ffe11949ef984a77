"""Tests for IO deferred effects."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from safer import IO, add_log_hook, configure_logging, init, io

from tests.strategies import int_functions


class Counter:
    """Mutable external state observed by effects."""

    def __init__(self) -> None:
        self.n = 0

    def bump(self) -> int:
        self.n += 1
        return self.n


class TestLaziness:
    """Effects run only inside run()."""

    def test_construction_does_not_run(self):
        counter = Counter()
        io(counter.bump)
        assert counter.n == 0

    def test_run_executes_each_time(self):
        counter = Counter()
        eff = io(counter.bump)
        assert counter.n == 0
        assert eff.run() == 1
        assert counter.n == 1
        assert eff.run() == 2

    def test_map_does_not_run(self):
        counter = Counter()
        io(counter.bump).map(lambda x: x * 10)
        assert counter.n == 0

    def test_and_then_does_not_run(self):
        counter = Counter()
        other = Counter()
        io(counter.bump).and_then(lambda _: io(other.bump))
        assert counter.n == 0
        assert other.n == 0

    def test_no_memoization(self):
        """Each run re-executes the whole chain from the top."""
        counter = Counter()
        chained = io(counter.bump).map(lambda x: x * 10).and_then(lambda x: io(lambda: x + counter.bump()))
        assert chained.run() == 12
        assert chained.run() == 34
        assert counter.n == 4

    def test_derived_io_leaves_original_untouched(self):
        base = io(lambda: 1)
        mapped = base.map(lambda x: x + 1)
        assert base.run() == 1
        assert mapped.run() == 2
        assert base.steps == ()


class TestComposition:
    """map and and_then compose left to right."""

    def test_map(self):
        assert io(lambda: 2).map(lambda x: x * 3).run() == 6

    def test_and_then(self):
        assert io(lambda: 1).and_then(lambda x: io(lambda: x + 1)).run() == 2

    def test_execution_order(self):
        log: list[str] = []

        def step(name: str, value: int):
            def effect() -> int:
                log.append(name)
                return value

            return io(effect)

        program = (
            step('read', 1)
            .map(lambda x: log.append('map') or x + 1)
            .and_then(lambda x: step('write', x * 10))
            .map(lambda x: log.append('done') or x)
        )
        assert log == []
        assert program.run() == 20
        assert log == ['read', 'map', 'write', 'done']

    def test_nested_and_then(self):
        inner = io(lambda: 5).and_then(lambda x: io(lambda: x * 2))
        outer = io(lambda: 1).and_then(lambda x: inner.map(lambda y: x + y))
        assert outer.run() == 11

    def test_long_chain_does_not_overflow(self):
        program = io(lambda: 0)
        for _ in range(5000):
            program = program.map(lambda x: x + 1).and_then(lambda x: io(lambda: x))
        assert program.run() == 5000

    def test_pure(self):
        assert IO.pure(7).map(str).run() == '7'

    def test_exception_propagates(self):
        def fail() -> int:
            raise OSError('disk gone')

        with pytest.raises(OSError, match='disk gone'):
            io(fail).map(lambda x: x + 1).run()

    def test_awaitable_returned_unawaited(self):
        """An async effect hands its coroutine back to the caller."""

        async def fetch() -> int:
            return 3

        coro = io(fetch).run()
        try:
            assert hasattr(coro, '__await__')
        finally:
            coro.close()

    @pytest.mark.asyncio
    async def test_caller_awaits_async_effect(self):
        async def fetch() -> int:
            return 3

        assert await io(fetch).run() == 3


class TestIOFunctorLaws:
    """Functor and monad laws, compared by running both sides."""

    @given(st.integers())
    def test_identity(self, value):
        assert io(lambda: value).map(lambda x: x).run() == value

    @given(st.integers(), int_functions, int_functions)
    def test_composition(self, value, f, g):
        m = io(lambda: value)
        assert m.map(f).map(g).run() == m.map(lambda x: g(f(x))).run()

    @given(st.integers())
    def test_left_identity(self, value):
        def f(x: int) -> IO[int]:
            return io(lambda: x * 2)

        assert IO.pure(value).and_then(f).run() == f(value).run()

    @given(st.integers())
    def test_associativity(self, value):
        def f(x: int) -> IO[int]:
            return io(lambda: x + 1)

        def g(x: int) -> IO[int]:
            return io(lambda: x * 3)

        m = IO.pure(value)
        assert m.and_then(f).and_then(g).run() == m.and_then(lambda x: f(x).and_then(g)).run()


class TestTracing:
    """trace_effects emits an io.run event per run()."""

    def test_trace_enabled(self):
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        init(trace_effects=True)
        add_log_hook(events.append)

        def load_settings() -> int:
            return 1

        eff = io(load_settings).map(lambda x: x)
        eff.run()
        eff.run()

        runs = [e for e in events if e.get('event') == 'io.run']
        assert len(runs) == 2
        assert runs[0]['steps'] == 1
        assert 'load_settings' in runs[0]['effect']

    def test_trace_disabled_by_default(self):
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(events.append)

        io(lambda: 1).run()

        assert not [e for e in events if e.get('event') == 'io.run']
