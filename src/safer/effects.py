"""IO: a deferred side effect that runs only when explicitly asked to.

Building an IO, or deriving new ones with ``map`` / ``and_then``, never calls
the wrapped effect. ``run()`` is the single execution point, and every call
re-runs the whole chain from the top:

    >>> calls = []
    >>> greet = io(lambda: calls.append('hi') or len(calls))
    >>> doubled = greet.map(lambda n: n * 2)
    >>> calls
    []
    >>> doubled.run(), doubled.run()
    (2, 4)

Keep ``run()`` at the edge of the program and compose everything else.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

import msgspec

from safer._logging import get_logger
from safer.config import get_config

__all__ = ['IO', 'io']

_logger = get_logger(__name__)

type _Step = tuple[Literal['map', 'bind'], Callable[[Any], Any]]


class IO[T](msgspec.Struct, frozen=True):
    """A nullary effect plus the steps composed onto it.

    Steps are applied in order after the effect returns. A ``map`` step
    transforms the value; a ``bind`` step turns it into another IO which is
    run immediately. Chains are walked in a loop, so long linear chains do not
    deepen the call stack.

    Attributes:
        effect: The wrapped computation. Not called until ``run()``.
        steps: Composed steps, oldest first.
    """

    effect: Callable[[], Any]
    steps: tuple[_Step, ...] = ()

    @classmethod
    def pure(cls, value: T) -> IO[T]:
        """Lift a plain value into an IO with no side effects."""
        return cls(lambda: value)

    def run(self) -> T:
        """Execute the effect and every composed step, returning the final value.

        If the effect returns an awaitable it is passed through unawaited; the
        caller is responsible for awaiting it. Exceptions propagate unchanged.
        """
        if get_config().trace_effects:
            _logger.debug('io.run', effect=_describe(self.effect), steps=len(self.steps))

        value = self.effect()
        for kind, f in self.steps:
            value = f(value) if kind == 'map' else f(value).run()
        return value

    def map[U](self, f: Callable[[T], U]) -> IO[U]:
        """Return a new IO that runs this one, then applies f to its result."""
        return IO(self.effect, (*self.steps, ('map', f)))

    def and_then[U](self, f: Callable[[T], IO[U]]) -> IO[U]:
        """Return a new IO that runs this one, feeds its result to f and runs the IO f returns.

        Example:
            ```python
            read_user(user_id).and_then(lambda name: save_config(name)).run()
            ```
        """
        return IO(self.effect, (*self.steps, ('bind', f)))


def _describe(effect: Callable[..., Any]) -> str:
    return getattr(effect, '__qualname__', None) or repr(effect)


def io[T](effect: Callable[[], T]) -> IO[T]:
    """Wrap a nullary effect in an IO without calling it."""
    return IO(effect)
