"""Decorators that adapt ordinary callables to Option, Result and IO.

Existing APIs signal absence with ``None``, failure with exceptions and side
effects by simply running. These decorators move each of those into a value:

    @optional
    def find_user(user_id: int) -> User | None: ...

    @fallible(exceptions=(OSError,))
    def read_file(path: str) -> str: ...

    @deferred
    def write_file(path: str, text: str) -> int: ...

    find_user(1)                   # Some(User(...)) or Nothing
    read_file('a.txt')             # Ok('...') or Err(FileNotFoundError(...))
    write_file('a.txt', 'hi')      # IO, nothing written until .run()
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import wrapt

from safer._logging import get_logger
from safer.effects import IO
from safer.option import into_option
from safer.result import Err, Ok

__all__ = ['deferred', 'fallible', 'optional']

_logger = get_logger(__name__)


def _name(wrapped: Callable[..., Any]) -> str:
    return getattr(wrapped, '__qualname__', None) or repr(wrapped)


@wrapt.decorator
def optional(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    """Lift a function returning ``T | None`` into one returning ``Option[T]``.

    Only ``None`` becomes Nothing; falsy values such as ``0`` or ``''`` are Some.
    """
    return into_option(wrapped(*args, **kwargs))


@wrapt.decorator
def deferred(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> IO[Any]:
    """Turn a call into an IO that performs it when run.

    Arguments are captured at call time. Each ``run()`` calls the function
    again with the same arguments.
    """
    return IO(lambda: wrapped(*args, **kwargs))


def fallible(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Catch the listed exceptions into ``Err`` and wrap returns in ``Ok``.

    Coroutine functions are detected and awaited inside the wrapper, so the
    decorated coroutine resolves to a Result. Exception types not listed in
    ``exceptions`` propagate.

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types converted to Err. Defaults to (Exception,).

    Example:
        ```python
        @fallible(exceptions=(ValueError,))
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('8080')  # Ok(value=8080)
        parse_port('http')  # Err(error=ValueError(...))
        ```
    """

    def failed(wrapped: Callable[..., Any], e: BaseException) -> Err[BaseException]:
        _logger.debug('fallible.caught', function=_name(wrapped), error=repr(e))
        return Err(e)

    @wrapt.decorator
    def sync_wrapper(wrapped, instance, args, kwargs):
        try:
            value = wrapped(*args, **kwargs)
        except exceptions as e:
            return failed(wrapped, e)
        return Ok(value)

    @wrapt.decorator
    async def async_wrapper(wrapped, instance, args, kwargs):
        try:
            value = await wrapped(*args, **kwargs)
        except exceptions as e:
            return failed(wrapped, e)
        return Ok(value)

    def decorate(f: Callable[..., Any]) -> Any:
        if inspect.iscoroutinefunction(f):
            return async_wrapper(f)
        return sync_wrapper(f)

    if func is not None:
        return decorate(func)
    return decorate
