"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from safer.errors import UnwrapOnErr, UnwrapOnOk

if TYPE_CHECKING:
    from safer.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'collect', 'into_async_result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            UnwrapOnOk: Always.
        """
        raise UnwrapOnOk(self.value)

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since Ok holds no error.

        Raises:
            UnwrapOnOk: Always, carrying ``msg``.
        """
        raise UnwrapOnOk(self.value, f'{msg}: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self without calling f."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from safer.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from safer.option import Nothing

        return Nothing

    def case_of[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Exhaustive dispatch: call the ``ok`` arm with the value."""
        return ok(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            UnwrapOnErr: Always.
        """
        raise UnwrapOnErr(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapOnErr: Always, carrying ``msg``.
        """
        raise UnwrapOnErr(self.error, f'{msg}: {self.error!r}')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error."""
        return f(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def inspect[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self without calling f."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for its side effect and return self."""
        f(self.error)
        return self

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from safer.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from safer.option import Some

        return Some(self.error)

    def case_of[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Exhaustive dispatch: call the ``err`` arm with the error."""
        return err(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


async def into_async_result[T](awaitable: Awaitable[T]) -> Ok[T] | Err[Exception]:
    """Await ``awaitable`` and capture its outcome as a Result.

    Any ``Exception`` raised while awaiting becomes ``Err(exc)``. Other
    ``BaseException`` subclasses (cancellation, KeyboardInterrupt) propagate.

    Example:
        ```python
        result = await into_async_result(client.fetch(url))
        body = result.map(lambda r: r.text).unwrap_or('')
        ```
    """
    try:
        value = await awaitable
    except Exception as e:
        return Err(e)
    return Ok(value)
