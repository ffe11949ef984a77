"""Option type: Some[T] | Nothing for optional values.

``into_option`` is the entry point for ``None``-returning APIs: it maps ``None``
to ``Nothing`` and wraps everything else, falsy values included.

Examples:
    >>> into_option({'a': 1}.get('a')).map(lambda x: x + 1)
    Some(value=2)
    >>> into_option({'a': 1}.get('b')).unwrap_or(0)
    0
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from safer.errors import UnwrapOnNone

if TYPE_CHECKING:
    from safer.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'into_option', 'nothing']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some always holds a value, even ``None``: ``Some(None)`` is not ``Nothing``.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).case_of(some=str, nothing=lambda: 'empty')
        '42'
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value for its side effect and return self."""
        f(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from safer.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from safer.result import Ok

        return Ok(self.value)

    def case_of[U](self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:  # noqa: ARG002
        """Exhaustive dispatch: call ``some`` with the value.

        Args:
            some: Arm applied to the contained value.
            nothing: Arm for the empty case (not called here).

        Returns:
            The result of ``some(value)``.
        """
        return some(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` constant (or ``nothing()``) instead of instantiating
    directly. All instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.map(lambda x: x * 2)
        NothingType()
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            UnwrapOnNone: Always.
        """
        raise UnwrapOnNone()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapOnNone: Always, carrying ``msg``.
        """
        raise UnwrapOnNone(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by the recovery function."""
        return f()

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return self without calling f."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from safer.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error with f."""
        from safer.result import Err

        return Err(f())

    def case_of[T, U](self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:  # noqa: ARG002
        """Exhaustive dispatch: call the ``nothing`` arm."""
        return nothing()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def nothing() -> NothingType:
    """Return the empty Option.

    The function form exists for call sites that want a constructor symmetric
    with ``Some(...)``; it always returns the ``Nothing`` singleton.
    """
    return Nothing


def into_option[T](value: T | None) -> Option[T]:
    """Convert a possibly-None value into an Option.

    Only ``None`` becomes ``Nothing``; falsy values such as ``0``, ``''`` and
    ``False`` are wrapped in ``Some``.

    Examples:
        >>> into_option(None)
        NothingType()
        >>> into_option(0)
        Some(value=0)
    """
    if value is None:
        return Nothing
    return Some(value)
