"""Error types for the safer ecosystem.

Failure is normally carried as data (``Nothing`` / ``Err``). The exceptions
here are reserved for the unwrap escape hatches, which raise a loud fault when
called on the wrong variant. They signal a programming defect and are never
caught by the library itself.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'SaferError',
    'UnwrapError',
    'UnwrapOnErr',
    'UnwrapOnNone',
    'UnwrapOnOk',
]


class SaferError(Exception):
    """Base exception class for safer-related errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from safer import SaferError

        try:
            Nothing.unwrap()
        except SaferError as e:
            print(e.code)  # UNWRAP_ON_NONE
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class UnwrapError(SaferError, RuntimeError):
    """An unwrap escape hatch was called on the wrong variant."""


class UnwrapOnNone(UnwrapError):  # noqa: N818
    """``unwrap()`` or ``expect()`` was called on ``Nothing``."""

    def __init__(self, message: str = 'Called unwrap on Nothing') -> None:
        super().__init__(message, code='UNWRAP_ON_NONE')


class UnwrapOnErr(UnwrapError):  # noqa: N818
    """``unwrap()`` or ``expect()`` was called on ``Err``.

    Attributes:
        error: The error value held by the ``Err``.
    """

    def __init__(self, error: Any, message: str | None = None) -> None:
        self.error = error
        super().__init__(message or f'Called unwrap on Err: {error!r}', code='UNWRAP_ON_ERR')


class UnwrapOnOk(UnwrapError):  # noqa: N818
    """``unwrap_err()`` or ``expect_err()`` was called on ``Ok``.

    Attributes:
        value: The success value held by the ``Ok``.
    """

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f'Called unwrap_err on Ok: {value!r}', code='UNWRAP_ON_OK')
