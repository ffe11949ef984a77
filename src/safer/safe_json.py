"""JSON and schema parsing that returns Results instead of raising.

Decoding and validation are delegated to msgspec; this module only shapes the
outcome. A schema is any type msgspec understands: a ``msgspec.Struct``, a
dataclass, a TypedDict, ``list[int]``, and so on.

Example:
    ```python
    class User(msgspec.Struct):
        name: str
        age: int

    parse_user = parse_json_with_schema(User)
    parse_user('{"name": "ada", "age": 36}')   # Ok(User(name='ada', age=36))
    parse_user('{"name": "ada"')               # Err(JsonParseError(...))
    parse_user('{"name": "ada"}')              # Err(SchemaError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from safer._logging import get_logger
from safer.result import Err, Ok, Result

__all__ = [
    'JsonParseError',
    'ParseJSONError',
    'SchemaError',
    'parse_json',
    'parse_json_with_schema',
    'parse_with_schema',
]

_logger = get_logger(__name__)


class JsonParseError(msgspec.Struct, frozen=True):
    """The input was not valid JSON."""

    message: str
    error: msgspec.DecodeError


class SchemaError(msgspec.Struct, frozen=True):
    """The input was valid JSON but did not match the schema."""

    message: str
    error: msgspec.ValidationError


type ParseJSONError = JsonParseError | SchemaError


def parse_json(data: str | bytes) -> Result[Any, msgspec.DecodeError]:
    """Decode a JSON document into plain Python objects.

    Returns:
        Ok(value) on success, Err(msgspec.DecodeError) on malformed input.
    """
    try:
        return Ok(msgspec.json.decode(data))
    except msgspec.DecodeError as e:
        _logger.debug('json.decode_failed', error=str(e))
        return Err(e)


def parse_with_schema[T](schema: type[T]) -> Callable[[Any], Result[T, msgspec.ValidationError]]:
    """Build a parser that validates an already-decoded value against ``schema``.

    Args:
        schema: Target type, passed to ``msgspec.convert``.

    Returns:
        A function mapping a raw value to Ok(parsed) or Err(ValidationError).
    """

    def parse(obj: Any) -> Result[T, msgspec.ValidationError]:
        try:
            return Ok(msgspec.convert(obj, type=schema))
        except msgspec.ValidationError as e:
            _logger.debug('json.validation_failed', schema=getattr(schema, '__name__', repr(schema)), error=str(e))
            return Err(e)

    return parse


def parse_json_with_schema[T](schema: type[T]) -> Callable[[str | bytes], Result[T, ParseJSONError]]:
    """Build a parser that decodes JSON and validates it against ``schema``.

    Malformed JSON yields ``Err(JsonParseError)``; well-formed JSON that does
    not match yields ``Err(SchemaError)``.
    """
    validate = parse_with_schema(schema)

    def parse(data: str | bytes) -> Result[T, ParseJSONError]:
        return (
            parse_json(data)
            .map_err(lambda e: JsonParseError(str(e), e))
            .and_then(lambda obj: validate(obj).map_err(lambda e: SchemaError(str(e), e)))
        )

    return parse
