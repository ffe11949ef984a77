"""safer: Option, Result, IO and SafeMap for Python 3.13+.

Flat imports (preferred):
    from safer import Option, Some, Nothing, into_option
    from safer import Result, Ok, Err
    from safer import IO, io
    from safer import create_persistent_map, create_mutable_map

Submodule imports (for organization):
    from safer.option import Some, Nothing
    from safer.result import Ok, Err, collect
    from safer.safe_json import parse_json_with_schema
"""

# Configuration and logging
from safer._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from safer.config import SaferConfig, get_config, init, reset_config

# Decorators
from safer.decorators import deferred, fallible, optional

# Errors
from safer.errors import (
    SaferError,
    UnwrapError,
    UnwrapOnErr,
    UnwrapOnNone,
    UnwrapOnOk,
)

# Deferred effects
from safer.effects import IO, io

# Option types
from safer.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    into_option,
    nothing,
)

# Result types
from safer.result import (
    Err,
    Ok,
    Result,
    collect,
    into_async_result,
)

# JSON parsing
from safer.safe_json import (
    JsonParseError,
    ParseJSONError,
    SchemaError,
    parse_json,
    parse_json_with_schema,
    parse_with_schema,
)

# Maps
from safer.safe_map import (
    MutableMap,
    PersistentMap,
    SafeMap,
    create_mutable_map,
    create_persistent_map,
)

__all__ = [
    'IO',
    'Err',
    'JsonParseError',
    'MutableMap',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'ParseJSONError',
    'PersistentMap',
    'Result',
    'SafeMap',
    'SaferConfig',
    'SaferError',
    'SchemaError',
    'Some',
    'UnwrapError',
    'UnwrapOnErr',
    'UnwrapOnNone',
    'UnwrapOnOk',
    'add_log_hook',
    'clear_log_hooks',
    'collect',
    'configure_logging',
    'create_mutable_map',
    'create_persistent_map',
    'deferred',
    'fallible',
    'get_config',
    'get_logger',
    'init',
    'into_async_result',
    'into_option',
    'io',
    'nothing',
    'optional',
    'parse_json',
    'parse_json_with_schema',
    'parse_with_schema',
    'remove_log_hook',
    'reset_config',
]

__version__ = '0.1.0'
