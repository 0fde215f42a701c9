"""fp-toolkit: Option, Result and lazy Async types for Python 3.13+.

Explicit, composable handling of absence, failure and asynchrony, without
exceptions for control flow.

Flat imports (preferred):
    from fp_toolkit import Ok, Err, Result, Some, Nothing, Option
    from fp_toolkit import Async, AsyncResult, pipe, flow

Curried combinators for pipe live in the submodules:
    from fp_toolkit import result, option, async_, async_result
    pipe(Ok(2), result.map(lambda n: n + 3), result.default_value(0))
"""

from fp_toolkit import async_, option, result
from fp_toolkit._config import ToolkitConfig, get_config, init
from fp_toolkit._logging import configure_logging, get_logger
from fp_toolkit.async_ import Async, AsyncResult, asyncify
from fp_toolkit.async_ import result as async_result
from fp_toolkit.compose import flow, pipe
from fp_toolkit.decorators import safe, safe_async
from fp_toolkit.errors import ExhaustiveMatchError, FpToolkitError, UnwrapError
from fp_toolkit.option import Nothing, NothingType, Option, Some
from fp_toolkit.result import Err, Ok, Result

__all__ = [
    'Async',
    'AsyncResult',
    'Err',
    'ExhaustiveMatchError',
    'FpToolkitError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'ToolkitConfig',
    'UnwrapError',
    'async_',
    'async_result',
    'asyncify',
    'configure_logging',
    'flow',
    'get_config',
    'get_logger',
    'init',
    'option',
    'pipe',
    'result',
    'safe',
    'safe_async',
]
