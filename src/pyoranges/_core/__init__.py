from ._config import Config, config_context, get_config, set_config
from ._format import (
    callable_repr,
    is_iterable,
    is_pair,
    is_printable,
    is_tuple,
    to_string,
)
from ._main import Pipeable
from ._protocols import (
    Cursor,
    GeneratorFn,
    Range,
    StepRule,
    SupportsAdd,
    SupportsMul,
    SupportsSub,
)

__all__ = [
    "Config",
    "Cursor",
    "GeneratorFn",
    "Pipeable",
    "Range",
    "StepRule",
    "SupportsAdd",
    "SupportsMul",
    "SupportsSub",
    "callable_repr",
    "config_context",
    "get_config",
    "is_iterable",
    "is_pair",
    "is_printable",
    "is_tuple",
    "set_config",
    "to_string",
]
