from ._algos import (
    contains,
    for_each_adjacent,
    for_each_all,
    for_each_both,
    last,
    max_size,
    min_size,
    transform_if,
)
from ._core import (
    Config,
    Cursor,
    GeneratorFn,
    Pipeable,
    Range,
    StepRule,
    config_context,
    get_config,
    is_iterable,
    is_pair,
    is_printable,
    is_tuple,
    set_config,
    to_string,
)
from ._cursor import (
    advance,
    advance_and_return_prior,
    begin,
    dereference,
    end,
    equals,
    is_empty,
    less_than,
    traverse,
)
from ._generative import GenerativeIterator, GenerativeRange, SentinelAccessError
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._rules import Counter, Offset, Scale, explicit_copy, owned_copy, predecessor, successor
from ._stepped import PositionIterator, SteppedRange

__all__ = [
    "NONE",
    "Config",
    "Counter",
    "Cursor",
    "GenerativeIterator",
    "GenerativeRange",
    "GeneratorFn",
    "NoneOption",
    "Offset",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "PositionIterator",
    "Range",
    "Scale",
    "SentinelAccessError",
    "Some",
    "StepRule",
    "SteppedRange",
    "advance",
    "advance_and_return_prior",
    "begin",
    "config_context",
    "contains",
    "dereference",
    "end",
    "equals",
    "explicit_copy",
    "for_each_adjacent",
    "for_each_all",
    "for_each_both",
    "get_config",
    "is_empty",
    "is_iterable",
    "is_pair",
    "is_printable",
    "is_tuple",
    "last",
    "less_than",
    "max_size",
    "min_size",
    "owned_copy",
    "predecessor",
    "set_config",
    "successor",
    "to_string",
    "transform_if",
    "traverse",
]
