from ._option import Option, OptionUnwrapError
from ._result import Result, ResultUnwrapError
from ._states import NONE, Err, NoneOption, Ok, Some

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
]
