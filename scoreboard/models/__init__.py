from .attempt import Attempt
from .result import Result, ResultFields, result_columns
from .result_record import ResultRecord

__all__ = [
    "Attempt",
    "Result",
    "ResultFields",
    "ResultRecord",
    "result_columns",
]
