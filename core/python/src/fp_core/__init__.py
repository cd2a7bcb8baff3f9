"""
fp_core 패키지.

프로젝트 전반에서 공유되는 함수형 코어 유틸리티(Option, Result, pipe)를 제공합니다.

The `fp_core` package.

Provides the shared functional core used across the project: the Option
type for possibly-missing values, the Result type for typed success/failure
branching, and `pipe` for left-to-right pipelines.
"""

from .option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    chain_option,
    fold_option,
    from_falsy,
    from_nullable,
    from_predicate,
    get_or_else,
    is_nothing,
    is_some,
    map_option,
    sequence_option,
    to_result,
)
from .pipe import flow, pipe
from .result import Err, Ok, Result, chain_result, fold_result, is_err, is_ok, map_result

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "map_result",
    "chain_result",
    "fold_result",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "is_some",
    "is_nothing",
    "from_nullable",
    "from_predicate",
    "from_falsy",
    "sequence_option",
    "map_option",
    "chain_option",
    "get_or_else",
    "fold_option",
    "to_result",
    "pipe",
    "flow",
]
