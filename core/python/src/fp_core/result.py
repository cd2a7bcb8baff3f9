from collections.abc import Callable
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 결과 값을 담는 래퍼입니다. (Either 의 right)

    Wrapper type that represents the successful branch of a Result
    (the `right` side of an Either).
    """

    # match Ok(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Ok(value)`
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패(에러) 정보를 담는 래퍼입니다. (Either 의 left)

    Wrapper type that represents the error branch of a Result
    (the `left` side of an Either).
    """
    # match Err(error) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Err(error)`
    __match_args__ = ("error",)

    error: E


type Result[T, E] = Ok[T] | Err[E]
"""
성공/실패 분기를 타입으로 표현하는 공용 Result 타입입니다.

Generic Result type that encodes the chance of failure in the type,
so callers are forced to deal with it.

- T: 성공 시 반환되는 값의 타입 (success type)
- E: 실패(에러) 시 반환되는 정보의 타입 (error type)
"""


def is_ok[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Ok 인지 여부를 반환합니다.

    Return True if the given Result is an Ok value.
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Err 인지 여부를 반환합니다.

    Return True if the given Result is an Err value.
    """
    return isinstance(result, Err)


def map_result[T, U, E](
    fn: Callable[[T], U],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """
    Ok 값에만 함수를 적용하는 변환기를 반환합니다. Err 는 그대로 통과합니다.

    Return a function that applies `fn` to an Ok value.
    Err values pass through untouched and never invoke `fn`.
    """

    def _map(result: Result[T, E]) -> Result[U, E]:
        match result:
            case Ok(value):
                return Ok(fn(value))
            case _:
                return result

    return _map


def chain_result[T, U, E](
    fn: Callable[[T], Result[U, E]],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """
    Result 를 반환하는 함수를 이어 붙입니다 (flat-map).

    Return a function that feeds an Ok value into `fn`, which itself
    returns a Result. The nested Result is flattened instead of wrapped.
    """

    def _chain(result: Result[T, E]) -> Result[U, E]:
        match result:
            case Ok(value):
                return fn(value)
            case _:
                return result

    return _chain


def fold_result[T, E, R](
    on_err: Callable[[E], R],
    on_ok: Callable[[T], R],
) -> Callable[[Result[T, E]], R]:
    """
    Err/Ok 양쪽 분기를 하나의 값으로 접습니다.

    Return a function that collapses a Result into a single value,
    using `on_err` for the failure side and `on_ok` for the success side.
    """

    def _fold(result: Result[T, E]) -> R:
        match result:
            case Ok(value):
                return on_ok(value)
            case Err(error):
                return on_err(error)
            case _:
                raise TypeError(f"Unexpected result type: {type(result).__name__}")

    return _fold


__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "map_result",
    "chain_result",
    "fold_result",
]
