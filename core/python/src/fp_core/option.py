import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .result import Err, Ok, Result


@dataclass(slots=True, frozen=True)
class Some[T]:
    """
    값이 존재하는 경우를 담는 래퍼입니다.

    Wrapper type that represents the present branch of an Option.
    """

    # match Some(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Some(value)`
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Nothing:
    """
    값이 없는 경우를 나타냅니다. 페이로드가 없습니다.

    Represents the absent branch of an Option. Carries no payload;
    every instance compares equal to `NOTHING`.
    """

    __match_args__ = ()


NOTHING: Nothing = Nothing()

type Option[T] = Some[T] | Nothing
"""
값이 없을 수도 있음을 타입으로 표현하는 Option 타입입니다.

Optional value type. Absence is data, not None, so downstream code
never branches on null checks.
"""


def _unexpected(value: Any) -> TypeError:
    return TypeError(f"Unexpected option type: {type(value).__name__}")


def is_some[T](option: Option[T]) -> bool:
    """
    Option 이 Some 인지 여부를 반환합니다.

    Return True if the given Option is a Some value.
    """
    return isinstance(option, Some)


def is_nothing[T](option: Option[T]) -> bool:
    """
    Option 이 Nothing 인지 여부를 반환합니다.

    Return True if the given Option is Nothing.
    """
    return isinstance(option, Nothing)


def from_nullable[T](value: T | None) -> Option[T]:
    """None 만 Nothing 으로 취급합니다.
    Only None is treated as absent.
    """
    return NOTHING if value is None else Some(value)


def from_predicate[T](predicate: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    """
    predicate 를 만족하면 Some, 아니면 Nothing 을 만드는 생성자를 반환합니다.

    Return a constructor yielding Some(x) when `predicate(x)` holds,
    Nothing otherwise.
    """

    def _construct(value: T) -> Option[T]:
        return Some(value) if predicate(value) else NOTHING

    return _construct


def _is_truthy(value: Any) -> bool:
    # NaN 은 파이썬에서 truthy 이므로 별도로 걸러낸다.
    # NaN is truthy in Python, so it is rejected explicitly.
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


from_falsy: Callable[[Any], Option[Any]] = from_predicate(_is_truthy)
"""
falsy 값(None, "", 0, 0.0, False, 빈 컨테이너, NaN)은 Nothing,
그 외의 값은 Some(x) 로 변환합니다.

Return Nothing for any falsy value (None, "", 0, 0.0, False, empty
containers, NaN) and Some(x) for anything else.
"""


def sequence_option(*options: Option[Any]) -> Option[tuple[Any, ...]]:
    """
    여러 Option 을 하나의 튜플 Option 으로 묶습니다.
    모든 입력이 Some 일 때만 Some 이 됩니다.

    Combine any number of Options into one Option of a tuple, in input
    order. Present only if every input is present; the first Nothing
    short-circuits.
    """
    values: list[Any] = []
    for option in options:
        match option:
            case Some(value):
                values.append(value)
            case Nothing():
                return NOTHING
            case _:
                raise _unexpected(option)
    return Some(tuple(values))


def map_option[T, U](fn: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """
    Some 값에만 fn 을 적용합니다. Nothing 은 그대로 통과합니다.

    Return a function applying `fn` only to a present value.
    Nothing passes through and never invokes `fn`.
    """

    def _map(option: Option[T]) -> Option[U]:
        match option:
            case Some(value):
                return Some(fn(value))
            case Nothing():
                return NOTHING
            case _:
                raise _unexpected(option)

    return _map


def chain_option[T, U](
    fn: Callable[[T], Option[U]],
) -> Callable[[Option[T]], Option[U]]:
    """Option 을 반환하는 함수를 이어 붙입니다 (flat-map).
    Flat-map: feed a present value into `fn`, which returns an Option.
    """

    def _chain(option: Option[T]) -> Option[U]:
        match option:
            case Some(value):
                return fn(value)
            case Nothing():
                return NOTHING
            case _:
                raise _unexpected(option)

    return _chain


def get_or_else[T](fallback: Callable[[], T]) -> Callable[[Option[T]], T]:
    """
    Some(x) 이면 x 를, Nothing 이면 fallback() 결과를 반환합니다.

    Return a total function unwrapping Some(x) to x. On Nothing,
    `fallback` is invoked lazily, exactly once per call.
    """

    def _get(option: Option[T]) -> T:
        match option:
            case Some(value):
                return value
            case Nothing():
                return fallback()
            case _:
                raise _unexpected(option)

    return _get


def fold_option[T, R](
    on_nothing: Callable[[], R],
    on_some: Callable[[T], R],
) -> Callable[[Option[T]], R]:
    """Nothing/Some 양쪽 분기를 하나의 값으로 접습니다.
    Collapse an Option into a single value.
    """

    def _fold(option: Option[T]) -> R:
        match option:
            case Some(value):
                return on_some(value)
            case Nothing():
                return on_nothing()
            case _:
                raise _unexpected(option)

    return _fold


def to_result[T, E](
    on_nothing: Callable[[], E],
) -> Callable[[Option[T]], Result[T, E]]:
    """
    Option 을 Result 로 변환합니다. Nothing 은 on_nothing() 에러가 됩니다.

    Convert an Option into a Result, using `on_nothing()` as the error.
    """

    def _convert(option: Option[T]) -> Result[T, E]:
        match option:
            case Some(value):
                return Ok(value)
            case Nothing():
                return Err(on_nothing())
            case _:
                raise _unexpected(option)

    return _convert


__all__ = [
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
]
