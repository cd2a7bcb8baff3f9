from collections.abc import Callable
from functools import reduce
from typing import Any


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    값을 함수들에 왼쪽에서 오른쪽 순서로 흘려보냅니다.

    Thread `value` through `fns` left-to-right.
    `pipe(x, f, g)` is `g(f(x))`; with no functions, `value` is returned.
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose `fns` left-to-right into a single unary function."""

    def _composed(value: Any) -> Any:
        return pipe(value, *fns)

    return _composed


__all__ = ["pipe", "flow"]
