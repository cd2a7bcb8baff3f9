import re
from collections.abc import Iterable
from typing import Final

from fp_core import Err, Ok, chain_result, fold_result, map_result, pipe

from display_app.errors import ParseError, ParseErrorCode, ParseResult
from display_app.models.model_io_user import User


# 앞쪽 공백, 선택적 부호, 그리고 이어지는 10진수 숫자만 사용한다.
# Leading whitespace, optional sign, then the leading run of decimal digits.
_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)")

# 기본 사용자 목록 / Default in-memory user registry
_USERS_DEFAULT: Final[tuple[User, ...]] = (User(id=1), User(id=2))


def double(x: int) -> int:
    return x * 2


def parse_int_safe(val: str) -> ParseResult[int]:
    """문자열을 정수로 파싱한다. 실패하면 Err 를 반환한다.
    Parse a string to an integer, encoding failure in the return type.

    선행 숫자만 읽고 뒤따르는 문자는 무시한다 ("12abc" -> 12).
    Only the leading digits are read; trailing characters are ignored.
    """
    found = _LEADING_INT.match(val)
    if found is None:
        return Err(
            ParseError(
                code=ParseErrorCode.INVALID_INTEGER,
                message=f'Could not parse "{val}" to an integer',
            ),
        )
    return Ok(int(found.group(1)))


def find_user(
    user_id: int,
    users: Iterable[User] = _USERS_DEFAULT,
) -> ParseResult[User]:
    """id 로 사용자를 찾는다. 없으면 Err(NOT_FOUND).
    Look up a user by id; a missing user is an Err(NOT_FOUND).
    """
    user = next((u for u in users if u.id == user_id), None)
    if user is None:
        return Err(
            ParseError(
                code=ParseErrorCode.NOT_FOUND,
                message=f"No user with id: {user_id}",
            ),
        )
    return Ok(user)


def double_parsed_int(val: str) -> ParseResult[str]:
    return pipe(
        parse_int_safe(val),
        map_result(double),
        map_result(lambda x: f"Your doubled int from a string is {x}"),
    )


def describe_user(raw_id: str) -> str:
    """문자열 id 를 파싱하고 사용자를 조회해서 한 줄 설명으로 접는다.
    Parse a string id, look the user up, and fold both branches to text.
    """
    return pipe(
        raw_id,
        parse_int_safe,
        chain_result(find_user),
        fold_result(
            lambda error: error.message,
            lambda user: f"Found user {user.id} in our list!",
        ),
    )
