from dataclasses import dataclass
from enum import Enum

from fp_core import Result


class ParseErrorCode(str, Enum):
    """
    입력 파싱/조회 과정에서 발생하는 에러 코드.
    Error codes for parsing and lookup of raw input.
    """

    EMPTY_INPUT = "empty_input"
    INVALID_INTEGER = "invalid_integer"
    INVALID_DATE = "invalid_date"
    NOT_FOUND = "not_found"


@dataclass(slots=True, frozen=True)
class ParseError:
    """
    파싱/조회 도메인 에러 표현. 예외 대신 Err 로 감싸서 반환한다.
    Domain error representation for parsing and lookup,
    returned inside an Err rather than raised.
    """

    code: ParseErrorCode
    message: str


type ParseResult[T] = Result[T, ParseError]
