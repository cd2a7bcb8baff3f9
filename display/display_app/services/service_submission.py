import re
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any, Final

from fp_core import (
    NOTHING,
    Err,
    Ok,
    Option,
    Some,
    chain_option,
    from_falsy,
    get_or_else,
    map_option,
    pipe,
)

from display_app.config import Settings, get_settings
from display_app.errors import ParseError, ParseErrorCode, ParseResult
from display_app.services.service_formatting import format_date


# 연도만(YYYY) 또는 연-월(YYYY-MM) 만 있는 축약 ISO 날짜.
# Reduced-precision ISO dates: year only or year-month.
_REDUCED_ISO_DATE: Final[re.Pattern[str]] = re.compile(r"([0-9]{4})(?:-([0-9]{2}))?")


def _invalid_date(message: str) -> ParseResult[datetime]:
    return Err(
        ParseError(
            code=ParseErrorCode.INVALID_DATE,
            message=message,
        ),
    )


def parse_date_safe(
    raw: Any,
    *,
    settings: Settings | None = None,
) -> ParseResult[datetime]:
    """ISO-8601 문자열을 timezone-aware datetime 으로 파싱한다.
    Parse an ISO-8601 string into a timezone-aware datetime.

    - 날짜만 있는 값(예: 2020-01-01, 2020-01, 2020)은 해당 기간 첫날의 UTC 자정으로 본다.
      Date-only values, including YYYY-MM and YYYY, are UTC midnight on
      the first day of the period.
    - 오프셋 없는 날짜+시각은 표시 타임존(없으면 로컬) 기준으로 본다.
      Date-times without an offset are read in the display zone.
    - 실패해도 예외를 던지지 않고 Err(ParseError) 를 반환한다.
      Failure is returned as Err(ParseError), never raised.
    """
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        return _invalid_date(f"Expected a date string, got {type(raw).__name__}")

    text = raw.strip()
    if not text:
        return Err(
            ParseError(
                code=ParseErrorCode.EMPTY_INPUT,
                message="Date string is empty",
            ),
        )

    reduced = _REDUCED_ISO_DATE.fullmatch(text)
    if reduced is not None:
        year, month = reduced.group(1), reduced.group(2) or "01"
        try:
            return Ok(datetime(int(year), int(month), 1, tzinfo=timezone.utc))
        except ValueError:
            return _invalid_date(f'Could not parse "{raw}" to a date')

    try:
        day = date.fromisoformat(text)
        return Ok(datetime(day.year, day.month, day.day, tzinfo=timezone.utc))
    except ValueError:
        pass

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return _invalid_date(f'Could not parse "{raw}" to a date')

    if parsed.tzinfo is None:
        settings = settings or get_settings()
        zone = settings.display_zone()
        # zone 이 None 이면 astimezone() 이 naive 값을 로컬 시각으로 해석한다.
        # With no zone, astimezone() reads the naive value as local time.
        parsed = parsed.replace(tzinfo=zone) if zone is not None else parsed.astimezone()

    return Ok(parsed)


def _parse_or_warn(settings: Settings) -> Callable[[str], Option[datetime]]:
    def _parse(raw: str) -> Option[datetime]:
        match parse_date_safe(raw, settings=settings):
            case Ok(value=parsed):
                return Some(parsed)
            case Err(error=error):
                print(f"[WARN] Could not parse submission date: {error.message}")
                return NOTHING
            case other:
                raise TypeError(f"Unexpected result type: {type(other).__name__}")

    return _parse


def submission_date_display_value(
    raw: str | None,
    *,
    settings: Settings | None = None,
) -> str:
    """제출일 문자열을 표시용 긴 날짜 문자열로 변환한다.
    Turn a raw submission date string into a long display string.

    빈 문자열/None 이거나 파싱할 수 없는 값이면 placeholder 를 반환한다.
    Empty, missing or unparsable values yield the configured placeholder.
    """
    settings = settings or get_settings()

    if settings.debug:
        print(f"[DEBUG] submission_date_display_value: raw={raw!r}")

    return pipe(
        from_falsy(raw),
        chain_option(_parse_or_warn(settings)),
        map_option(lambda parsed: format_date(parsed, settings=settings)),
        get_or_else(lambda: settings.placeholder),
    )
