from datetime import datetime, timezone

from display_app.config import Settings, get_settings


def format_date(date: datetime, *, settings: Settings | None = None) -> str:
    """날짜를 사람이 읽기 쉬운 긴 형식 문자열로 변환한다.
    Render a datetime as a long, locale-sensitive display string.

    예 / Example: ``December 31, 2019, 07:00 PM EST``

    - 월 이름과 AM/PM 표기는 프로세스의 LC_TIME 로케일을 따른다.
      파이썬은 시작 시 LC_TIME 을 "C" 로 두므로, 호스트 로케일을 쓰려면
      호출하는 쪽(예: CLI main)이 locale.setlocale(LC_TIME, "") 을 호출해야 한다.
      Month name and AM/PM marker follow the process LC_TIME locale.
      Python starts with LC_TIME set to "C"; callers that want the host
      locale own that setting and call locale.setlocale(LC_TIME, "")
      themselves, as the CLI entry point does.
    - 필드 순서는 "월 일, 연도, 시:분 AM/PM 타임존" 으로 고정이다.
      Field order is fixed as "Month day, year, hh:mm AM/PM zone".
    - 설정된 타임존(없으면 호스트 로컬 타임존)으로 변환해서 표시한다.
      The value is shown in the configured zone, or host local time.
    - naive datetime 은 UTC 로 간주한다.
      Naive datetimes are taken as UTC.
    """
    settings = settings or get_settings()

    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)

    local = date.astimezone(settings.display_zone())

    # 일(day)은 0 패딩 없이, 시:분 은 2자리 12시간제로 표시한다.
    # Day is unpadded; hour:minute is two-digit 12-hour time.
    return f"{local:%B} {local.day}, {local.year}, {local:%I:%M %p} {local.tzname()}"
