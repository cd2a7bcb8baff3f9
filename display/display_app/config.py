from datetime import tzinfo
from functools import lru_cache
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PLACEHOLDER_DEFAULT: Final[str] = "-"


class Settings(BaseSettings):
    """
    표시값(display value) 생성에 쓰이는 전역 설정.
    Global settings for building display values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DISPLAY_",
        extra="ignore",
    )

    placeholder: str = Field(
        default=PLACEHOLDER_DEFAULT,
        description=(
            "값이 없을 때 대신 표시할 문자열 / "
            "Text shown when a value is absent."
        ),
    )

    timezone: str | None = Field(
        default=None,
        description=(
            "날짜 표시에 사용할 IANA 타임존 이름. 비어 있으면 호스트 로컬 타임존.\n"
            "IANA timezone name used to display dates. "
            "Empty means the host local timezone."
        ),
    )

    debug: bool = Field(
        default=False,
        description="디버그 출력 활성화 여부 / Whether to print debug lines.",
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str | None) -> str | None:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    def display_zone(self) -> tzinfo | None:
        """
        설정된 타임존을 반환한다. None 이면 호스트 로컬 타임존을 뜻한다.
        Return the configured zone; None means the host local timezone.
        """
        if self.timezone is None:
            return None
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()
