from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fp_core import from_falsy, get_or_else, map_option, pipe


def _legacy_text(value: Any) -> str | None:
    """레거시 필드 값을 문자열 또는 None 으로 정규화한다.
    Normalize a legacy field value to text, or None when unusable.

    - falsy 값(None, "", 0, False, NaN 등)은 None.
      Falsy values become None.
    - 숫자는 문자열로 변환한다 (2020 -> "2020", 3.0 -> "3").
      Numbers are rendered as text.
    - 그 외 타입(list, dict, bool 등)은 None.
      Any other type is treated as absent.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, (str, int, float)):
        return None
    return pipe(
        from_falsy(value),
        map_option(str),
        get_or_else(lambda: None),
    )


class FileMetadata(BaseModel):
    """
    업로드된 파일의 소프트웨어 메타데이터.
    Software metadata attached to an uploaded file.

    레거시 페이로드는 camelCase(`appVersion`)를 쓰므로 alias 로 받고,
    파이썬 코드에서는 `app_version` 이름으로도 채울 수 있다.
    Legacy payloads use camelCase (`appVersion`), accepted via alias;
    Python callers may populate it as `app_version` as well.

    숫자 값은 문자열로, 쓸 수 없는 값은 None 으로 바꾸므로 검증 에러가 나지 않는다.
    Numbers are coerced to text and unusable values to None, so
    validation never fails on field values.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    application: str | None = Field(
        default=None,
        description="애플리케이션 이름 / Application name, e.g. 'MS Word'.",
    )
    app_version: str | None = Field(
        default=None,
        alias="appVersion",
        description="애플리케이션 버전 / Application version, e.g. '3.0.0'.",
    )

    @field_validator("application", "app_version", mode="before")
    @classmethod
    def normalize_legacy(cls, value: Any) -> str | None:
        return _legacy_text(value)
