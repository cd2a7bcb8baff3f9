from collections.abc import Mapping
from typing import Any

from fp_core import from_falsy, get_or_else, map_option, pipe, sequence_option

from display_app.config import Settings, get_settings
from display_app.models.model_io_metadata import FileMetadata


def _to_metadata(metadata: FileMetadata | Mapping[str, Any]) -> FileMetadata:
    """dict 형태의 레거시 메타데이터도 FileMetadata 로 정규화한다.
    Normalize legacy mapping payloads into FileMetadata.
    """
    if isinstance(metadata, FileMetadata):
        return metadata
    return FileMetadata.model_validate(dict(metadata))


def software_display_value(
    metadata: FileMetadata | Mapping[str, Any],
    *,
    settings: Settings | None = None,
) -> str:
    """애플리케이션 이름과 버전을 "{application} {appVersion}" 로 합친다.
    Join application name and version into "{application} {appVersion}".

    두 값 중 하나라도 없거나 falsy(빈 문자열 등)이면 placeholder 를 반환한다.
    If either value is missing or falsy (e.g. empty string), the
    configured placeholder is returned instead.
    """
    settings = settings or get_settings()
    meta = _to_metadata(metadata)

    if settings.debug:
        print(
            f"[DEBUG] software_display_value: "
            f"application={meta.application!r} app_version={meta.app_version!r}"
        )

    return pipe(
        sequence_option(
            from_falsy(meta.application),
            from_falsy(meta.app_version),
        ),
        map_option(lambda pair: f"{pair[0]} {pair[1]}"),
        get_or_else(lambda: settings.placeholder),
    )
