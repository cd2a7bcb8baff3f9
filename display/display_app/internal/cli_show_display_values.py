"""
이 모듈은 표시값 파이프라인을 명령행에서 직접 실행해 보는 CLI 유틸입니다.

This module provides a small CLI utility that runs the display-value
pipelines on command-line input and prints the results. It is meant for
illustration only; its output is not a stable interface.
"""

import argparse
import locale
from dataclasses import dataclass

from fp_core import Err, Ok

from display_app.config import get_settings
from display_app.models.model_io_metadata import FileMetadata
from display_app.services.service_lookup import describe_user, double_parsed_int
from display_app.services.service_software import software_display_value
from display_app.services.service_submission import submission_date_display_value


@dataclass
class DisplayRow:
    """출력할 단일 행 / A single labelled output row."""

    label: str
    value: str


def build_rows(args: argparse.Namespace) -> list[DisplayRow]:
    """인자로부터 각 파이프라인의 결과 행을 만든다.
    Run each pipeline on the parsed arguments and collect the rows.
    """
    settings = get_settings()

    metadata = FileMetadata(
        application=args.application,
        app_version=args.app_version,
    )
    rows = [
        DisplayRow("Software", software_display_value(metadata, settings=settings)),
        DisplayRow("Date", submission_date_display_value(args.date, settings=settings)),
    ]

    if args.user_id is not None:
        match double_parsed_int(args.user_id):
            case Ok(value=text):
                rows.append(DisplayRow("Doubled", text))
            case Err(error=error):
                rows.append(DisplayRow("Doubled", error.message))
        rows.append(DisplayRow("User", describe_user(args.user_id)))

    return rows


def print_rows(rows: list[DisplayRow]) -> None:
    """라벨을 정렬해서 출력한다 / Print rows with aligned labels."""
    width = max(len(row.label) for row in rows)
    for row in rows:
        print(f"{row.label:<{width}} : {row.value}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """명령행 인자를 파싱한다.
    Parse command-line arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "메타데이터와 제출일을 표시용 문자열로 변환해 출력합니다.\n"
            "Render software metadata and a submission date as display strings."
        ),
    )

    parser.add_argument(
        "--application",
        type=str,
        default=None,
        help="애플리케이션 이름 / Application name (e.g. 'MS Word').",
    )
    parser.add_argument(
        "--app-version",
        type=str,
        default=None,
        help="애플리케이션 버전 / Application version (e.g. '3.0.0').",
    )
    parser.add_argument(
        "--date",
        type=str,
        default="",
        help=(
            "제출일 문자열 (ISO-8601). 비어 있으면 placeholder 를 출력합니다.\n"
            "Raw submission date (ISO-8601); empty prints the placeholder."
        ),
    )
    parser.add_argument(
        "--user-id",
        type=str,
        default=None,
        help="조회할 사용자 id 문자열 / Raw user id to parse and look up.",
    )

    return parser.parse_args(argv)


def use_host_locale() -> None:
    """날짜 표시가 호스트 로케일(LC_TIME)을 따르도록 설정한다.
    Adopt the host LC_TIME locale so dates follow the environment.

    로케일이 설치되어 있지 않으면 경고만 남기고 "C" 로케일을 유지한다.
    If the host locale is not installed, a warning is printed and the
    "C" locale stays in effect.
    """
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        print(f"[WARN] Could not apply host LC_TIME locale: {exc}")


def main(argv: list[str] | None = None) -> None:
    """CLI 엔트리 포인트.
    CLI entry point.
    """
    args = parse_args(argv)
    use_host_locale()

    print("[INFO] Rendering display values")
    print_rows(build_rows(args))


if __name__ == "__main__":
    main()
