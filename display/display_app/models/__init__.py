"""
display_app 에서 사용하는 Pydantic 기반 IO/도메인 모델 패키지.
Pydantic-based IO/domain models used by display_app.

원본 메타데이터 페이로드와 조회용 도메인 모델 정의를 포함한다.
It contains the raw metadata payload and lookup domain models.
"""
