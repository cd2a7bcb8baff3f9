"""
display_app 도메인 서비스 패키지.
Display-value services.

Option/Result 파이프라인으로 원시 입력을 표시용 문자열로 바꾸는 순수 함수를 제공한다.
It provides pure functions that turn raw input into display strings through
Option/Result pipelines.
"""
