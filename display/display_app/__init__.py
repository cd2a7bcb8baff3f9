"""
표시값(display value) 애플리케이션 패키지.
Display-value application package.

설정(config), 도메인 에러(errors), 입력 모델(models),
Option/Result 파이프라인 서비스(services)를 포함한다.
It contains configuration, domain errors, input models,
and the Option/Result pipeline services.
"""
