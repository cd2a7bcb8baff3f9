"""
display_app 내부 유틸리티(CLI 등).
Internal utilities for display_app, such as the illustrative CLI.
"""
