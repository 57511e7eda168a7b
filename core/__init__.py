"""
Convenient-Fetch Core Module

공통 핵심 로직을 제공하는 모듈:
- JSON POST 헬퍼 (콜백 / PostResult)
- 로깅 설정
- 전역 설정
"""

from core.config import settings
from core.http_client import JSON_HEADERS, PostResult, convenient_post, post_text

__all__ = ["JSON_HEADERS", "PostResult", "convenient_post", "post_text", "settings"]
