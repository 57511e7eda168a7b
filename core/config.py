"""
Core Configuration Module

환경변수 및 전역 설정을 관리하는 모듈.
Pydantic Settings를 사용하여 타입 안전성과 검증을 보장합니다.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정 클래스

    환경변수에서 값을 로드하며, .env 파일을 지원합니다.
    모든 설정은 타입 안전하며 자동으로 검증됩니다.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="",
    )

    # ==================== Application Configuration ====================
    app_env: str = Field(
        default="development",
        description="애플리케이션 환경 (development, staging, production)"
    )
    app_name: str = Field(
        default="Convenient-Fetch",
        description="애플리케이션 이름"
    )
    app_version: str = Field(
        default="0.1.0",
        description="애플리케이션 버전"
    )

    # ==================== Logging Configuration ====================
    log_level: str = Field(
        default="INFO",
        description="로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="text",
        description="로그 포맷 (json, text)"
    )

    # ==================== HTTP Configuration ====================
    # None이면 httpx 기본 타임아웃을 그대로 사용 (헬퍼 자체는 타임아웃을 두지 않음)
    http_timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP 요청 타임아웃 (초). 미지정 시 transport 기본값",
    )
    graphql_endpoint: str = Field(
        default="https://www.graphqlhub.com/graphql",
        description="데모 및 GraphQLClient 기본 GraphQL Endpoint",
    )

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """애플리케이션 환경 검증"""
        allowed_envs = {"development", "staging", "production"}
        if v.lower() not in allowed_envs:
            raise ValueError(f"app_env must be one of {allowed_envs}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """로그 레벨 검증"""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed_levels:
            raise ValueError(f"log_level must be one of {allowed_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed_formats = {"json", "text"}
        if v.lower() not in allowed_formats:
            raise ValueError(f"log_format must be one of {allowed_formats}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """프로덕션 환경 여부 확인"""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """개발 환경 여부 확인"""
        return self.app_env == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 캐시된 함수

    이 함수는 애플리케이션 전체에서 단일 Settings 인스턴스를 공유합니다.

    Returns:
        Settings 인스턴스
    """
    return Settings()


# 전역 설정 인스턴스
settings = get_settings()
