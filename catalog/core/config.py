"""
Core Configuration Module
환경변수 및 애플리케이션 설정 중앙 관리
"""

from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 (Pydantic Settings v2)"""

    # ==================== Application ====================
    app_title: str = "Catalog Service"
    app_description: str = "도서, 영화, 회화 조회/등록/수정/삭제 API (역할 기반 권한)"
    app_version: str = "1.0.0"
    app_env: str = Field(default="dev", env="APP_ENV")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_json_format: bool = Field(default=False, env="LOG_JSON_FORMAT")

    # ==================== Database (PostgreSQL) ====================
    postgres_user: str = Field(default="catalog_user", env="POSTGRES_USER")
    postgres_password: str = Field(default="catalog_password", env="POSTGRES_PASSWORD")
    postgres_db: str = Field(default="catalog_db", env="POSTGRES_DB")
    postgres_host: str = Field(default="postgres", env="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, env="POSTGRES_PORT")

    # 지정 시 postgres_* 설정보다 우선 (예: sqlite+aiosqlite:///./catalog.db)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_echo: bool = Field(default=False, env="DATABASE_ECHO")
    create_tables_on_startup: bool = Field(
        default=False,
        env="CREATE_TABLES_ON_STARTUP",
        description="Alembic 대신 시작 시 테이블 생성 (개발용)",
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy Database URL (Async)"""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_url_sync(self) -> str:
        """SQLAlchemy Database URL (Sync - for Alembic)"""
        if self.database_url_override:
            return (
                self.database_url_override.replace("+asyncpg", "")
                .replace("+aiosqlite", "")
            )
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # ==================== JWT Authentication ====================
    jwt_secret_key: str = Field(
        default="default-secret-key-change-in-production-min-32-characters",
        env="JWT_SECRET_KEY",
    )
    jwt_algorithm: str = Field(default="HS256", env="JWT_ALGORITHM")
    jwt_access_token_expire_minutes: int = Field(
        default=60, env="JWT_ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # ==================== CORS ====================
    cors_origins_str: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins를 쉼표로 분리하여 리스트로 반환"""
        return [origin.strip() for origin in self.cors_origins_str.split(",")]

    cors_allow_credentials: bool = Field(default=True, env="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: str = Field(
        default="GET,POST,PUT,DELETE,OPTIONS", env="CORS_ALLOW_METHODS"
    )
    cors_allow_headers: str = Field(default="*", env="CORS_ALLOW_HEADERS")

    # ==================== Pydantic Config ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ==================== Validators ====================
    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """JWT Secret Key 길이 검증 (최소 32자)"""
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """APP_ENV 값 검증"""
        allowed_envs = ["dev", "test", "prod"]
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v


# 싱글톤 인스턴스
settings = Settings()
