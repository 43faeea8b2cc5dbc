# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "change-me", "")


def _section_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


def _parse_flag(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class CodesConfig(BaseSettings):
    secret: str = Field("dev", alias="CODE_SECRET")
    bind_label: bool = Field(False, alias="CODE_BIND_LABEL")
    lookback_minutes: int = Field(10_080, ge=0, alias="CODE_LOOKBACK_MINUTES")
    lookahead_minutes: int = Field(1_440, ge=0, alias="CODE_LOOKAHEAD_MINUTES")

    model_config = _section_config()

    @field_validator("bind_label", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_flag(value)


class CredentialsConfig(BaseSettings):
    app_id: str = Field("", alias="APP_ID")
    private_key: str = Field("", alias="PRIVATE_KEY")
    audience: str = Field("jitsi", alias="TOKEN_AUDIENCE")
    issuer: str = Field("chat", alias="TOKEN_ISSUER")
    ttl_seconds: int = Field(7200, ge=1, alias="TOKEN_TTL")
    not_before_skew: int = Field(5, ge=0, alias="TOKEN_NBF_SKEW")
    moderator_marker: str = Field("host", alias="MODERATOR_MARKER")

    model_config = _section_config()

    @field_validator("private_key", mode="after")
    @classmethod
    def _expand_newlines(cls, value: str) -> str:
        # keys pasted into a single env line carry literal "\n"
        return value.replace("\\n", "\n")


class AdminConfig(BaseSettings):
    password: str | None = Field(None, alias="ADMIN_PASSWORD")

    model_config = _section_config()


class SecurityConfig(BaseSettings):
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(30, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, gt=0, alias="RL_WINDOW")

    model_config = _section_config()

    @field_validator("enable_rate_limit", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_flag(value)


class ObservabilityConfig(BaseSettings):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")
    service_name: str = Field("roomgate", alias="SERVICE_NAME")

    model_config = _section_config()

    @field_validator("metrics_enabled", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _parse_flag(value)


def _codes_config_factory() -> CodesConfig:
    return CodesConfig()  # type: ignore[call-arg]


def _credentials_config_factory() -> CredentialsConfig:
    return CredentialsConfig()  # type: ignore[call-arg]


def _admin_config_factory() -> AdminConfig:
    return AdminConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _observability_config_factory() -> ObservabilityConfig:
    return ObservabilityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    codes: CodesConfig = Field(default_factory=_codes_config_factory)
    credentials: CredentialsConfig = Field(default_factory=_credentials_config_factory)
    admin: AdminConfig = Field(default_factory=_admin_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    observability: ObservabilityConfig = Field(default_factory=_observability_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        frozen=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_flag(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.codes.secret in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure CODE_SECRET detected in production!\n"
                "   CODE_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.admin.password:
            warnings.append("⚠️  ADMIN_PASSWORD is not set, /admin/check will refuse every request")
        if not self.credentials.private_key:
            warnings.append("⚠️  PRIVATE_KEY is not set, /token will fail")
        if not self.security.enable_rate_limit:
            warnings.append("⚠️  Rate limiting is DISABLED")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print("", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AdminConfig",
    "AppConfig",
    "CodesConfig",
    "CredentialsConfig",
    "ObservabilityConfig",
    "SecurityConfig",
    "load_config",
]
