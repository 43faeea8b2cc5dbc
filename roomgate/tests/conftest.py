from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from flask import Flask

from roomgate.app import create_app
from roomgate.infrastructure.container import Container
from roomgate.shared.config.settings import (AdminConfig, AppConfig,
                                             CodesConfig, CredentialsConfig,
                                             SecurityConfig)

MEETING = datetime(2025, 1, 1, 10, 0, tzinfo=UTC)
# rolling_hash("2025-01-01T10:00S") == -1943436501
MEETING_CODE = "45018760"


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def build_config(**overrides) -> AppConfig:
    sections = {
        "codes": CodesConfig(secret="S"),
        "credentials": CredentialsConfig(app_id="vpaas-magic/abc123"),
        "admin": AdminConfig(password="hunter2-admin"),
        "security": SecurityConfig(enable_rate_limit=False),
    }
    sections.update(overrides)
    return AppConfig(app_env="test", **sections)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 1, 1, 9, 58, tzinfo=UTC))


@pytest.fixture()
def app_factory(clock: FixedClock) -> Callable[..., Flask]:
    def _factory(**overrides) -> Flask:
        config = build_config(**overrides)
        return create_app(container=Container(config, clock=clock))

    return _factory
