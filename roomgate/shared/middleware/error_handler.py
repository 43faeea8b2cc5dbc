# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from roomgate.shared.config import AppConfig
from roomgate.shared.errors import register_error_handler


def configure_error_handling(app: Flask, config: AppConfig | None = None) -> None:
    register_error_handler(app, debug_mode=bool(config and config.debug_logging))
