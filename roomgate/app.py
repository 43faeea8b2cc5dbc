# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os

from flask import Flask

from roomgate.infrastructure.container import Container
from roomgate.shared.config import AppConfig, load_config
from roomgate.shared.logging import logger, setup_logging
from roomgate.shared.middleware.error_handler import configure_error_handling
from roomgate.shared.middleware.rate_limit import configure_rate_limit
from roomgate.shared.middleware.request_logger import configure_request_logging


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    config = config or (container.config if container else load_config())
    container = container or Container(config)

    setup_logging(level="DEBUG" if config.debug_logging else config.log_level, log_file=config.log_file)

    app = Flask(__name__)
    configure_error_handling(app, config)
    configure_request_logging(app, config)
    configure_rate_limit(app, config)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.codes_controller.as_blueprint())
    app.register_blueprint(container.token_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())

    logger.info(
        f"Flask app initialized env={config.app_env} "
        f"label_binding={config.codes.bind_label} "
        f"lookback={config.codes.lookback_minutes}m lookahead={config.codes.lookahead_minutes}m"
    )
    return app


def main() -> None:
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", "3000")))


if __name__ == "__main__":
    main()
