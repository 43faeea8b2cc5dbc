# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac

from roomgate.shared.errors import AdminAuthenticationError, AdminNotConfiguredError
from roomgate.shared.logging import logger


class CheckAdminPasswordUseCase:
    def __init__(self, *, admin_password: str | None) -> None:
        self._admin_password = admin_password

    def execute(self, password: str) -> None:
        if not self._admin_password:
            logger.warning("admin.check: no admin password configured")
            raise AdminNotConfiguredError()

        if not hmac.compare_digest(password.encode(), self._admin_password.encode()):
            logger.warning("admin.check: rejected")
            raise AdminAuthenticationError()

        logger.info("admin.check: ok")
