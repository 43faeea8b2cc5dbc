# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)


class InvalidInputError(AppError):
    def __init__(
        self,
        code: str = "invalid_input",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
        )


class InvalidMeetingTimeError(InvalidInputError):
    def __init__(self, raw: str) -> None:
        super().__init__(
            code="invalid_meeting_datetime",
            context={"meetingDateTime": raw},
        )


class AdminAuthenticationError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="admin_authentication_required",
            status=HTTPStatus.UNAUTHORIZED,
        )


class AdminNotConfiguredError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="admin_not_configured",
            status=HTTPStatus.SERVICE_UNAVAILABLE,
        )


class TokenSigningError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__(
            code="token_signing_failed",
            context={"reason": reason},
        )
