# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Claims for the meeting room's signed session credential."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Any

from roomgate.application.interfaces import Clock, TokenSigner
from roomgate.shared.config.settings import CredentialsConfig
from roomgate.shared.logging import logger

_DEFAULT_NAME = "Guest"
_WILDCARD_ROOM = "*"


@dataclass(slots=True)
class IssueTokenInput:
    name: str | None = None
    room: str | None = None
    email: str | None = None


def is_moderator(name: str | None, marker: str) -> bool:
    if not name or not marker:
        return False
    return marker.lower() in name.lower()


class IssueTokenUseCase:
    def __init__(
        self,
        *,
        signer: TokenSigner,
        config: CredentialsConfig,
        clock: Clock,
    ) -> None:
        self._signer = signer
        self._config = config
        self._clock = clock

    def build_claims(self, data: IssueTokenInput) -> dict[str, Any]:
        now = int(self._clock().timestamp())
        moderator = is_moderator(data.name, self._config.moderator_marker)
        return {
            "aud": self._config.audience,
            "iss": self._config.issuer,
            "iat": now,
            "exp": now + self._config.ttl_seconds,
            "nbf": now - self._config.not_before_skew,
            "sub": self._config.app_id.split("/")[0],
            "context": {
                "features": {
                    "livestreaming": moderator,
                    "outbound-call": True,
                    "sip-outbound-call": False,
                    "transcription": True,
                    "recording": moderator,
                },
                "user": {
                    "hidden-from-recorder": False,
                    "moderator": moderator,
                    "name": data.name or _DEFAULT_NAME,
                    "id": f"auth0|{secrets.token_hex(12)}",
                    "avatar": "",
                    "email": data.email or "",
                },
            },
            "room": data.room or _WILDCARD_ROOM,
        }

    def execute(self, data: IssueTokenInput) -> str:
        claims = self.build_claims(data)
        token = self._signer.sign(claims)
        logger.info(
            f"token.issue: ok room={claims['room']} "
            f"moderator={claims['context']['user']['moderator']}"
        )
        return token
