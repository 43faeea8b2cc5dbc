# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jwt

from roomgate.shared.errors import TokenSigningError
from roomgate.shared.logging import logger


class JwtTokenSigner:
    """RS256 signer; the key id header carries the full application id."""

    algorithm = "RS256"

    def __init__(self, *, private_key: str, key_id: str) -> None:
        self._private_key = private_key
        self._key_id = key_id

    def sign(self, claims: Mapping[str, Any]) -> str:
        if not self._private_key:
            raise TokenSigningError("private key is not configured")

        headers = {"kid": self._key_id, "typ": "JWT", "alg": self.algorithm}
        try:
            return jwt.encode(
                dict(claims),
                self._private_key,
                algorithm=self.algorithm,
                headers=headers,
            )
        except (jwt.PyJWTError, ValueError, TypeError) as exc:
            logger.error(f"token.sign: {type(exc).__name__}: {exc}")
            raise TokenSigningError(str(exc)) from exc


__all__ = ["JwtTokenSigner"]
