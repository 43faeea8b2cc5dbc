# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from roomgate.application.use_cases.credentials.issue_token import (
    IssueTokenInput, IssueTokenUseCase)
from roomgate.interfaces.http.dto.token import (TokenRequestDTO,
                                                TokenResponseDTO)
from roomgate.shared.errors.validation import raise_invalid_input


class TokenController:
    def __init__(self, *, issue_use_case: IssueTokenUseCase) -> None:
        self._issue_use_case = issue_use_case

    def issue(self) -> tuple[Response, int]:
        try:
            dto = TokenRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_invalid_input(exc)

        token = self._issue_use_case.execute(
            IssueTokenInput(name=dto.name, room=dto.room, email=dto.email)
        )
        return jsonify(TokenResponseDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("token", __name__)
        bp.add_url_rule("/token", view_func=self.issue, methods=["POST"])
        return bp
