# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from roomgate.application.use_cases.admin.check_admin_password import \
    CheckAdminPasswordUseCase
from roomgate.interfaces.http.dto.admin import (AdminCheckRequestDTO,
                                                AdminCheckResponseDTO)
from roomgate.shared.errors.validation import raise_invalid_input
from roomgate.shared.middleware.rate_limit import rate_limit


class AdminController:
    def __init__(self, *, check_use_case: CheckAdminPasswordUseCase) -> None:
        self._check_use_case = check_use_case

    @rate_limit
    def check(self) -> tuple[Response, int]:
        try:
            dto = AdminCheckRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_invalid_input(exc)

        self._check_use_case.execute(dto.password)
        return jsonify(AdminCheckResponseDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/admin")
        bp.add_url_rule("/check", view_func=self.check, methods=["POST"])
        return bp
