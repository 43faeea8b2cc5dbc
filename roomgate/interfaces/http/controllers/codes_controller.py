# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from roomgate.application.use_cases.codes.generate_code import (
    GenerateCodeInput, GenerateCodeUseCase)
from roomgate.application.use_cases.codes.validate_code import \
    ValidateCodeUseCase
from roomgate.interfaces.http.dto.codes import (GenerateCodeRequestDTO,
                                                GenerateCodeResponseDTO,
                                                ValidateCodeRequestDTO,
                                                ValidateCodeResponseDTO)
from roomgate.shared.errors.validation import raise_invalid_input
from roomgate.shared.middleware.rate_limit import rate_limit


class CodesController:
    def __init__(
        self,
        *,
        generate_use_case: GenerateCodeUseCase,
        validate_use_case: ValidateCodeUseCase,
    ) -> None:
        self._generate_use_case = generate_use_case
        self._validate_use_case = validate_use_case

    def generate(self) -> tuple[Response, int]:
        try:
            dto = GenerateCodeRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_invalid_input(exc)

        generated = self._generate_use_case.execute(
            GenerateCodeInput(
                client_name=dto.client_name,
                meeting_datetime=dto.meeting_datetime,
            )
        )
        payload = GenerateCodeResponseDTO.from_generated(generated).model_dump(by_alias=True)
        return jsonify(payload), 200

    @rate_limit
    def validate(self) -> tuple[Response, int]:
        try:
            dto = ValidateCodeRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_invalid_input(exc)

        result = self._validate_use_case.execute(dto.code, dto.client_name or "")
        payload = ValidateCodeResponseDTO.from_result(result).model_dump(
            by_alias=True, exclude_none=True
        )
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("codes", __name__)
        bp.add_url_rule("/generate-code", view_func=self.generate, methods=["POST"])
        bp.add_url_rule("/validate-code", view_func=self.validate, methods=["POST"])
        return bp
