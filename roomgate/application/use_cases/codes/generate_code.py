# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from roomgate.application.interfaces import CodeMetrics
from roomgate.domain import CodeGenerator, GeneratedCode, MeetingTimeError
from roomgate.domain.access_codes import isoformat_z, parse_meeting_time
from roomgate.shared.errors import InvalidMeetingTimeError
from roomgate.shared.logging import logger


@dataclass(slots=True)
class GenerateCodeInput:
    client_name: str
    meeting_datetime: str


class GenerateCodeUseCase:
    def __init__(self, *, generator: CodeGenerator, metrics: CodeMetrics) -> None:
        self._generator = generator
        self._metrics = metrics

    def execute(self, data: GenerateCodeInput) -> GeneratedCode:
        try:
            meeting_time = parse_meeting_time(data.meeting_datetime)
            generated = self._generator.generate(data.client_name, meeting_time)
        except MeetingTimeError as exc:
            logger.info(f"codes.generate: rejected meeting time {data.meeting_datetime!r}")
            raise InvalidMeetingTimeError(data.meeting_datetime) from exc

        self._metrics.code_generated()
        logger.info(
            f"codes.generate: meeting={isoformat_z(generated.window.meeting_start)} "
            f"encoded={generated.encoded_timestamp}"
        )
        return generated
