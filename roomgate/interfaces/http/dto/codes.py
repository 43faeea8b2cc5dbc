from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from roomgate.domain import GeneratedCode, ValidationResult
from roomgate.domain.access_codes import isoformat_z


class GenerateCodeRequestDTO(BaseModel):
    client_name: str = Field(alias="clientName", min_length=1, max_length=256)
    meeting_datetime: str = Field(alias="meetingDateTime", min_length=1, max_length=128)

    model_config = ConfigDict(validate_by_name=True, str_strip_whitespace=True)


class GenerateCodeResponseDTO(BaseModel):
    code: str
    window_start: str = Field(serialization_alias="windowStart")
    window_end: str = Field(serialization_alias="windowEnd")
    meeting_start: str = Field(serialization_alias="meetingStart")
    encoded_timestamp: str = Field(serialization_alias="encodedTimestamp")

    @classmethod
    def from_generated(cls, generated: GeneratedCode) -> GenerateCodeResponseDTO:
        window = generated.window
        return cls(
            code=generated.code.value,
            window_start=isoformat_z(window.start),
            window_end=isoformat_z(window.end),
            meeting_start=isoformat_z(window.meeting_start),
            encoded_timestamp=generated.encoded_timestamp,
        )


class ValidateCodeRequestDTO(BaseModel):
    # numeric JSON codes are accepted and checked as text
    code: str = Field(min_length=1)
    client_name: str | None = Field(None, alias="clientName", max_length=256)

    model_config = ConfigDict(
        validate_by_name=True,
        coerce_numbers_to_str=True,
    )


class ValidateCodeResponseDTO(BaseModel):
    valid: bool
    meeting_start: str | None = Field(None, serialization_alias="meetingStart")
    window_end: str | None = Field(None, serialization_alias="windowEnd")
    reason: str | None = None

    @classmethod
    def from_result(cls, result: ValidationResult) -> ValidateCodeResponseDTO:
        return cls(
            valid=result.valid,
            meeting_start=isoformat_z(result.meeting_start) if result.meeting_start else None,
            window_end=isoformat_z(result.window_end) if result.window_end else None,
            reason=str(result.reason) if result.reason else None,
        )
