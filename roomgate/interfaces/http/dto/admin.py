from __future__ import annotations

from pydantic import BaseModel, Field


class AdminCheckRequestDTO(BaseModel):
    password: str = Field(min_length=1, max_length=256)


class AdminCheckResponseDTO(BaseModel):
    ok: bool = True
