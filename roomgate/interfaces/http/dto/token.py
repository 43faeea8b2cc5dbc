from __future__ import annotations

from pydantic import BaseModel, Field


class TokenRequestDTO(BaseModel):
    name: str | None = Field(None, max_length=128)
    room: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=256)


class TokenResponseDTO(BaseModel):
    token: str
