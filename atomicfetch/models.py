"""Pydantic v2 models for fetch configuration and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from atomicfetch.detector import Codec


class FetchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(default=64 * 1024, gt=0)
    dir_mode: int = Field(default=0o755, ge=0, le=0o7777)
    # Passed straight to requests; None leaves it to the caller's transport.
    timeout: float | tuple[float, float] | None = None


class FetchResult(BaseModel):
    url: str
    destination: Path
    codec: Codec = Codec.IDENTITY
    status_code: int | None = None
    bytes_written: int = 0
    elapsed_seconds: float = 0.0

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
