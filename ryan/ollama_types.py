"""Data types returned by the Ollama HTTP API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

_FRACTION = re.compile(r"\.(\d+)")


def _parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp, accepting any number of fractional digits."""
    if not value:
        return None
    text = str(value).strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    return datetime.fromisoformat(text)


def _as_int(value: Any) -> int:
    return int(value) if value else 0


def _as_str(value: Any) -> str:
    return str(value) if value is not None else ""


@dataclass
class Details:
    """Descriptive details of a model."""

    parent_model: str = ""
    format: str = ""
    family: str = ""
    families: list[str] = field(default_factory=list)
    parameter_size: str = ""
    quantization_level: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Details":
        data = data or {}
        return cls(
            parent_model=_as_str(data.get("parent_model")),
            format=_as_str(data.get("format")),
            family=_as_str(data.get("family")),
            families=[str(item) for item in data.get("families") or []],
            parameter_size=_as_str(data.get("parameter_size")),
            quantization_level=_as_str(data.get("quantization_level")),
        )


@dataclass
class Model:
    """A model as listed by the tags or ps endpoints."""

    name: str = ""
    model: str = ""
    size: int = 0
    digest: str = ""
    details: Details = field(default_factory=Details)
    expires_at: datetime | None = None
    size_vram: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Model":
        data = data or {}
        return cls(
            name=_as_str(data.get("name")),
            model=_as_str(data.get("model")),
            size=_as_int(data.get("size")),
            digest=_as_str(data.get("digest")),
            details=Details.from_dict(data.get("details")),
            expires_at=_parse_time(data.get("expires_at")),
            size_vram=_as_int(data.get("size_vram")),
        )


@dataclass
class TagsResponse:
    """Models available locally."""

    models: list[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "TagsResponse":
        data = data or {}
        return cls(models=[Model.from_dict(item) for item in data.get("models") or []])


@dataclass
class PsResponse:
    """Models currently loaded in memory."""

    models: list[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PsResponse":
        data = data or {}
        return cls(models=[Model.from_dict(item) for item in data.get("models") or []])


@dataclass
class PullResponse:
    """One progress record from a streaming pull."""

    status: str = ""
    digest: str = ""
    total: int = 0
    completed: int = 0
    error: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PullResponse":
        data = data or {}
        return cls(
            status=_as_str(data.get("status")),
            digest=_as_str(data.get("digest")),
            total=_as_int(data.get("total")),
            completed=_as_int(data.get("completed")),
            error=_as_str(data.get("error")),
        )