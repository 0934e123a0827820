"""Contratos canônicos do relay (evento de entrada e resumo de despacho)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Event(BaseModel):
    """Evento do tailnet decodificado de um lote autenticado.

    Campos ausentes (ou null) assumem o valor zero do tipo; `type` e
    `tailnet` seguem sem validação adicional.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    timestamp: str = ""
    version: int = 0
    type: str = ""
    tailnet: str = ""
    message: str = ""
    data: dict[str, str] = Field(default_factory=dict)

    @field_validator("timestamp", "type", "tailnet", "message", mode="before")
    @classmethod
    def _null_as_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("version", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("data", mode="before")
    @classmethod
    def _null_as_empty_mapping(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: "" if item is None else item for key, item in value.items()}
        return value


EVENT_LIST_ADAPTER: TypeAdapter[list[Event]] = TypeAdapter(list[Event])


@dataclass(slots=True)
class DispatchSummary:
    """Contagem de tentativas de um lote (apenas para logs/métricas)."""

    event_count: int = 0
    delivered: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def attempted(self) -> int:
        return self.delivered + self.failed

    def as_dict(self) -> dict[str, int]:
        return {
            "event_count": self.event_count,
            "attempted": self.attempted,
            "delivered": self.delivered,
            "failed": self.failed,
            "skipped": self.skipped,
        }
