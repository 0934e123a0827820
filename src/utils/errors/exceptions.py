"""Exceções de domínio para falhas isoladas por sink."""

from __future__ import annotations


class SinkError(RuntimeError):
    """Base para falhas de um par (evento, sink).

    Nunca propagadas ao chamador HTTP: o dispatcher registra e segue.
    """

    def __init__(self, sink: str, reason: str) -> None:
        super().__init__(f"{sink}: {reason}")
        self.sink = sink
        self.reason = reason


class SinkFormatError(SinkError):
    """Falha ao traduzir o evento para o formato do sink."""


class SinkDeliveryError(SinkError):
    """Falha de entrega (rede, timeout, status não-2xx)."""

    def __init__(self, sink: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(sink, reason)
        self.status_code = status_code
