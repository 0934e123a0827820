"""Settings base do relay.

Configurações comuns ao processo (ambiente, logs, porta).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, TypeVar

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 8080

NumberT = TypeVar("NumberT", int, float)


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log do processo
        port: Porta HTTP de escuta
        parse_errors: Variáveis de ambiente com valor não numérico
    """

    environment: Environment = "development"
    service_name: str = "tailnet-relay"
    log_level: str = "INFO"
    port: int = DEFAULT_PORT
    parse_errors: tuple[str, ...] = ()

    @property
    def is_strict(self) -> bool:
        """Ambientes onde configuração inválida impede o boot."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = list(self.parse_errors)

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def read_number_env(name: str, default: NumberT, errors: list[str]) -> NumberT:
    """Lê variável numérica do ambiente.

    Vazio equivale a não configurado. Valor não numérico mantém o padrão
    e acrescenta a descrição em `errors`, reportada depois por validate().
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return type(default)(raw)
    except ValueError:
        errors.append(f"{name} não numérico: {raw!r}")
        return default


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    parse_errors: list[str] = []
    port = read_number_env("PORT", DEFAULT_PORT, parse_errors)
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "tailnet-relay"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=port,
        parse_errors=tuple(parse_errors),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
