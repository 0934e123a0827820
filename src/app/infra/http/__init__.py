"""Infra HTTP compartilhada pelos conectores de saída."""

from .client import HttpClient, HttpClientConfig, HttpError

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
]
