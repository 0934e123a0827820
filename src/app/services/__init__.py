"""Serviços de aplicação (orquestração sem IO direto)."""

from app.services.dispatcher import EventDispatcher, dispatch

__all__ = ["EventDispatcher", "dispatch"]
