"""Payload builders por sink: tradução do Event canônico.

Estrutura:
- teams/: MessageCard com Adaptive Card
- discord/: {thread_name, content} com truncamento em 2000 caracteres

Builders são puros: sem IO e sem estado entre chamadas.
"""

__all__: list[str] = []
