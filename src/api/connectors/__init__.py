"""Conectores de borda: único ponto de IO externo do relay.

- tailscale/: entrada (assinatura e parse do lote)
- teams/: saída para Microsoft Teams
- discord/: saída para Discord
"""

__all__: list[str] = []
