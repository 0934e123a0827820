"""API: camada de borda do relay.

Responsabilidades:
- Receber o webhook de eventos do tailnet
- Validar assinatura e decodificar o lote
- Construir payloads para Teams e Discord
- Executar as chamadas HTTP de saída

Subpastas:
- connectors/: entrada (tailscale) e saída (teams, discord)
- payload_builders/: tradução do evento canônico para cada sink
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração do fan-out (fica em app/services).
"""
