"""App: orquestração, wiring e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (config, logging, sinks)
- services/: dispatcher de eventos para os sinks
- infra/: implementações concretas de IO (HTTP)
- protocols/: contratos (Event, sink, cliente HTTP)
- observability/: correlation_id e métricas via logs

Padrão: app orquestra; api adapta; config configura; utils apoia.
"""
