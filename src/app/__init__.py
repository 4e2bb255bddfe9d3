"""App: sessão WhatsApp Web, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (envio de mensagens, geração de PDF)
- infra/: implementações concretas de IO (Playwright, httpx)
- protocols/: contratos/interfaces
- sessions/: coordenador de estado da sessão
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
