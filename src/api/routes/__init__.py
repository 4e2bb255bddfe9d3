"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (sessão, envio, PDF, health)
- Parsing do body JSON e checagem de campos obrigatórios
- Delegação para use_cases
- Respostas HTTP apropriadas (erros via exception handlers)

Estrutura:
- routes/whatsapp/: estado da sessão e envio de mensagens
- routes/pdf/: geração de PDF avulsa
- routes/health/: liveness probe

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: mapeamento exceção → resposta `{"error": msg}`
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
