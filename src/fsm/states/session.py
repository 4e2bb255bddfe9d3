"""
Estados canônicos do ciclo de vida da sessão WhatsApp Web.

Este módulo define os estados que a sessão pode assumir entre o
lançamento do navegador e o envio de mensagens. Estados são
determinísticos e explícitos; apenas eventos do cliente de sessão
provocam mudança.
"""

from enum import StrEnum


class SessionState(StrEnum):
    """
    Estados da sessão de mensageria.

        - UNPAIRED: Sem sessão válida (início, falha de auth ou desconexão)
        - AWAITING_SCAN: QR code emitido, aguardando leitura no celular
        - AUTHENTICATED: Pareamento aceito, carregando conversas
        - READY: Sessão pronta para envio
    """

    UNPAIRED = "UNPAIRED"
    AWAITING_SCAN = "AWAITING_SCAN"
    AUTHENTICATED = "AUTHENTICATED"
    READY = "READY"

    def __str__(self) -> str:
        return self.value


# Estados em que o envio de mensagens é permitido
SENDABLE_STATES: frozenset[SessionState] = frozenset({SessionState.READY})

# Estado no início do processo
DEFAULT_INITIAL_STATE: SessionState = SessionState.UNPAIRED


def is_ready(state: SessionState) -> bool:
    """Verifica se o estado permite envio de mensagens."""
    return state in SENDABLE_STATES


def is_valid_state(state: SessionState) -> bool:
    """
    Verifica se o valor é um estado válido do enum.

    Args:
        state: Estado a ser verificado

    Returns:
        True se é um SessionState válido
    """
    return isinstance(state, SessionState)
