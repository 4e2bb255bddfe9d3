"""Seletores e scripts de inspeção do DOM do WhatsApp Web.

O WhatsApp Web não tem API pública para a interface: estes seletores
seguem a marcação observada (data-testid, data-icon, aria-label) e
concentram aqui o que quebra quando a interface muda.
"""

from __future__ import annotations

# Tela de pareamento: o código QR fica no atributo data-ref
QR_CONTAINER = "div[data-ref]"

# Lista de conversas visível = sessão pronta
CHAT_LIST = '#pane-side, [data-testid="chat-list"]'

# Campo de digitação da conversa aberta
COMPOSER = 'footer div[contenteditable="true"][role="textbox"]'

# Popup exibido quando /send?phone= recebe número sem WhatsApp
INVALID_PHONE_POPUP = '[data-testid="popup-contents"], div[role="dialog"] [data-animate-modal-body]'

# Botão de anexar (clipe em versões antigas, "+" nas atuais)
ATTACH_BUTTON = '[data-testid="attach-menu-plus"], [data-icon="plus"], [data-icon="clip"], [data-testid="attachment"]'

# Inputs de arquivo do menu de anexos
MEDIA_FILE_INPUT = 'input[type="file"][accept*="image"]'
DOCUMENT_FILE_INPUT = 'input[type="file"]:not([accept*="image"])'

# Legenda na pré-visualização de mídia
CAPTION_INPUT = '[data-testid="media-caption-input-container"] div[contenteditable="true"], div[aria-label="Add a caption"]'

# Botão de enviar da pré-visualização
SEND_BUTTON = '[data-testid="send"], [data-icon="send"], [aria-label="Send"]'

# Classifica a página: {"phase": "qr" | "loading" | "chats", "code": str | null}
DETECT_PHASE_SCRIPT = """
() => {
  const qr = document.querySelector('div[data-ref]');
  if (qr) {
    return {phase: 'qr', code: qr.getAttribute('data-ref')};
  }
  if (document.querySelector('#pane-side, [data-testid="chat-list"]')) {
    return {phase: 'chats', code: null};
  }
  return {phase: 'loading', code: null};
}
"""

# data-id da última mensagem enviada (ex: true_5511999998888@c.us_3EB0...)
LAST_OUTGOING_ID_SCRIPT = """
() => {
  const rows = document.querySelectorAll('div.message-out');
  if (!rows.length) return null;
  const holder = rows[rows.length - 1].closest('[data-id]');
  return holder ? holder.getAttribute('data-id') : null;
}
"""

# Espera um data-id de saída diferente do anterior
NEW_OUTGOING_ID_SCRIPT = """
(previous) => {
  const rows = document.querySelectorAll('div.message-out');
  if (!rows.length) return null;
  const holder = rows[rows.length - 1].closest('[data-id]');
  const id = holder ? holder.getAttribute('data-id') : null;
  return id && id !== previous ? id : null;
}
"""
