"""Use cases específicos de WhatsApp."""

from .send_message import DEFAULT_FILENAME, SendMessageUseCase

__all__ = [
    "DEFAULT_FILENAME",
    "SendMessageUseCase",
]
