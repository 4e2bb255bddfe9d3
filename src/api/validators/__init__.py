"""Validators: validação de requisições antes de acionar motores externos.

Estrutura:
- whatsapp/: campos obrigatórios dos endpoints de envio
"""
