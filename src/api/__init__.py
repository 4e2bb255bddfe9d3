"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests de envio e consulta de sessão
- Validar campos obrigatórios
- Normalizar telefones para identificadores do protocolo

Subpastas:
- normalizers/: conversão de entradas externas → formatos internos
- validators/: validação de campos obrigatórios
- routes/: endpoints HTTP (sessão, envio, PDF, health)

NÃO PODE conter: FSM, regras de sessão, automação do navegador.
"""
