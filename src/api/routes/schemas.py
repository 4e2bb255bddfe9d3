"""Modelos de request/response da API HTTP.

Campos de request são todos opcionais no nível do schema: a checagem de
obrigatórios acontece no handler, depois da checagem de sessão pronta,
para que 503 tenha precedência sobre 400. Nomes no fio em camelCase.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from api.validators.whatsapp import require_fields


class RelayRequest(BaseModel):
    """Base dos bodies JSON aceitos pela API."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    def require(self, *names: str) -> None:
        """Valida campos obrigatórios pelo nome no fio (ex: `fileUrl`).

        Raises:
            ValidationError: Algum campo ausente ou vazio.
        """
        require_fields(self.model_dump(by_alias=True), *names)


class SendTextRequest(RelayRequest):
    phone: str | None = None
    text: str | None = None


class SendFileRequest(RelayRequest):
    phone: str | None = None
    file_url: str | None = Field(default=None, alias="fileUrl")
    filename: str | None = None
    caption: str | None = None


class SendImageRequest(RelayRequest):
    phone: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    caption: str | None = None


class SendPdfRequest(RelayRequest):
    phone: str | None = None
    html_url: str | None = Field(default=None, alias="htmlUrl")
    filename: str | None = None
    caption: str | None = None


class GeneratePdfRequest(RelayRequest):
    html_url: str | None = Field(default=None, alias="htmlUrl")
    filename: str | None = None


class SendResponse(BaseModel):
    """Confirmação de envio."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message_id: str = Field(alias="messageId")


class StatusResponse(BaseModel):
    """Estado da sessão exposto em /api/status."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ready", "not_ready"]
    qr_code: bool = Field(alias="qrCode")


class ErrorResponse(BaseModel):
    error: str


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """Documenta no OpenAPI os status que respondem `{"error": msg}`."""
    return {code: {"model": ErrorResponse} for code in status_codes}
