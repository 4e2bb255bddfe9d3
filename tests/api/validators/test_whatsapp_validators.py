"""Testes para api.validators.whatsapp (campos obrigatórios)."""

from __future__ import annotations

import pytest

from api.validators.whatsapp import ValidationError, require_fields


class TestRequireFields:
    """require_fields com None, vazio e presente."""

    def test_all_present_passes(self) -> None:
        require_fields({"phone": "5511", "text": "oi"}, "phone", "text")

    def test_missing_field_lists_all_required_names(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"phone": "5511"}, "phone", "text")

        assert str(exc_info.value) == "phone and text are required"
        assert exc_info.value.missing_fields == ("text",)

    def test_empty_string_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"phone": "", "fileUrl": "https://x/y.pdf"}, "phone", "fileUrl")

        assert exc_info.value.missing_fields == ("phone",)

    def test_none_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"htmlUrl": None}, "htmlUrl")

        assert str(exc_info.value) == "htmlUrl is required"

    def test_three_fields_message(self) -> None:
        with pytest.raises(ValidationError, match="a, b and c are required"):
            require_fields({}, "a", "b", "c")

    def test_whitespace_is_not_blank(self) -> None:
        """Só string vazia conta como ausente; espaços seguem adiante."""
        require_fields({"text": " "}, "text")
