from __future__ import annotations

import re

from granjafacil.domain.errors import ValidationError

_NON_DIGITS = re.compile(r"\D")


def normalize_cnpj(value: str | None) -> str | None:
    """Strip punctuation from a CNPJ; it must then have 14 digits."""
    if value is None or not value.strip():
        return None
    digits = _NON_DIGITS.sub("", value)
    if len(digits) != 14:
        raise ValidationError("CNPJ must have 14 digits", details={"cnpj": value})
    return digits


def validate_names(name: str, contact: str) -> None:
    if len(name.strip()) < 3:
        raise ValidationError("Supplier name must have at least 3 characters")
    if len(contact.strip()) < 2:
        raise ValidationError("Contact must have at least 2 characters")
