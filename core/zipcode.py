"""
CEP (Brazilian postal code) validation

A CEP is valid only as exactly 8 ASCII digits; separators such as the dash
in "01001-000" are rejected, not stripped.
"""
import re

CEP_PATTERN = re.compile(r"[0-9]{8}")


def is_valid_cep(cep) -> bool:
    """Return True iff cep is a string of exactly 8 decimal digits"""
    if not isinstance(cep, str):
        return False
    return CEP_PATTERN.fullmatch(cep) is not None


__all__ = ["is_valid_cep", "CEP_PATTERN"]
