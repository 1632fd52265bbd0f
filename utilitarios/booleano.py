"""Conversions between logical values and their textual forms."""

from __future__ import annotations

from typing import Any

_VERDADEIROS = frozenset({"v", "true", "t", "verdadeiro"})
_FALSOS = frozenset({"f", "false", "falso"})

_TEXTO_LOGICO = {True: "true", False: "false"}
_TEXTO_REFERENCIA = {True: "válido", False: "none"}


def str_to_bool(s: str) -> bool:
    """Parse a truth value written in Portuguese or English, any case."""
    minuscula = s.lower()
    if minuscula in _VERDADEIROS:
        return True
    if minuscula in _FALSOS:
        return False
    raise ValueError(f"a string não é válida: {s!r}")


def bool_to_str(valor: Any) -> str:
    """Return ``"true"`` or ``"false"`` according to the truthiness of ``valor``."""
    logico = bool(valor)
    return _TEXTO_LOGICO[logico]


def null_to_str(valor: Any) -> str:
    """Return ``"none"`` for a missing or falsy reference, ``"válido"`` otherwise."""
    presente = valor is not None and bool(valor)
    return _TEXTO_REFERENCIA[presente]