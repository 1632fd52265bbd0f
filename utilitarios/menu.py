"""Classification and extraction of typed values from command-line strings."""

from __future__ import annotations

from enum import Enum

from utilitarios.booleano import str_to_bool

_DIGITOS = frozenset("0123456789")
_LOGICOS = frozenset({"false", "true", "verdadeiro", "falso"})


class Tipo(Enum):
    """Kind of value a raw argument string holds."""

    Caractere = "char"
    Decimal = "double"
    Logico = "bool"
    Inteiro = "size_t"
    String = "char*"


def tipo_to_str(tipo: Tipo) -> str:
    """Name of the native type that represents ``tipo``."""
    return Tipo(tipo).value


def _valor_numerico(s: str) -> bool:
    return all(c in _DIGITOS for c in s)


def _valor_decimal(s: str) -> bool:
    indice = s.rfind(".")
    algarismos = sum(1 for c in s if c in _DIGITOS)
    return indice != -1 and algarismos == len(s) - 1 and 0 < indice < len(s) - 1


def identifica_valor(s: str) -> Tipo:
    """Tell which kind of value the string ``s`` represents.

    Only digits make an integer; digits around a single inner dot make a
    decimal; a single character is a character; the lower-case words
    true/false/verdadeiro/falso are logical values; anything else is a string.
    """
    if _valor_decimal(s):
        return Tipo.Decimal
    if _valor_numerico(s):
        return Tipo.Inteiro
    if len(s) == 1:
        return Tipo.Caractere
    if s in _LOGICOS:
        return Tipo.Logico
    return Tipo.String


def _str_to_int(s: str) -> int:
    total = 0
    for c in s:
        total = total * 10 + (ord(c) - ord("0"))
    return total


def extrai_valor(s: str) -> int | float | str | bool:
    """Convert ``s`` to the Python value of the kind ``identifica_valor`` gives."""
    tipo = identifica_valor(s)
    if tipo is Tipo.Inteiro:
        return _str_to_int(s)
    if tipo is Tipo.Decimal:
        return float(s)
    if tipo is Tipo.Caractere:
        return s[0]
    if tipo is Tipo.Logico:
        return str_to_bool(s)
    return s