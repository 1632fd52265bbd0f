"""Time units, short pauses and conversions between time magnitudes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum

_LIMITE_PAUSA = 1000
_LIMITE_REDUCAO = 1000
_MASCARA_64 = 2**64


class TempoTipo(Enum):
    """Time magnitudes; each value is the number of nanoseconds in one unit."""

    Hora = 3_600 * 10**9
    Minuto = 60 * 10**9
    Segundo = 10**9
    Miliseg = 10**6
    Microseg = 10**3
    Nanoseg = 1

    @property
    def segundos(self) -> float:
        """Length of one unit, in seconds."""
        return self.value / 1e9


@dataclass(frozen=True)
class Duracao:
    """A whole number ``n`` of units of magnitude ``t``."""

    t: TempoTipo
    n: int


# Magnitudes a duration may be reduced to, smallest first.
_ESCADA = (TempoTipo.Nanoseg, TempoTipo.Microseg, TempoTipo.Miliseg, TempoTipo.Segundo)

_NOMES = {
    TempoTipo.Segundo: "segundos",
    TempoTipo.Minuto: "minutos",
    TempoTipo.Hora: "horas",
    TempoTipo.Miliseg: "milisegundos",
    TempoTipo.Microseg: "microsegundos",
    TempoTipo.Nanoseg: "nanosegundos",
}

_SUFIXOS = {
    TempoTipo.Nanoseg: "ns",
    TempoTipo.Microseg: "\u03bcs",
    TempoTipo.Miliseg: "ms",
    TempoTipo.Segundo: "s",
    TempoTipo.Minuto: "min",
    TempoTipo.Hora: "h",
}


def breve_pausa(tipo: TempoTipo, qtd: int) -> None:
    """Pause the calling thread for ``qtd`` units of ``tipo`` (at most 1000)."""
    if qtd > _LIMITE_PAUSA:
        raise ValueError(f"não pode passar para o tipo: {qtd} > {_LIMITE_PAUSA}")
    if qtd < 0:
        raise ValueError(f"quantidade negativa: {qtd}")
    time.sleep(qtd * TempoTipo(tipo).segundos)


def potencia(base: int, expoente: int) -> int:
    """``base`` raised to ``expoente`` as an unsigned 64-bit integer."""
    if base < 0 or expoente < 0:
        raise ValueError("base e expoente têm de ser não negativos")
    return pow(base, expoente, _MASCARA_64)


def transforma_para_nanoseg(tipo: TempoTipo, n: int) -> Duracao:
    """Express ``n`` units of ``tipo`` in nanoseconds."""
    if n < 0:
        raise ValueError(f"unidades negativas: {n}")
    return Duracao(TempoTipo.Nanoseg, n * TempoTipo(tipo).value)


def reducao_de_grandeza(duracao: Duracao) -> Duracao:
    """Move a nanosecond duration up to the magnitude where it fits in 1000 units.

    Each step divides by a thousand, discarding the remainder.
    """
    unidades = duracao.n
    posicao = 0
    while unidades > _LIMITE_REDUCAO:
        unidades //= 1000
        posicao += 1
        if posicao >= len(_ESCADA):
            raise ValueError(f"duração grande demais para reduzir: {duracao.n} ns")
    return Duracao(_ESCADA[posicao], unidades)


def centesima_unidade(tipo: TempoTipo, n: int) -> Duracao:
    """One hundredth of ``n`` units of ``tipo``, in a readable magnitude."""
    novo = transforma_para_nanoseg(tipo, n)
    return reducao_de_grandeza(Duracao(novo.t, novo.n // 100))


def tempotipo_str(tipo: TempoTipo) -> str:
    """Portuguese plural name of the magnitude."""
    return _NOMES.get(tipo, "desconhecido")


def sufixo_do_tempotipo(tipo: TempoTipo) -> str:
    """Short suffix of the magnitude (``ns``, ``ms``, ``s``...)."""
    try:
        return _SUFIXOS[tipo]
    except KeyError:
        raise ValueError(f"'TempoTipo' inválido: {tipo!r}") from None