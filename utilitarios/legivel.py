"""Human-readable renderings of byte sizes, large quantities and durations."""

from __future__ import annotations

import math
from datetime import timedelta

MILHAR = 10**3
MILHAO = 10**6
BILHAO = 10**9
TRILHAO = 10**12
QUADRILHAO = 10**15
QUINTILHAO = 10**18

NANOSEG = 1e-9
MICROSEG = 1e-6
MILISEG = 1e-3
MINUTO = 60.0
HORA = 60 * MINUTO
DIA = 24 * HORA
MES = 30 * DIA
ANO = 365 * DIA
DECADA = 10 * ANO
SECULO = 100 * ANO
MILENIO = 1000 * ANO

_KILO = 2**10
_MEGA = 2**20
_GIGA = 2**30
_TERA = 2**40
_PETA = 2**50

_PESOS_VALOR = (
    (QUINTILHAO, "qn"),
    (QUADRILHAO, "qd"),
    (TRILHAO, "tri"),
    (BILHAO, "bi"),
    (MILHAO, "mi"),
    (MILHAR, "mil"),
)

# Above this magnitude a non-negative quantity is printed without a weight.
_LIMITE_SEM_SINAL = 10**21


def elimina_digitos_insignificantes(valor: float, peso: str) -> str:
    """Format ``valor`` followed by ``peso``, dropping fractional digits
    that do not help reading."""
    fracao = abs(math.trunc(valor) - valor)
    if 0.1 <= fracao < 0.95:
        return f"{valor:.1f} {peso}"
    if 0.95 <= fracao < 0.99999:
        arredondado = math.floor(abs(valor) + 0.5)
        return f"{math.copysign(arredondado, valor):.0f} {peso}"
    return f"{valor:.0f} {peso}"


def tamanho_legivel(nbytes: int) -> str:
    """Render a byte count using binary multiples (KiB, MiB, GiB, TiB)."""
    if _KILO <= nbytes < _MEGA:
        peso, valor = "KiB", nbytes / _KILO
    elif _MEGA <= nbytes < _GIGA:
        peso, valor = "MiB", nbytes / _MEGA
    elif _GIGA <= nbytes < _TERA:
        peso, valor = "GiB", nbytes / _GIGA
    elif _TERA <= nbytes < _PETA:
        peso, valor = "TiB", nbytes / _TERA
    else:
        peso, valor = "B's", float(nbytes)
    return elimina_digitos_insignificantes(valor, peso)


def _escala(unidades: int) -> tuple[int, str]:
    magnitude = abs(unidades)
    if unidades >= 0 and magnitude >= _LIMITE_SEM_SINAL:
        return 1, ""
    for potencia, peso in _PESOS_VALOR:
        if magnitude >= potencia:
            return potencia, peso
    return 1, ""


def valor_legivel(valor: int | float) -> str:
    """Render a quantity with Portuguese short-scale weights (mil, mi, bi...).

    Floats are truncated toward zero before formatting.
    """
    if isinstance(valor, float):
        valor = int(valor)
    elif not isinstance(valor, int):
        raise TypeError(f"tipo não suportado: {type(valor).__name__}")
    potencia, peso = _escala(valor)
    return elimina_digitos_insignificantes(valor / potencia, peso)


def _para_segundos(tempo: float | int | timedelta) -> float:
    if isinstance(tempo, timedelta):
        return tempo.total_seconds()
    if isinstance(tempo, (int, float)):
        return float(tempo)
    raise TypeError(f"tipo não suportado: {type(tempo).__name__}")


def tempo_legivel(tempo: float | int | timedelta) -> str:
    """Render a duration (seconds or ``timedelta``) in the largest fitting unit."""
    s = _para_segundos(tempo)
    if s >= 1.0:
        if s < MINUTO:
            decimal, peso = s, "seg"
        elif s < HORA:
            decimal, peso = s / MINUTO, "min"
        elif s < DIA:
            decimal, peso = s / HORA, "\bh"
        elif s < MES:
            decimal, peso = s / DIA, "dias"
        elif s < ANO:
            decimal, peso = s / MES, "meses"
        elif s < DECADA:
            decimal, peso = s / ANO, "anos"
        elif s < SECULO:
            decimal, peso = s / DECADA, "déc"
        elif s < MILENIO:
            decimal, peso = s / SECULO, "séc"
        else:
            decimal, peso = s / MILENIO, "milênios"
    elif s >= MILISEG:
        decimal, peso = s * 1.0e3, "ms"
    elif s >= MICROSEG:
        decimal, peso = s * 1.0e6, "\u03bcs"
    elif s >= NANOSEG:
        decimal, peso = s * 1.0e9, "ns"
    else:
        decimal, peso = 0.0, "seg"
    return elimina_digitos_insignificantes(decimal, peso)