"""Text progress bars: one redrawn by progress, one redrawn by time."""

from __future__ import annotations

import sys
import time
from enum import Enum
from typing import Callable, TextIO

BARRA = "*" if sys.platform == "win32" else "o"
VACUO = "."
COMPRIMENTO = 45
_COMPRIMENTO_TEMPORAL = 50
_INTERVALO_TEMPORAL = 1.0


class TipoDeProgresso(Enum):
    """Kind of progress bar."""

    Temporal = "temporal"
    Simples = "simples"


def cria_barra(percentual: float, limite: int) -> str:
    """Bar of ``limite`` cells, the first ``percentual`` of them filled."""
    cheios = max(0, min(limite, int(percentual * limite)))
    return BARRA * cheios + VACUO * (limite - cheios)


def _formata(atual: int, total: int, fracao: float, comprimento: int) -> str:
    linha = (
        f"\r{atual:9d}/{total:9d} "
        f"[{cria_barra(fracao, comprimento)}]{fracao * 100.0:5.1f}%"
    )
    if atual == total:
        linha += "\n"
    return linha


def _valida_total(total: int) -> None:
    if total <= 0:
        raise ValueError(f"o total tem de ser positivo: {total}")


class ProgressoSimples:
    """Bar redrawn each time progress advances by at least one cell."""

    def __init__(
        self,
        total: int,
        comprimento: int = COMPRIMENTO,
        saida: TextIO | None = None,
    ) -> None:
        _valida_total(total)
        self.atual = 0
        self.total = total
        self.comprimento = comprimento if comprimento > 1 else COMPRIMENTO
        self.marco = 0.0
        self._saida = saida

    def _escreve(self, linha: str) -> str:
        saida = self._saida if self._saida is not None else sys.stdout
        saida.write(linha)
        saida.flush()
        return linha

    def esgotado(self) -> bool:
        """Whether progress has reached the total."""
        return self.atual >= self.total

    def atualiza(self, novo: int) -> None:
        """Set the current progress."""
        self.atual = novo

    def visualiza(self) -> str | None:
        """Draw the bar if it advanced enough; return what was drawn."""
        percentual = 100.0 * self.atual / self.total
        if percentual >= 100.0:
            return self._escreve(_formata(self.total, self.total, 1.0, self.comprimento))
        fronteira = 100.0 / self.comprimento
        if percentual - self.marco > fronteira:
            self.marco = percentual
            return self._escreve(
                _formata(self.atual, self.total, percentual / 100.0, self.comprimento)
            )
        return None

    def atualiza_e_visualiza(self, novo: int) -> str | None:
        """Set the progress and draw the bar in one call."""
        self.atualiza(novo)
        return self.visualiza()


class ProgressoTemporal:
    """Bar redrawn at most once a second, and once more when it finishes."""

    def __init__(
        self,
        total: int,
        comprimento: int = COMPRIMENTO,
        saida: TextIO | None = None,
        relogio: Callable[[], float] = time.monotonic,
    ) -> None:
        _valida_total(total)
        self.atual = 0
        self.total = total
        self.comprimento = comprimento if comprimento > 1 else _COMPRIMENTO_TEMPORAL
        self._esgotado = False
        self._saida = saida
        self._relogio = relogio
        self.inicio = relogio()

    def _escreve(self, linha: str) -> str:
        saida = self._saida if self._saida is not None else sys.stdout
        saida.write(linha)
        saida.flush()
        return linha

    def esgotado(self) -> bool:
        """Whether the bar has been drawn complete."""
        return self._esgotado

    def atualiza(self, novo: int) -> None:
        """Set the current progress, unless the bar has already finished."""
        if not self._esgotado:
            self.atual = novo

    def visualiza(self) -> str | None:
        """Draw the bar if a second has passed or it is complete."""
        fracao = self.atual / self.total
        if fracao >= 1.0:
            self._esgotado = True
            return self._escreve(_formata(self.total, self.total, fracao, self.comprimento))
        agora = self._relogio()
        if agora - self.inicio >= _INTERVALO_TEMPORAL and not self._esgotado:
            self.inicio = self._relogio()
            return self._escreve(_formata(self.atual, self.total, fracao, self.comprimento))
        return None

    def atualiza_e_visualiza(self, novo: int) -> str | None:
        """Set the progress and draw the bar in one call."""
        self.atualiza(novo)
        return self.visualiza()


def cria_bp(
    tipo: TipoDeProgresso, total: int, comprimento: int = COMPRIMENTO
) -> ProgressoSimples | ProgressoTemporal:
    """Create a progress bar of the given kind."""
    tipo = TipoDeProgresso(tipo)
    if tipo is TipoDeProgresso.Temporal:
        return ProgressoTemporal(total, comprimento)
    return ProgressoSimples(total, comprimento)