"""A stopwatch that records marks relative to its start."""

from __future__ import annotations

import threading
import time
from typing import Callable

from utilitarios.legivel import tempo_legivel

_UMA_HORA = 3600.0

_trava = threading.Lock()
_instancias = 0


def instancias_cronometro() -> int:
    """Number of stopwatches currently open."""
    return _instancias


class Cronometro:
    """Stopwatch that records marks; usable as a context manager."""

    def __init__(self, relogio: Callable[[], float] = time.monotonic) -> None:
        global _instancias
        self._relogio = relogio
        self.inicio = relogio()
        self._marcos: list[float] = []
        self._fechado = False
        with _trava:
            _instancias += 1

    @property
    def marcos(self) -> tuple[float, ...]:
        """Clock readings of the marks made so far."""
        return tuple(self._marcos)

    def __len__(self) -> int:
        return len(self._marcos)

    def _decorrido(self) -> float:
        return self._relogio() - self.inicio

    def marca(self) -> float:
        """Record a mark and return the time elapsed since the start."""
        self._marcos.append(self._relogio())
        return self._decorrido()

    def variacao(self) -> float:
        """Time elapsed since the last mark."""
        if not self._marcos:
            raise RuntimeError("nenhum registro foi marcado.")
        return self._relogio() - self._marcos[-1]

    def visualiza_marcos(self) -> None:
        """Print the marks made within the first hour, newest first."""
        qtd = len(self._marcos)
        linhas = []
        for total in range(qtd, 0, -1):
            t = self._marcos[total - 1] - self.inicio
            if 0 < t < _UMA_HORA:
                ordem = qtd - total + 1
                minutos, segundos = divmod(int(t), 60)
                linhas.append(f"{ordem:3d}º. [{minutos:02d}:{segundos:02d}]")
        linhas.append("\b\b")
        print("\n".join(linhas))

    def fecha(self) -> None:
        """Release the stopwatch; closing twice has no further effect."""
        global _instancias
        if self._fechado:
            return
        self._fechado = True
        with _trava:
            _instancias -= 1

    def __enter__(self) -> Cronometro:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.fecha()

    def __str__(self) -> str:
        return (
            f"Cronômetro({_instancias}) "
            f"[{tempo_legivel(self._decorrido())} | {len(self._marcos):3d}]"
        )