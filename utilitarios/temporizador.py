"""A countdown timer whose progress is advanced by a background thread."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from utilitarios.tempo import TempoTipo, centesima_unidade, sufixo_do_tempotipo

_LIMITE_UNIDADES = 1000
_LIMITE_INSTANCIAS = 0xFF
_PASSOS = 100

_trava_global = threading.Lock()
_instancias = 0


def instancias_temporizador() -> int:
    """Number of timers currently open."""
    return _instancias


@dataclass
class _Execucao:
    parar: threading.Event = field(default_factory=threading.Event)
    fim: threading.Event = field(default_factory=threading.Event)
    fio: threading.Thread | None = None


class Temporizador:
    """Countdown of ``n`` units of ``tipo``; usable as a context manager.

    The countdown runs in a background thread in a hundred equal steps, so
    its percentage can be followed while it runs.
    """

    def __init__(self, tipo: TempoTipo, n: int) -> None:
        global _instancias
        tipo = TempoTipo(tipo)
        if not 0 <= n < _LIMITE_UNIDADES:
            raise ValueError(
                "não é possível criar com tantas unidades para tal grandeza "
                f"de tempo: {n}"
            )
        with _trava_global:
            if _instancias >= _LIMITE_INSTANCIAS:
                raise RuntimeError("limite de temporizadores na execução atingido.")
            _instancias += 1
        self.ordem = tipo
        self.unidades = n
        self.reutilizacoes = 0
        self._passo = centesima_unidade(tipo, n)
        self._trava = threading.Lock()
        self._percentual = 0
        self._esgotado = False
        self._fechado = False
        self._execucao = self._dispara()

    def _dispara(self) -> _Execucao:
        execucao = _Execucao()
        execucao.fio = threading.Thread(
            target=self._corre, args=(execucao,), daemon=True
        )
        execucao.fio.start()
        return execucao

    def _corre(self, execucao: _Execucao) -> None:
        pausa = self._passo.n * self._passo.t.segundos
        for _ in range(_PASSOS):
            if execucao.parar.is_set():
                return
            with self._trava:
                self._percentual += 1
            if execucao.parar.wait(pausa):
                return
        with self._trava:
            self._esgotado = True
        execucao.fim.set()

    def _interrompe(self) -> None:
        self._execucao.parar.set()
        fio = self._execucao.fio
        if fio is not None and fio is not threading.current_thread():
            fio.join()

    def esgotado(self) -> bool:
        """Whether the countdown has finished."""
        with self._trava:
            return self._esgotado

    def percentual(self) -> float:
        """Fraction of the countdown already elapsed, from 0.0 to 1.0."""
        with self._trava:
            return self._percentual / 100.0

    def aguarda(self, timeout: float | None = None) -> bool:
        """Block until the countdown finishes; return whether it did."""
        return self._execucao.fim.wait(timeout)

    def recomecar(self) -> None:
        """Restart the countdown from zero, counting one more reuse."""
        if self._fechado:
            raise RuntimeError("o temporizador já foi fechado.")
        self._interrompe()
        with self._trava:
            self.reutilizacoes += 1
            self._esgotado = False
            self._percentual = 0
        self._execucao = self._dispara()

    def fecha(self) -> None:
        """Stop the countdown and release the timer; idempotent."""
        global _instancias
        if self._fechado:
            return
        self._fechado = True
        self._interrompe()
        with _trava_global:
            _instancias -= 1

    def __enter__(self) -> Temporizador:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.fecha()

    def __str__(self) -> str:
        with self._trava:
            estado = "off" if self._esgotado else "on"
            p = self._percentual
        limite = f"{self.unidades}{sufixo_do_tempotipo(self.ordem)}"
        return f"Timer[{limite} | {estado} |{p:3d}%]"