"""A small runner that executes test routines under printed headers."""

from __future__ import annotations

import shutil
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

from utilitarios.cronometro import Cronometro
from utilitarios.terminal import obtem_dimensao

Rotina = Callable[[], Any]

SEM_MENSAGEM = ""
SEM_NOME = SEM_MENSAGEM

_NOME_GENERICO = "teste"
_MARGEM = 5
_LARGURA_SEPARADOR = 57

_testes_anonimos = 0
_contagem_de_testes = 0
_usos_debug = 0


@dataclass(frozen=True)
class TesteConfig:
    """A test routine, its display name and whether it is enabled."""

    nome: str
    rotina: Rotina
    ativado: bool = True

    def __str__(self) -> str:
        recuo = "\n\t\b\b\b"
        estado = "true" if self.ativado else "false"
        return (
            f"TesteConfig {{{recuo}Nome: '{self.nome}'{recuo}"
            f"Função: {self.rotina!r}{recuo}Estado: {estado}\n}}"
        )


@dataclass(frozen=True)
class _Resumo:
    habilitados: int
    desabilitados: int
    decorrido: float
    executados: tuple[str, ...]


def unit(rotina: Rotina, ativado: bool) -> TesteConfig:
    """Wrap ``rotina`` in a configuration named after the function itself."""
    nome = getattr(rotina, "__name__", _NOME_GENERICO)
    return TesteConfig(nome=nome, rotina=rotina, ativado=bool(ativado))


def debug_aqui() -> int:
    """Print a numbered marker of where execution got to; return its number."""
    global _usos_debug
    _usos_debug += 1
    print(f"\no erro está bem ... ... ...aqui!({_usos_debug})")
    return _usos_debug


def _largura_terminal() -> int:
    try:
        return obtem_dimensao().colunas
    except (RuntimeError, OSError):
        return shutil.get_terminal_size().columns


def _nome_do_teste(nome: str) -> None:
    """Print a dashed separator carrying ``nome`` near its left end."""
    largura = max(_largura_terminal() - 3, 1)
    tracos = "-" * max(largura - 1, 0)
    barra = tracos[:_MARGEM] + " " + nome + " " + tracos[_MARGEM + len(nome) + 2 :]
    print(f"\n\n{barra}\n")


def _nome_anonimo() -> str:
    global _testes_anonimos
    _testes_anonimos += 1
    return f"{_testes_anonimos}º teste anônimo"


def _pares(args: Sequence[Any]) -> Iterable[tuple[Rotina, bool]]:
    if len(args) % 2:
        raise ValueError("os argumentos têm de vir em pares (rotina, ativado)")
    iterador = iter(args)
    for rotina, ativado in zip(iterador, iterador):
        if not callable(rotina):
            raise TypeError(f"rotina não chamável: {rotina!r}")
        yield rotina, bool(ativado)


def executa_tst(descricao: str, rotina: Rotina, acionado: bool) -> bool:
    """Print a header for ``rotina`` and run it if ``acionado``.

    An empty description gets an anonymous numbered name. Returns whether
    the routine was run.
    """
    _nome_do_teste(descricao if descricao else _nome_anonimo())
    if acionado:
        rotina()
        print()
        return True
    print("DESATIVADO TEMPORIAMENTE!")
    return False


def executa_testes(*args: Any) -> int:
    """Run anonymous tests given as pairs ``rotina, ativado``.

    Returns how many were enabled and run.
    """
    pares = list(_pares(args))
    habilitados = 0
    with Cronometro() as medicao:
        for rotina, ativado in pares:
            if ativado:
                _nome_do_teste(_nome_anonimo())
                rotina()
                print()
                medicao.marca()
                habilitados += 1
    print(f"há {len(pares) - habilitados} testes desativados.")
    return habilitados


def _nome_do_executavel() -> str:
    nome = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    return nome or Path(sys.executable).name


def _executa_tc(teste: TesteConfig) -> None:
    global _contagem_de_testes
    _contagem_de_testes += 1
    _nome_do_teste(f"{_nome_do_executavel()}::{teste.nome}[{_contagem_de_testes}º]")
    teste.rotina()


def execucao_serial_de_tc(
    testes: Sequence[TesteConfig], execucao_do_suite: bool
) -> _Resumo:
    """Run the enabled tests in order, unless the whole suite is switched off.

    Prints a summary line with counts and elapsed time, and returns it.
    """
    for teste in testes:
        if not isinstance(teste, TesteConfig):
            raise TypeError(f"esperado TesteConfig, recebido {teste!r}")
    habilitados = sum(1 for t in testes if t.ativado)
    executados: list[str] = []

    inicio = time.perf_counter()
    if execucao_do_suite:
        for teste in testes:
            if teste.ativado:
                _executa_tc(teste)
                executados.append(teste.nome)
    decorrido = time.perf_counter() - inicio

    desabilitados = len(testes) - habilitados
    mensagem = "execuções finalizadas" if execucao_do_suite else "nada executado"
    print("\n" + "-" * (_LARGURA_SEPARADOR + 1))
    print(
        f"Testes: {habilitados} on | {desabilitados} off; "
        f"Levou: {decorrido:0.4f}seg; Final: '{mensagem}'\n"
    )
    return _Resumo(habilitados, desabilitados, decorrido, tuple(executados))


def executa_testes_a(execucao_do_suite: bool, *args: Any) -> _Resumo:
    """Run tests given as pairs ``rotina, ativado``, all under a generic name."""
    testes = [
        TesteConfig(nome=_NOME_GENERICO, rotina=rotina, ativado=ativado)
        for rotina, ativado in _pares(args)
    ]
    return execucao_serial_de_tc(testes, execucao_do_suite)


def executa_testes_b(execucao_do_suite: bool, *args: TesteConfig) -> _Resumo:
    """Run tests given as ``TesteConfig`` values, usually built with ``unit``."""
    return execucao_serial_de_tc(list(args), execucao_do_suite)