"""Querying the dimensions of the controlling terminal."""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class TerminalSize:
    """Terminal size in rows and columns."""

    linhas: int
    colunas: int


def find(string: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``string``, or -1."""
    return string.find(pattern)


def obtem_dimensao() -> TerminalSize:
    """Return the terminal's rows and columns as reported by ``tput``."""
    if os.name == "nt":
        tamanho = shutil.get_terminal_size()
        return TerminalSize(linhas=tamanho.lines, colunas=tamanho.columns)

    resultado = subprocess.run(
        ["tput", "cols", "lines"], capture_output=True, text=True, check=False
    )
    if resultado.returncode != 0:
        raise RuntimeError(f"tput terminou com código {resultado.returncode}")
    campos = resultado.stdout.split()
    if len(campos) < 2:
        raise RuntimeError(f"saída inesperada de tput: {resultado.stdout!r}")
    try:
        colunas, linhas = int(campos[0]), int(campos[1])
    except ValueError as erro:
        raise RuntimeError(f"saída inesperada de tput: {resultado.stdout!r}") from erro
    return TerminalSize(linhas=linhas, colunas=colunas)