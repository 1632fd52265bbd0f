"""Two-dimensional integer points for character positions on a screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

_MAXIMO = 0xFFFF


@dataclass(frozen=True)
class Ponto:
    """A (y, x) coordinate, each a 16-bit unsigned integer."""

    y: int = 0
    x: int = 0

    def __post_init__(self) -> None:
        for nome, valor in (("y", self.y), ("x", self.x)):
            if not 0 <= valor <= _MAXIMO:
                raise ValueError(f"coordenada {nome}={valor} fora de 0..{_MAXIMO}")

    def distancia(self, outro: Ponto) -> int:
        """Euclidean distance to ``outro``, rounded down to whole units."""
        return math.floor(math.hypot(self.x - outro.x, self.y - outro.y))

    def debug_str(self) -> str:
        """Representation with named coordinates."""
        return f"Ponto(x={self.x}, y={self.y})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def retangulo_vertices(p: Ponto, q: Ponto) -> list[Ponto]:
    """Vertices of the rectangle with opposite corners ``p`` and ``q``.

    They are given clockwise starting from the upper-left corner.
    """
    if p.x < q.x and p.y < q.y:
        return [p, Ponto(p.y, q.x), q, Ponto(q.y, p.x)]
    if p.x > q.x and p.y < q.y:
        return [Ponto(p.y, q.x), p, Ponto(q.y, p.x), q]
    raise ValueError("pontos com x's e y's coincidentes não produzem retângulos")


def pontos_colineares(a: Ponto, b: Ponto) -> bool:
    """Whether the two points share a row or a column."""
    return a.y == b.y or a.x == b.x


def cria_array_ponto(*args: int) -> list[Ponto]:
    """Build points from a flat sequence of coordinates ``y1, x1, y2, x2, ...``."""
    if len(args) % 2:
        raise ValueError("é preciso um número par de coordenadas")
    coordenadas = iter(args)
    return [Ponto(y, x) for y, x in zip(coordenadas, coordenadas)]


def array_ponto_to_str(pontos: Sequence[Ponto]) -> str:
    """Bracketed, comma-separated text of the points."""
    return "[" + ", ".join(str(p) for p in pontos) + "]"


def imprime_array_ponto(pontos: Sequence[Ponto]) -> None:
    """Print the points, five per line."""
    partes = ["Array de Ponto: [\n\t"]
    for k, ponto in enumerate(pontos, start=1):
        partes.append(f"{ponto}, " if k % 5 else f"{ponto}, \n\t")
    partes.append("\b\b\n]")
    print("".join(partes))