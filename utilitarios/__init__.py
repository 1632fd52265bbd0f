"""Small everyday helpers: readable quantities, screen points, timers, progress bars and a tiny test runner."""

__version__ = "1.2.2"

__all__ = [
    "booleano",
    "cronometro",
    "legivel",
    "menu",
    "ponto",
    "progresso",
    "tempo",
    "temporizador",
    "terminal",
    "teste",
]