import math
from datetime import timedelta

import pytest

from utilitarios.legivel import (
    elimina_digitos_insignificantes,
    tamanho_legivel,
    tempo_legivel,
    valor_legivel,
)


def _numero(texto):
    return texto.split(" ")[0]


def test_elimina_pinned_example():
    assert elimina_digitos_insignificantes(3.153, "[peso]") == "3.2 [peso]"


@pytest.mark.parametrize("valor", [3.153, 0.1234, 153.7, 3.915, 19.94])
def test_elimina_keeps_one_decimal_for_relevant_fraction(valor):
    resultado = elimina_digitos_insignificantes(valor, "[peso]")
    assert resultado.endswith(" [peso]")
    numero = _numero(resultado)
    assert "." in numero
    assert abs(float(numero) - valor) <= 0.05 + 1e-9


@pytest.mark.parametrize("valor", [352.001, 12.07])
def test_elimina_drops_small_fraction(valor):
    numero = _numero(elimina_digitos_insignificantes(valor, "[peso]"))
    assert "." not in numero
    assert int(numero) == math.floor(valor)


@pytest.mark.parametrize("valor", [1.96, 103.95])
def test_elimina_rounds_near_integer(valor):
    numero = _numero(elimina_digitos_insignificantes(valor, "[peso]"))
    assert "." not in numero
    assert int(numero) == math.ceil(valor)


@pytest.mark.parametrize(
    "nbytes, sufixo",
    [
        (382, "B's"),
        (12832, "KiB"),
        (3842394, "MiB"),
        (111931512, "MiB"),
        (7712340981, "GiB"),
        (50123812341, "GiB"),
        (100030231892377, "TiB"),
    ],
)
def test_tamanho_legivel_units(nbytes, sufixo):
    assert tamanho_legivel(nbytes).endswith(sufixo)


def test_tamanho_legivel_exact_kibibyte():
    assert tamanho_legivel(1024) == "1 KiB"


def test_tamanho_legivel_beyond_tebibytes_falls_back_to_bytes():
    assert tamanho_legivel(2**50).endswith("B's")


@pytest.mark.parametrize(
    "valor, peso",
    [
        (12832, "mil"),
        (3842394, "mi"),
        (111931512, "mi"),
        (7712340981, "bi"),
        (50123812341, "bi"),
        (100030231892377, "tri"),
        (2**64 - 1, "qn"),
    ],
)
def test_valor_legivel_weights(valor, peso):
    assert valor_legivel(valor).endswith(" " + peso)


def test_valor_legivel_small_has_no_weight():
    assert valor_legivel(382).strip() == "382"


def test_valor_legivel_negative():
    resultado = valor_legivel(-5000)
    assert resultado.startswith("-")
    assert resultado.endswith("mil")


def test_valor_legivel_float_truncates():
    assert valor_legivel(3000531.14159) == valor_legivel(3000531)


def test_valor_legivel_huge_unsigned_has_no_weight():
    resultado = valor_legivel(10**21)
    assert resultado.endswith(" ")
    assert "qn" not in resultado


def test_valor_legivel_rejects_text():
    with pytest.raises(TypeError):
        valor_legivel("1000")


@pytest.mark.parametrize(
    "segundos, peso",
    [
        (51.3232, "seg"),
        (190.5321, "min"),
        (8328.0, "\bh"),
        (38832.312, "\bh"),
        (0.038, "ms"),
        (0.001, "ms"),
        (0.000851, "\u03bcs"),
        (0.000000701, "ns"),
        (5 * 86400, "dias"),
        (100 * 86400, "meses"),
        (400 * 86400, "anos"),
    ],
)
def test_tempo_legivel_units(segundos, peso):
    assert tempo_legivel(segundos).endswith(" " + peso)


def test_tempo_legivel_below_nanosecond_is_zero():
    assert tempo_legivel(1e-12) == "0 seg"


def test_tempo_legivel_timedelta_matches_seconds():
    assert tempo_legivel(timedelta(seconds=5, microseconds=803000)) == tempo_legivel(5.803)


def test_tempo_legivel_rejects_text():
    with pytest.raises(TypeError):
        tempo_legivel("5")