import pytest

from utilitarios.booleano import bool_to_str, null_to_str, str_to_bool


@pytest.mark.parametrize(
    "entrada, saida",
    [
        ("verdadeiro", True),
        ("true", True),
        ("falso", False),
        ("false", False),
        ("FALSO", False),
        ("FALse", False),
        ("TRUE", True),
        ("vErDaDeiRO", True),
        ("Falso", False),
        ("TrUe", True),
        ("True", True),
        ("T", True),
        ("V", True),
        ("f", False),
        ("F", False),
    ],
)
def test_str_to_bool_matches(entrada, saida):
    assert str_to_bool(entrada) is saida


@pytest.mark.parametrize("entrada", ["talvez", "", "yes", "1"])
def test_str_to_bool_invalid(entrada):
    with pytest.raises(ValueError):
        str_to_bool(entrada)


@pytest.mark.parametrize("valor", [True, False])
def test_round_trip(valor):
    assert str_to_bool(bool_to_str(valor)) is valor


@pytest.mark.parametrize("valor, esperado", [(15, "true"), ("M", "true"), (0, "false"), (False, "false")])
def test_bool_to_str_truthiness(valor, esperado):
    assert bool_to_str(valor) == esperado


def test_null_to_str():
    assert null_to_str(None) == "none"
    assert null_to_str(object()) == "válido"