import pytest

from utilitarios.teste import (
    TesteConfig,
    debug_aqui,
    execucao_serial_de_tc,
    executa_testes,
    executa_testes_a,
    executa_testes_b,
    executa_tst,
    unit,
)


def _registrador():
    chamadas = []

    def primeira():
        chamadas.append("primeira")

    def segunda():
        chamadas.append("segunda")

    return chamadas, primeira, segunda


def test_unit_usa_nome_da_funcao():
    _, primeira, _ = _registrador()
    config = unit(primeira, True)
    assert config.nome == "primeira"
    assert config.rotina is primeira
    assert config.ativado is True


def test_executa_tst_acionado_roda_rotina(capsys):
    chamadas, primeira, _ = _registrador()
    assert executa_tst("Itera uma Simples String", primeira, True) is True
    assert chamadas == ["primeira"]
    assert "Itera uma Simples String" in capsys.readouterr().out


def test_executa_tst_desativado_nao_roda(capsys):
    chamadas, primeira, _ = _registrador()
    assert executa_tst("", primeira, False) is False
    assert chamadas == []
    saida = capsys.readouterr().out
    assert "DESATIVADO TEMPORIAMENTE!" in saida
    assert "teste anônimo" in saida


def test_executa_testes_roda_apenas_habilitados(capsys):
    chamadas, primeira, segunda = _registrador()
    assert executa_testes(primeira, False, segunda, True) == 1
    assert chamadas == ["segunda"]
    assert "há 1 testes desativados." in capsys.readouterr().out


def test_executa_testes_pares_incompletos():
    _, primeira, _ = _registrador()
    with pytest.raises(ValueError):
        executa_testes(primeira, True, primeira)


def test_executa_testes_a_suite_desligada(capsys):
    chamadas, primeira, segunda = _registrador()
    resumo = executa_testes_a(False, primeira, True, segunda, True)
    assert chamadas == []
    assert resumo.habilitados == 2
    assert resumo.desabilitados == 0
    assert resumo.executados == ()
    assert "nada executado" in capsys.readouterr().out


def test_executa_testes_a_suite_ligada(capsys):
    chamadas, primeira, segunda = _registrador()
    resumo = executa_testes_a(True, primeira, True, segunda, False)
    assert chamadas == ["primeira"]
    assert resumo.habilitados == 1
    assert resumo.desabilitados == 1
    saida = capsys.readouterr().out
    assert "execuções finalizadas" in saida
    assert "::teste[" in saida


def test_executa_testes_b_usa_nomes_e_ordem(capsys):
    chamadas, primeira, segunda = _registrador()
    resumo = executa_testes_b(True, unit(segunda, True), unit(primeira, True))
    assert chamadas == ["segunda", "primeira"]
    assert resumo.executados == ("segunda", "primeira")
    saida = capsys.readouterr().out
    assert "::segunda[" in saida
    assert "::primeira[" in saida


def test_execucao_serial_rejeita_nao_configuracao():
    _, primeira, _ = _registrador()
    with pytest.raises(TypeError):
        execucao_serial_de_tc([primeira], True)


def test_execucao_serial_conta_desativados(capsys):
    chamadas, primeira, segunda = _registrador()
    testes = [
        TesteConfig("a", primeira, False),
        TesteConfig("b", segunda, False),
    ]
    resumo = execucao_serial_de_tc(testes, True)
    assert chamadas == []
    assert resumo.habilitados + resumo.desabilitados == len(testes)
    assert resumo.decorrido >= 0.0
    assert "Testes: 0 on | 2 off" in capsys.readouterr().out


def test_excecao_da_rotina_propaga(capsys):
    def falha():
        raise AssertionError("falhou")

    with pytest.raises(AssertionError, match="falhou"):
        executa_testes_b(True, unit(falha, True))
    assert "::falha[" in capsys.readouterr().out


def test_debug_aqui_incrementa(capsys):
    primeiro = debug_aqui()
    segundo = debug_aqui()
    assert segundo == primeiro + 1
    assert f"aqui!({segundo})" in capsys.readouterr().out