# tests/test_datas.py

from datetime import date

from rescisao.calculo.datas import (
    add_anos,
    add_meses,
    competencias_entre,
    diff_days,
    dia_comercial,
    ultimo_dia_mes,
)


def test_diff_days_independe_da_ordem():
    assert diff_days(date(2025, 1, 1), date(2025, 1, 31)) == 30
    assert diff_days(date(2025, 1, 31), date(2025, 1, 1)) == 30


def test_add_meses_dia_inexistente_transborda_para_o_mes_seguinte():
    assert add_meses(date(2025, 1, 31), 1) == date(2025, 3, 3)
    assert add_meses(date(2024, 1, 31), 1) == date(2024, 3, 2)
    assert add_meses(date(2025, 11, 15), 2) == date(2026, 1, 15)


def test_add_anos_29_de_fevereiro():
    assert add_anos(date(2024, 2, 29), 1) == date(2025, 3, 1)
    assert add_anos(date(2024, 2, 29), 4) == date(2028, 2, 29)


def test_dia_comercial():
    assert dia_comercial(31) == 30
    assert dia_comercial(28) == 28


def test_ultimo_dia_mes_bissexto():
    assert ultimo_dia_mes(date(2024, 2, 10)) == date(2024, 2, 29)


def test_competencias_excluem_mes_da_demissao():
    # Arrange / Act
    competencias = competencias_entre(date(2025, 1, 15), date(2025, 4, 2))
    # Assert
    assert competencias == ["2025-01", "2025-02", "2025-03"]
    assert competencias_entre(date(2025, 4, 1), date(2025, 4, 30)) == []
