# tests/test_impostos.py

import pytest

from rescisao.calculo.impostos import calc_descontos, calc_inss, calc_irrf, reducao_irrf_2026
from rescisao.calculo.tabelas import INSS_TABLE_2026, INSS_TETO_BASE_2026


def test_inss_primeira_faixa():
    assert calc_inss(1000.0) == pytest.approx(75.00)


def test_inss_progressivo():
    # 121,575 + 105,5592 + 24,7344
    assert calc_inss(3000.0) == pytest.approx(251.87)


def test_inss_limitado_ao_teto():
    assert calc_inss(10000.0) == pytest.approx(950.09)
    assert calc_inss(10000.0) == calc_inss(INSS_TETO_BASE_2026)


def test_inss_base_zero_ou_negativa():
    assert calc_inss(0.0) == 0.0
    assert calc_inss(-100.0) == 0.0


@pytest.mark.parametrize("limite", [faixa.limite for faixa in INSS_TABLE_2026[:-1]])
def test_inss_continuo_nas_mudancas_de_faixa(limite):
    assert calc_inss(limite + 0.01) - calc_inss(limite) == pytest.approx(0.0, abs=0.02)


def test_irrf_isento_ate_5000():
    assert calc_irrf(4000.0) == 0.0
    assert calc_irrf(5000.0) == 0.0
    assert calc_irrf(0.0) == 0.0


def test_irrf_com_reducao_2026():
    # Tabela: 6000 x 27,5% - 896 = 754,00; redução: 978,62 - 0,133145 x 6000 = 179,75
    assert reducao_irrf_2026(6000.0) == pytest.approx(179.75)
    assert calc_irrf(6000.0) == pytest.approx(574.25)


def test_irrf_sem_reducao_acima_de_7350():
    assert reducao_irrf_2026(7350.01) == 0.0
    assert calc_irrf(8000.0) == pytest.approx(1304.00)


def test_irrf_fronteira_da_reducao():
    assert reducao_irrf_2026(5000.0) == 0.0
    assert reducao_irrf_2026(7350.0) == pytest.approx(0.00425)
    assert calc_irrf(7350.0) == pytest.approx(calc_irrf(7350.01), abs=0.01)


def test_calc_descontos_irrf_sobre_base_liquida_de_inss():
    # Act
    resultado = calc_descontos(3000.0)
    # Assert
    assert resultado.inss == pytest.approx(251.87)
    assert resultado.base_irrf == pytest.approx(3000.0 - 251.87)
    assert resultado.irrf == 0.0
