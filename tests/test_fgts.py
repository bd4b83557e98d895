# tests/test_fgts.py

from datetime import date

import pytest

from rescisao.calculo.fgts import calc_fgts, calcular_fgts, gerar_competencias, preencher_com_minimo
from rescisao.calculo.modelos import Contrato, DepositoFGTS, LedgerFGTS, MotivoRescisao


def criar_contrato(motivo=MotivoRescisao.DISPENSA) -> Contrato:
    return Contrato(
        data_admissao=date(2024, 1, 1),
        data_demissao=date(2025, 6, 10),
        motivo=motivo,
        salario_base=3000.0,
    )


def test_calc_fgts_8_por_cento():
    assert calc_fgts(1000.0) == pytest.approx(80.0)


def test_fgts_dispensa_com_multa_de_40():
    # Arrange
    ledger = LedgerFGTS(saldo_manual=5000.0)
    # Act
    resultado = calcular_fgts(
        criar_contrato(), ledger,
        saldo_salario=1000.0, valor_13=500.0, valor_aviso=1500.0, valor_13_indenizado=250.0,
    )
    # Assert
    assert resultado.fgts_rescisao == pytest.approx(240.0)
    assert resultado.fgts_aviso_indenizado == pytest.approx(20.0)
    assert resultado.base_multa == pytest.approx(5260.0)
    assert resultado.multa_40 == pytest.approx(2104.0)
    assert resultado.total_conta == pytest.approx(7364.0)


def test_fgts_pedido_de_demissao_sem_multa_e_sem_saque():
    resultado = calcular_fgts(
        criar_contrato(MotivoRescisao.PEDIDO), LedgerFGTS(saldo_manual=5000.0),
        saldo_salario=1000.0, valor_13=500.0, valor_aviso=1500.0, valor_13_indenizado=0.0,
    )
    assert resultado.fgts_rescisao == pytest.approx(240.0)
    assert resultado.multa_40 == 0.0
    assert resultado.total_conta == 0.0


def test_saldo_manual_prevalece_sobre_depositos():
    depositos = (DepositoFGTS("2025-01", 100.0), DepositoFGTS("2025-02", 100.0))
    assert LedgerFGTS(saldo_manual=1000.0, depositos=depositos).saldo_para_multa == 1000.0
    assert LedgerFGTS(depositos=depositos).saldo_para_multa == pytest.approx(200.0)
    assert LedgerFGTS().saldo_para_multa == 0.0


def test_gerar_competencias_zeradas():
    # Act
    depositos = gerar_competencias(date(2025, 1, 10), date(2025, 4, 5))
    # Assert
    assert [d.competencia for d in depositos] == ["2025-01", "2025-02", "2025-03"]
    assert all(d.valor == 0.0 for d in depositos)


def test_gerar_competencias_datas_invertidas():
    assert gerar_competencias(date(2025, 4, 5), date(2025, 1, 10)) == ()


def test_preencher_com_salario_minimo_de_cada_mes():
    # Arrange
    depositos = (DepositoFGTS("2024-12"), DepositoFGTS("2025-01"))
    # Act
    preenchidos = preencher_com_minimo(depositos)
    # Assert
    assert preenchidos[0].valor == pytest.approx(1412.00 * 0.08)
    assert preenchidos[1].valor == pytest.approx(1518.00 * 0.08)
