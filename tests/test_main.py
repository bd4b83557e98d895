# tests/test_main.py

import pandas as pd
import pytest

import main


def criar_df_lote() -> pd.DataFrame:
    return pd.DataFrame([
        {
            'Matricula': '001', 'Nome': 'Ana', 'DataAdmissao': pd.to_datetime('2023-12-03'),
            'DataDemissao': pd.to_datetime('2025-12-03'), 'Motivo': 'dispensa', 'TipoAviso': 'indenizado',
            'SalarioBase': 2500.0, 'Insalubridade': 0.0, 'FeriasVencidas': 0, 'SaldoFGTS': 1000.0,
        },
        {
            'Matricula': '002', 'Nome': 'Bruno', 'DataAdmissao': pd.to_datetime('2024-01-01'),
            'DataDemissao': pd.to_datetime('2025-06-10'), 'Motivo': 'pedido', 'TipoAviso': 'trabalhado',
            'SalarioBase': -100.0, 'Insalubridade': 0.0, 'FeriasVencidas': 0, 'SaldoFGTS': None,
        },
    ])


def test_run_calcula_validos_e_marca_invalidos():
    # Act
    df_resultado = main.run(criar_df_lote())
    # Assert
    assert list(df_resultado['Status']) == ['Válido', 'Inválido']
    assert df_resultado.loc[0, 'DiasAviso'] == 36
    assert df_resultado.loc[0, 'ValorAviso'] == pytest.approx(3000.0)
    assert df_resultado.loc[0, 'RescisaoLiquida'] > 0
    assert df_resultado.loc[1, 'RescisaoLiquida'] == 0.0


def test_run_lote_vazio():
    assert main.run(pd.DataFrame()).empty


def test_build_summary():
    # Arrange
    df_resultado = main.run(criar_df_lote())
    # Act
    resumo = main.build_summary(df_resultado)
    # Assert
    assert resumo.loc[0, 'Validos'] == 1
    assert resumo.loc[0, 'Invalidos'] == 1
    assert resumo.loc[0, 'Total'] == 2
    assert resumo.loc[0, 'TotalGeral'] == pytest.approx(df_resultado.loc[0, 'TotalGeral'], abs=0.01)


def test_build_summary_vazio():
    resumo = main.build_summary(pd.DataFrame())
    assert resumo.loc[0, 'Total'] == 0
    assert resumo.loc[0, 'TotalGeral'] == 0.0
