# tests/test_data_validation.py

import pandas as pd

from rescisao.calculo.modelos import MotivoRescisao, TipoAviso
from rescisao.data_validation import ContratoModel, validate_contract_data


def criar_df_teste(dados: dict) -> pd.DataFrame:
    colunas_padrao = {
        'Matricula': '001', 'Nome': 'Teste',
        'DataAdmissao': pd.to_datetime('2023-12-03'), 'DataDemissao': pd.to_datetime('2025-12-03'),
        'Motivo': 'dispensa', 'TipoAviso': 'indenizado',
        'SalarioBase': 2500.0, 'Insalubridade': 0.0, 'FeriasVencidas': 0,
        'SaldoFGTS': None,
    }
    colunas_padrao.update(dados)
    return pd.DataFrame([colunas_padrao])


def test_contrato_valido():
    # Act
    df_resultado = validate_contract_data(criar_df_teste({}))
    # Assert
    assert df_resultado.iloc[0]['Status'] == 'Válido'
    assert df_resultado.iloc[0]['Observacoes'] == ''


def test_salario_negativo_torna_invalido():
    df_resultado = validate_contract_data(criar_df_teste({'SalarioBase': -10.0}))
    assert df_resultado.iloc[0]['Status'] == 'Inválido'
    assert 'ValidationError' in df_resultado.iloc[0]['Observacoes']


def test_demissao_antes_da_admissao_torna_invalido():
    df_resultado = validate_contract_data(criar_df_teste({'DataDemissao': pd.to_datetime('2023-01-01')}))
    assert df_resultado.iloc[0]['Status'] == 'Inválido'


def test_data_vazia_torna_invalido():
    df_resultado = validate_contract_data(criar_df_teste({'DataDemissao': pd.NaT}))
    assert df_resultado.iloc[0]['Status'] == 'Inválido'


def test_lote_nao_para_em_linha_invalida():
    # Arrange
    df_teste = pd.concat(
        [criar_df_teste({'Matricula': '001'}), criar_df_teste({'Matricula': '002', 'SalarioBase': -1.0})],
        ignore_index=True,
    )
    # Act
    df_resultado = validate_contract_data(df_teste)
    # Assert
    assert list(df_resultado['Status']) == ['Válido', 'Inválido']


def test_opcoes_normalizadas_e_vazias_usam_padrao():
    # Arrange
    modelo = ContratoModel(**criar_df_teste({'Motivo': ' PEDIDO ', 'TipoAviso': None}).iloc[0].to_dict())
    # Act
    contrato = modelo.to_contrato()
    # Assert
    assert contrato.motivo == MotivoRescisao.PEDIDO
    assert contrato.tipo_aviso == TipoAviso.TRABALHADO


def test_matricula_numerica_e_saldo_fgts():
    modelo = ContratoModel(**criar_df_teste({'Matricula': 123, 'SaldoFGTS': 4000.0}).iloc[0].to_dict())
    assert modelo.Matricula == '123'
    assert modelo.to_ledger().saldo_manual == 4000.0


def test_saldo_fgts_vazio_vira_none():
    modelo = ContratoModel(**criar_df_teste({}).iloc[0].to_dict())
    assert modelo.to_ledger().saldo_manual is None
    assert modelo.to_contrato().salario_total == 2500.0
