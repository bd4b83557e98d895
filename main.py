import pandas as pd

from rescisao.calculo.calculadora import calcular_rescisao
from rescisao.data_validation import ContratoModel, validate_contract_data
from rescisao.logging_config import log

# Colunas de resultado adicionadas a cada contrato calculado
COLUNAS_RESULTADO = {
    "SaldoSalario": "saldo_salario",
    "DiasAviso": "dias_aviso",
    "ValorAviso": "valor_aviso",
    "DescontoAviso": "valor_aviso_desconto",
    "Avos13": "avos_13",
    "Valor13": "valor_13",
    "Valor13Indenizado": "valor_13_indenizado",
    "AvosFerias": "avos_ferias",
    "FeriasProporcionais": "ferias_proporcionais",
    "FeriasIndenizadas": "ferias_indenizadas",
    "DescontoINSS": "desconto_inss",
    "TotalIRRF": "total_irrf",
    "TotalProventos": "total_proventos",
    "TotalDescontos": "total_descontos",
    "RescisaoLiquida": "rescisao_liquida",
    "MultaFGTS": "multa_40",
    "TotalFGTS": "total_fgts",
    "TotalGeral": "total_geral",
}


def run(df_contratos: pd.DataFrame) -> pd.DataFrame:
    """
    Calcula a rescisão de cada contrato do lote. Linhas inválidas são
    marcadas e seguem no resultado sem valores calculados.
    """
    if df_contratos is None or df_contratos.empty:
        log.warning("Nenhum contrato recebido.")
        return pd.DataFrame()

    log.info(f"--- INICIANDO CÁLCULO DE RESCISÕES ({len(df_contratos)} contratos) ---")

    df_validado = validate_contract_data(df_contratos).reset_index(drop=True)

    for col in COLUNAS_RESULTADO:
        df_validado[col] = 0.0

    for index, row in df_validado.iterrows():
        if row["Status"] != "Válido":
            continue
        try:
            modelo = ContratoModel(**row.to_dict())
            rescisao = calcular_rescisao(modelo.to_contrato(), modelo.to_ledger())
        except ValueError as e:
            log.error(f"Erro ao calcular a Matrícula {row.get('Matricula', 'N/A')}: {e}")
            df_validado.at[index, "Status"] = "Inválido"
            df_validado.at[index, "Observacoes"] += f"{e}; "
            continue

        for col, campo in COLUNAS_RESULTADO.items():
            df_validado.at[index, col] = round(getattr(rescisao, campo), 2)

    validos = (df_validado["Status"] == "Válido").sum()
    log.success(f"--- FIM DO CÁLCULO: {validos} de {len(df_validado)} contratos calculados ---")
    return df_validado


def build_summary(df_resultado: pd.DataFrame) -> pd.DataFrame:
    if df_resultado is None or df_resultado.empty:
        return pd.DataFrame(
            {
                "Validos": [0],
                "Invalidos": [0],
                "Total": [0],
                "TotalLiquido": [0.0],
                "TotalFGTS": [0.0],
                "TotalGeral": [0.0],
            }
        )

    validos = df_resultado[df_resultado["Status"] == "Válido"]

    return pd.DataFrame(
        {
            "Validos": [len(validos)],
            "Invalidos": [len(df_resultado) - len(validos)],
            "Total": [len(df_resultado)],
            "TotalLiquido": [round(validos["RescisaoLiquida"].sum(), 2)],
            "TotalFGTS": [round(validos["TotalFGTS"].sum(), 2)],
            "TotalGeral": [round(validos["TotalGeral"].sum(), 2)],
        }
    )
