# este modulo garante a tipagem correta dos contratos recebidos em lote (planilha/CSV), antes de chegarem ao motor de calculo. usamos o pydantic como molde: cada linha e validada contra o ContratoModel e, se nao estiver de acordo, a linha e marcada como invalida e o erro e logado, sem interromper o lote

# rescisao/data_validation.py

import numbers

import pandas as pd
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator, model_validator
from typing import Optional, Any
from datetime import date

from rescisao.calculo.modelos import Contrato, LedgerFGTS, MotivoRescisao
from rescisao.calculo.modelos import TipoAviso as TipoAvisoEnum
from rescisao.logging_config import log


def _vazio(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, (str, list, dict)):
        return False
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        return False


class ContratoModel(BaseModel):
    Matricula: str
    Nome: str
    DataAdmissao: date
    DataDemissao: date
    Motivo: MotivoRescisao = MotivoRescisao.DISPENSA
    TipoAviso: TipoAvisoEnum = TipoAvisoEnum.TRABALHADO
    SalarioBase: float
    Insalubridade: float = 0.0
    FeriasVencidas: int = 0
    SaldoFGTS: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def clean_nan_values(cls, v: Any):
        """Converte qualquer valor 'nan'/NaT do pandas em None."""
        if _vazio(v):
            return None
        if isinstance(v, pd.Timestamp):
            return v.date()
        return v

    @field_validator("Matricula", mode="before")
    @classmethod
    def matricula_como_texto(cls, v: Any):
        if isinstance(v, numbers.Real) and not _vazio(v):
            return str(int(v))
        return v

    @field_validator("Motivo", "TipoAviso", mode="before")
    @classmethod
    def normalizar_opcoes(cls, v: Any, info: ValidationInfo):
        if _vazio(v):
            return cls.model_fields[info.field_name].default
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("Insalubridade", "FeriasVencidas", mode="before")
    @classmethod
    def vazio_vira_zero(cls, v: Any):
        if _vazio(v):
            return 0
        if isinstance(v, numbers.Integral):
            return int(v)
        return v

    @field_validator("SalarioBase", "Insalubridade", "SaldoFGTS")
    @classmethod
    def nao_negativo(cls, v: Optional[float]):
        if v is not None and v < 0:
            raise ValueError("valor não pode ser negativo")
        return v

    @field_validator("FeriasVencidas")
    @classmethod
    def ferias_nao_negativas(cls, v: int):
        if v < 0:
            raise ValueError("quantidade de férias vencidas não pode ser negativa")
        return v

    @model_validator(mode="after")
    def demissao_apos_admissao(self):
        if self.DataDemissao < self.DataAdmissao:
            raise ValueError("DataDemissao anterior à DataAdmissao")
        return self

    def to_contrato(self) -> Contrato:
        return Contrato(
            data_admissao=self.DataAdmissao,
            data_demissao=self.DataDemissao,
            motivo=self.Motivo,
            tipo_aviso=self.TipoAviso,
            salario_base=self.SalarioBase,
            insalubridade=self.Insalubridade,
            ferias_vencidas_qtd=self.FeriasVencidas,
        )

    def to_ledger(self) -> LedgerFGTS:
        return LedgerFGTS(saldo_manual=self.SaldoFGTS)


def validate_contract_data(df: pd.DataFrame) -> pd.DataFrame:
    """
    Valida cada linha do DataFrame. Se uma linha falhar, ela é marcada como
    inválida e o erro é logado, sem quebrar o programa.
    """
    log.info("Iniciando validação da estrutura dos contratos...")

    df = df.copy()
    if "Status" not in df.columns:
        df["Status"] = ""
    if "Observacoes" not in df.columns:
        df["Observacoes"] = ""
    df["Status"] = df["Status"].fillna("").astype(str)
    df["Observacoes"] = df["Observacoes"].fillna("").astype(str)

    validated_rows = []
    for index, row in df.iterrows():
        row_data = row.to_dict()
        try:
            ContratoModel(**row_data)
            row["Status"] = "Válido"
            validated_rows.append(row)
        except ValidationError as e:
            log.error(
                f"Erro de validação na Matrícula {row_data.get('Matricula', 'N/A')}: {e}"
            )
            row["Status"] = "Inválido"
            row["Observacoes"] += "Dados com formato inválido (ValidationError); "
            validated_rows.append(row)
            continue

    log.success("Validação de contratos concluída.")
    if not validated_rows:
        return pd.DataFrame(columns=df.columns)
    return pd.DataFrame(validated_rows)
