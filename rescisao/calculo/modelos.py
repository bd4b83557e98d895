# rescisao/calculo/modelos.py

"""
Tipos do motor de cálculo.

Entradas (Contrato, LedgerFGTS, Ajuste) e saída (Rescisao) são dataclasses
imutáveis: cada cálculo recebe tudo explicitamente e devolve um resultado novo.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class MotivoRescisao(str, Enum):
    DISPENSA = "dispensa"  # Dispensa sem justa causa (iniciativa do empregador)
    PEDIDO = "pedido"  # Pedido de demissão (iniciativa do empregado)


class TipoAviso(str, Enum):
    TRABALHADO = "trabalhado"
    INDENIZADO = "indenizado"


class TipoAjuste(str, Enum):
    PROVENTO = "Provento"
    DESCONTO = "Desconto"


@dataclass(frozen=True)
class Contrato:
    """Dados contratuais usados no cálculo da rescisão."""

    data_admissao: date
    data_demissao: date
    motivo: MotivoRescisao = MotivoRescisao.DISPENSA
    tipo_aviso: TipoAviso = TipoAviso.TRABALHADO
    salario_base: float = 0.0
    insalubridade: float = 0.0
    ferias_vencidas_qtd: int = 0

    def __post_init__(self):
        if self.data_demissao < self.data_admissao:
            raise ValueError(
                f"Data de demissão ({self.data_demissao:%d/%m/%Y}) anterior à admissão ({self.data_admissao:%d/%m/%Y})."
            )
        if self.salario_base < 0 or self.insalubridade < 0:
            raise ValueError("Salário base e insalubridade não podem ser negativos.")
        if self.ferias_vencidas_qtd < 0:
            raise ValueError("Quantidade de férias vencidas não pode ser negativa.")

    @property
    def salario_total(self) -> float:
        return self.salario_base + self.insalubridade

    @property
    def is_pedido_demissao(self) -> bool:
        return self.motivo == MotivoRescisao.PEDIDO


@dataclass(frozen=True)
class DepositoFGTS:
    competencia: str  # "YYYY-MM"
    valor: float = 0.0


@dataclass(frozen=True)
class LedgerFGTS:
    """Histórico de depósitos do FGTS ou saldo informado manualmente.

    Quando saldo_manual existe, os depósitos mensais são ignorados na base da multa.
    """

    saldo_manual: Optional[float] = None
    depositos: Tuple[DepositoFGTS, ...] = ()

    @property
    def saldo_para_multa(self) -> float:
        if self.saldo_manual is not None:
            return self.saldo_manual
        return sum((d.valor for d in self.depositos), 0.0)


@dataclass(frozen=True)
class Ajuste:
    """Provento ou desconto lançado manualmente pelo usuário."""

    descricao: str
    valor: float
    tipo: TipoAjuste = TipoAjuste.PROVENTO

    def __post_init__(self):
        if self.valor <= 0:
            raise ValueError(f"Ajuste '{self.descricao}' deve ter valor positivo.")


@dataclass(frozen=True)
class Rescisao:
    """Resultado completo de um cálculo rescisório."""

    motivo: MotivoRescisao
    tipo_aviso: TipoAviso
    salario_total: float

    # --- Saldo de salário ---
    dias_trabalhados: int
    saldo_salario: float

    # --- Aviso prévio ---
    dias_aviso: int
    dias_aviso_adicional: int
    projecao_aviso: date
    valor_aviso: float
    valor_aviso_desconto: float

    # --- 13º salário ---
    avos_13: int
    valor_13: float
    valor_13_indenizado: float

    # --- Férias ---
    ferias_vencidas: float
    terco_ferias_vencidas: float
    qtd_ferias_dobro: int
    ferias_dobro: float
    terco_ferias_dobro: float
    avos_ferias: int
    ferias_proporcionais: float
    terco_ferias_proporcionais: float
    ferias_indenizadas: float
    terco_ferias_indenizadas: float

    # --- Descontos legais ---
    inss_salario: float
    inss_13: float
    desconto_inss: float
    irrf_salario: float
    irrf_13: float
    total_irrf: float

    # --- FGTS ---
    saldo_fgts_base: float
    fgts_rescisao: float
    fgts_aviso_indenizado: float
    base_multa_fgts: float
    multa_40: float
    total_fgts: float

    # --- Totais ---
    total_proventos: float
    total_descontos: float
    total_ajustes_proventos: float
    total_ajustes_descontos: float
    rescisao_liquida: float
    total_geral: float

    ajustes: Tuple[Ajuste, ...] = field(default_factory=tuple)

    @property
    def is_pedido_demissao(self) -> bool:
        return self.motivo == MotivoRescisao.PEDIDO
