# rescisao/calculo/aviso_previo.py

"""
Aviso prévio: quantidade de dias (Lei 12.506/2011), valor a pagar ou
descontar e data de projeção para o aviso indenizado.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Tuple

from rescisao.calculo.datas import DIAS_MES_COMERCIAL, diff_days
from rescisao.calculo.modelos import Contrato, MotivoRescisao, TipoAviso
from rescisao.logging_config import log

DIAS_AVISO_BASE = 30
DIAS_POR_ANO_TRABALHADO = 3
LIMITE_DIAS_ADICIONAIS = 60
DIAS_POR_ANO = 365.25


@dataclass(frozen=True)
class ResultadoAviso:
    dias_aviso: int
    dias_adicionais: int
    valor_provento: float
    valor_desconto: float
    projecao: date
    projeta_indenizacao: bool


def dias_adicionais(contrato: Contrato) -> int:
    """3 dias por ano completo, limitado a 60. Só na dispensa pelo empregador."""
    if contrato.is_pedido_demissao:
        return 0
    anos = math.floor(diff_days(contrato.data_demissao, contrato.data_admissao) / DIAS_POR_ANO)
    return min(anos * DIAS_POR_ANO_TRABALHADO, LIMITE_DIAS_ADICIONAIS)


def dias_aviso(contrato: Contrato) -> int:
    return DIAS_AVISO_BASE + dias_adicionais(contrato)


def projecao_aviso(contrato: Contrato) -> date:
    """Demissão + dias de aviso. No pedido de demissão não há projeção."""
    if contrato.is_pedido_demissao:
        return contrato.data_demissao
    return contrato.data_demissao + timedelta(days=dias_aviso(contrato))


# --- MATRIZ MOTIVO x TIPO DE AVISO ---
# Cada regra recebe (salario_dia, dias_aviso) e devolve (provento, desconto).


def _dispensa_indenizado(salario_dia: float, dias: int) -> Tuple[float, float]:
    return salario_dia * dias, 0.0


def _dispensa_trabalhado(salario_dia: float, dias: int) -> Tuple[float, float]:
    # Os 30 dias trabalhados já estão no saldo de salário; paga só os adicionais
    dias_indenizados = dias - DIAS_AVISO_BASE
    if dias_indenizados > 0:
        return salario_dia * dias_indenizados, 0.0
    return 0.0, 0.0


def _pedido_indenizado(salario_dia: float, dias: int) -> Tuple[float, float]:
    # Empregado não cumpriu o aviso: desconto de 30 dias, sempre
    return 0.0, salario_dia * DIAS_AVISO_BASE


def _pedido_trabalhado(salario_dia: float, dias: int) -> Tuple[float, float]:
    return 0.0, 0.0


REGRAS_AVISO: Dict[Tuple[MotivoRescisao, TipoAviso], Callable[[float, int], Tuple[float, float]]] = {
    (MotivoRescisao.DISPENSA, TipoAviso.INDENIZADO): _dispensa_indenizado,
    (MotivoRescisao.DISPENSA, TipoAviso.TRABALHADO): _dispensa_trabalhado,
    (MotivoRescisao.PEDIDO, TipoAviso.INDENIZADO): _pedido_indenizado,
    (MotivoRescisao.PEDIDO, TipoAviso.TRABALHADO): _pedido_trabalhado,
}


def calcular_aviso(contrato: Contrato) -> ResultadoAviso:
    adicionais = dias_adicionais(contrato)
    dias = DIAS_AVISO_BASE + adicionais
    salario_dia = contrato.salario_total / DIAS_MES_COMERCIAL

    regra = REGRAS_AVISO[(contrato.motivo, contrato.tipo_aviso)]
    provento, desconto = regra(salario_dia, dias)

    projecao = projecao_aviso(contrato)
    projeta = (
        contrato.motivo == MotivoRescisao.DISPENSA
        and contrato.tipo_aviso == TipoAviso.INDENIZADO
    )

    log.debug(
        f"[Cálculo] Aviso: {contrato.motivo.value}/{contrato.tipo_aviso.value}, "
        f"{dias} dias ({adicionais} adicionais), provento R$ {provento:.2f}, "
        f"desconto R$ {desconto:.2f}, projeção {projecao:%d/%m/%Y}"
    )

    return ResultadoAviso(
        dias_aviso=dias,
        dias_adicionais=adicionais,
        valor_provento=provento,
        valor_desconto=desconto,
        projecao=projecao,
        projeta_indenizacao=projeta,
    )
