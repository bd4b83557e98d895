# rescisao/calculo/fgts.py

"""
FGTS da rescisão: depósito de 8% sobre as verbas rescisórias, saldo para fins
rescisórios e multa de 40% (apenas na dispensa sem justa causa).
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Tuple

from rescisao.calculo.datas import competencias_entre
from rescisao.calculo.modelos import Contrato, DepositoFGTS, LedgerFGTS
from rescisao.calculo.tabelas import get_salario_minimo
from rescisao.logging_config import log

ALIQUOTA_FGTS = 0.08
ALIQUOTA_MULTA_FGTS = 0.40


@dataclass(frozen=True)
class ResultadoFGTS:
    saldo_base: float
    fgts_rescisao: float
    fgts_aviso_indenizado: float
    base_multa: float
    multa_40: float
    total_conta: float


def calc_fgts(base_de_calculo_fgts: float) -> float:
    """
    Calcula o valor do depósito de FGTS (8%).
    """
    return base_de_calculo_fgts * ALIQUOTA_FGTS


def calcular_fgts(
    contrato: Contrato,
    ledger: LedgerFGTS,
    saldo_salario: float,
    valor_13: float,
    valor_aviso: float,
    valor_13_indenizado: float,
) -> ResultadoFGTS:
    saldo_base = ledger.saldo_para_multa

    base_rescisao = saldo_salario + valor_13 + max(valor_aviso, 0.0)
    fgts_rescisao = calc_fgts(base_rescisao)
    fgts_aviso_indenizado = calc_fgts(valor_13_indenizado)

    base_multa = saldo_base + fgts_rescisao + fgts_aviso_indenizado

    if contrato.is_pedido_demissao:
        # Pedido de demissão: sem multa e sem saque; o saldo permanece na conta
        multa_40 = 0.0
        total_conta = 0.0
    else:
        multa_40 = base_multa * ALIQUOTA_MULTA_FGTS
        total_conta = base_multa + multa_40

    log.debug(
        f"[Cálculo] FGTS: Saldo R$ {saldo_base:.2f}, Rescisório R$ {fgts_rescisao:.2f}, "
        f"s/ 13º Indenizado R$ {fgts_aviso_indenizado:.2f}, Multa R$ {multa_40:.2f}, "
        f"Total R$ {total_conta:.2f}"
    )

    return ResultadoFGTS(
        saldo_base=saldo_base,
        fgts_rescisao=fgts_rescisao,
        fgts_aviso_indenizado=fgts_aviso_indenizado,
        base_multa=base_multa,
        multa_40=multa_40,
        total_conta=total_conta,
    )


def gerar_competencias(admissao: date, demissao: date) -> Tuple[DepositoFGTS, ...]:
    """Lista mensal zerada, do mês da admissão ao mês anterior à demissão."""
    if demissao < admissao:
        return ()
    return tuple(DepositoFGTS(competencia=c) for c in competencias_entre(admissao, demissao))


def preencher_com_minimo(depositos: Iterable[DepositoFGTS]) -> Tuple[DepositoFGTS, ...]:
    """Preenche cada competência com 8% do salário mínimo vigente no mês."""
    preenchidos = []
    for deposito in depositos:
        ano, mes = (int(p) for p in deposito.competencia.split("-"))
        minimo = get_salario_minimo(date(ano, mes, 1))
        preenchidos.append(DepositoFGTS(competencia=deposito.competencia, valor=minimo * ALIQUOTA_FGTS))
    return tuple(preenchidos)
