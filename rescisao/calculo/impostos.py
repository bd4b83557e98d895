# rescisao/calculo/impostos.py

"""
Descontos legais: INSS (progressivo por faixas) e IRRF (tabela progressiva
com a redução/isenção de 2026).
"""

from dataclasses import dataclass

from rescisao.calculo.tabelas import (
    INSS_TABLE_2026,
    INSS_TETO_BASE_2026,
    IRRF_LIMITE_ISENCAO_2026,
    IRRF_LIMITE_REDUCAO_2026,
    IRRF_REDUCAO_CONSTANTE_2026,
    IRRF_REDUCAO_FATOR_2026,
    IRRF_TABLE_2026,
)
from rescisao.logging_config import log
from rescisao.shared.utils import arredondar


@dataclass(frozen=True)
class ResultadoDescontos:
    base_inss: float
    inss: float
    base_irrf: float
    irrf: float


def calc_inss(base_calculo: float) -> float:
    """
    Calcula o INSS do empregado. Cada faixa tributa apenas a parte da base
    que cai dentro dela; a base é limitada ao teto.
    """
    if base_calculo <= 0:
        return 0.0

    base = min(base_calculo, INSS_TETO_BASE_2026)
    inss_calculado = 0.0
    limite_anterior = 0.0
    for faixa in INSS_TABLE_2026:
        if base <= faixa.limite:
            inss_calculado += (base - limite_anterior) * faixa.aliquota
            break
        inss_calculado += (faixa.limite - limite_anterior) * faixa.aliquota
        limite_anterior = faixa.limite

    final_value = arredondar(inss_calculado)
    log.debug(f"[Cálculo] INSS: Base R$ {base_calculo:.2f}, Calculado R$ {final_value}")
    return final_value


def _irrf_tabela(base: float) -> float:
    for faixa in IRRF_TABLE_2026:
        if base <= faixa.limite:
            # Encontrou a faixa! Aplica a fórmula (Alíquota * Base) - Dedução
            return max(0.0, base * faixa.aliquota - faixa.deducao)
    return 0.0


def reducao_irrf_2026(base: float) -> float:
    """Valor da redução de 2026 para bases entre 5.000,01 e 7.350,00."""
    if base <= IRRF_LIMITE_ISENCAO_2026 or base > IRRF_LIMITE_REDUCAO_2026:
        return 0.0
    return max(0.0, IRRF_REDUCAO_CONSTANTE_2026 - IRRF_REDUCAO_FATOR_2026 * base)


def calc_irrf(base_calculo: float) -> float:
    """
    Calcula o IRRF sobre a base já líquida de INSS.

    Até R$ 5.000,00 o imposto é zero; até R$ 7.350,00 aplica-se a redução
    978,62 - 0,133145 x base; acima disso, tabela cheia.
    """
    if base_calculo <= 0:
        return 0.0

    imposto = _irrf_tabela(base_calculo)

    if base_calculo <= IRRF_LIMITE_ISENCAO_2026:
        log.debug(f"[Cálculo] IRRF: Base R$ {base_calculo:.2f} isenta (até R$ 5.000,00)")
        return 0.0

    reducao = reducao_irrf_2026(base_calculo)
    final_value = arredondar(max(0.0, imposto - reducao))

    log.debug(
        f"[Cálculo] IRRF: Base R$ {base_calculo:.2f}, Tabela R$ {imposto:.2f}, "
        f"Redução R$ {reducao:.2f}, Calculado R$ {final_value}"
    )
    return final_value


def calc_descontos(base_bruta: float) -> ResultadoDescontos:
    """INSS sobre a base bruta e IRRF sobre (base - INSS)."""
    inss = calc_inss(base_bruta)
    base_irrf = max(0.0, base_bruta - inss)
    irrf = calc_irrf(base_irrf)
    return ResultadoDescontos(base_inss=base_bruta, inss=inss, base_irrf=base_irrf, irrf=irrf)
