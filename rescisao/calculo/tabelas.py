# rescisao/calculo/tabelas.py

"""
Tabelas de referência (somente leitura).

1. HISTORICO_SALARIO_MINIMO: salário mínimo nacional por data de vigência.
2. INSS_TABLE_2026: faixas progressivas da contribuição do empregado.
3. IRRF_TABLE_2026 + constantes da redução/isenção de 2026.
"""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from rescisao.logging_config import log


@dataclass(frozen=True)
class VigenciaSalarioMinimo:
    vigencia: date
    valor: float


@dataclass(frozen=True)
class FaixaINSS:
    limite: float
    aliquota: float


@dataclass(frozen=True)
class FaixaIRRF:
    limite: float
    aliquota: float
    deducao: float  # parcela a deduzir


# --- SALÁRIO MÍNIMO (mais recente primeiro) ---
HISTORICO_SALARIO_MINIMO: Tuple[VigenciaSalarioMinimo, ...] = (
    VigenciaSalarioMinimo(date(2026, 1, 1), 1621.00),
    VigenciaSalarioMinimo(date(2025, 1, 1), 1518.00),
    VigenciaSalarioMinimo(date(2024, 1, 1), 1412.00),
    VigenciaSalarioMinimo(date(2023, 5, 1), 1320.00),
    VigenciaSalarioMinimo(date(2023, 1, 1), 1302.00),
    VigenciaSalarioMinimo(date(2022, 1, 1), 1212.00),
    VigenciaSalarioMinimo(date(2021, 1, 1), 1100.00),
    VigenciaSalarioMinimo(date(2020, 2, 1), 1045.00),
    VigenciaSalarioMinimo(date(2020, 1, 1), 1039.00),
    VigenciaSalarioMinimo(date(2019, 1, 1), 998.00),
    VigenciaSalarioMinimo(date(2018, 1, 1), 954.00),
    VigenciaSalarioMinimo(date(2017, 1, 1), 937.00),
    VigenciaSalarioMinimo(date(2016, 1, 1), 880.00),
    VigenciaSalarioMinimo(date(2015, 1, 1), 788.00),
    VigenciaSalarioMinimo(date(2014, 1, 1), 724.00),
    VigenciaSalarioMinimo(date(2013, 1, 1), 678.00),
    VigenciaSalarioMinimo(date(2012, 1, 1), 622.00),
    VigenciaSalarioMinimo(date(2011, 3, 1), 545.00),
    VigenciaSalarioMinimo(date(2011, 1, 1), 540.00),
    VigenciaSalarioMinimo(date(2010, 1, 1), 510.00),
    VigenciaSalarioMinimo(date(2009, 2, 1), 465.00),
    VigenciaSalarioMinimo(date(2008, 3, 1), 415.00),
    VigenciaSalarioMinimo(date(2007, 4, 1), 380.00),
    VigenciaSalarioMinimo(date(2006, 4, 1), 350.00),
    VigenciaSalarioMinimo(date(2005, 5, 1), 300.00),
    VigenciaSalarioMinimo(date(2004, 5, 1), 260.00),
    VigenciaSalarioMinimo(date(2003, 6, 1), 240.00),
    VigenciaSalarioMinimo(date(2002, 6, 1), 200.00),
    VigenciaSalarioMinimo(date(2001, 6, 1), 180.00),
    VigenciaSalarioMinimo(date(2000, 6, 1), 151.00),
)

# --- CONSTANTES DE INSS (Base 2026, salário mínimo R$ 1.621) ---
INSS_TETO_BASE_2026 = 8157.41

# Formato: (limite_da_faixa, aliquota). A última faixa vai até o teto.
INSS_TABLE_2026: Tuple[FaixaINSS, ...] = (
    FaixaINSS(1621.00, 0.075),
    FaixaINSS(2793.88, 0.09),
    FaixaINSS(4190.83, 0.12),
    FaixaINSS(float("inf"), 0.14),
)

# --- CONSTANTES DE IRRF ---
# Formato: (limite_da_faixa, aliquota, deducao_da_parcela)
IRRF_TABLE_2026: Tuple[FaixaIRRF, ...] = (
    FaixaIRRF(2259.20, 0.0, 0.0),  # Isento
    FaixaIRRF(2826.65, 0.075, 169.44),
    FaixaIRRF(3751.05, 0.15, 381.44),
    FaixaIRRF(4664.68, 0.225, 662.77),
    # Acima de 4664.68 é a última faixa
    FaixaIRRF(float("inf"), 0.275, 896.00),
)

# Redução 2026: até 5.000 isento; de 5.000,01 a 7.350 redução = 978,62 - 0,133145 x renda
IRRF_LIMITE_ISENCAO_2026 = 5000.00
IRRF_LIMITE_REDUCAO_2026 = 7350.00
IRRF_REDUCAO_CONSTANTE_2026 = 978.62
IRRF_REDUCAO_FATOR_2026 = 0.133145


def get_salario_minimo(data: date) -> float:
    """
    Retorna o salário mínimo vigente na data informada.
    Datas anteriores ao histórico recebem o valor mais antigo conhecido.
    """
    for registro in HISTORICO_SALARIO_MINIMO:
        if data >= registro.vigencia:
            return registro.valor

    valor_mais_antigo = HISTORICO_SALARIO_MINIMO[-1].valor
    log.debug(
        f"Data {data:%d/%m/%Y} anterior ao histórico de salário mínimo, usando R$ {valor_mais_antigo}"
    )
    return valor_mais_antigo
