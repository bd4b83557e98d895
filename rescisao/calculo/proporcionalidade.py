# rescisao/calculo/proporcionalidade.py

"""
Cálculo de avos (1/12) do 13º salário e das férias proporcionais.

As duas regras usam critérios distintos:
- 13º: conta dias do mês comercial dentro da janela, mês vale se >= 15 dias.
- Férias: janela mensal móvel a partir do aniversário, mês vale se >= 14 dias.
"""

from datetime import date

from rescisao.calculo.datas import (
    DIAS_MES_COMERCIAL,
    add_anos,
    add_meses,
    diff_days,
    dia_comercial,
    primeiro_dia_mes,
)
from rescisao.logging_config import log

MAX_AVOS = 12
DIAS_MINIMOS_AVO_13 = 15
DIAS_MINIMOS_AVO_FERIAS = 14


def _dias_no_mes_13(mes: date, inicio: date, fim: date) -> int:
    dias = DIAS_MES_COMERCIAL
    if (mes.year, mes.month) == (inicio.year, inicio.month):
        dias = 0 if inicio.day == 31 else DIAS_MES_COMERCIAL - inicio.day + 1
    # Mês final prevalece quando admissão e demissão caem no mesmo mês
    if (mes.year, mes.month) == (fim.year, fim.month):
        dias = dia_comercial(fim.day)
    return dias


def avos_13(inicio: date, fim: date) -> int:
    """
    Avos de 13º entre `inicio` (admissão) e `fim` (demissão ou projeção do aviso).

    Mesmo ano: mês a mês. Anos diferentes: conta só o ano de `fim`, de forma
    simplificada (meses completos antes de `fim` + 1 se o dia de `fim` >= 15).
    """
    if inicio.year != fim.year:
        avos = (fim.month - 1) + (1 if fim.day >= DIAS_MINIMOS_AVO_13 else 0)
        log.debug(f"Avos 13º (ano da demissão {fim.year}): {avos}")
        return min(avos, MAX_AVOS)

    avos = 0
    mes = primeiro_dia_mes(inicio)
    while mes <= fim:
        if _dias_no_mes_13(mes, inicio, fim) >= DIAS_MINIMOS_AVO_13:
            avos += 1
        mes = add_meses(mes, 1)

    log.debug(f"Avos 13º de {inicio:%d/%m/%Y} a {fim:%d/%m/%Y}: {avos}")
    return min(avos, MAX_AVOS)


def inicio_periodo_aquisitivo(admissao: date, demissao: date) -> date:
    """Último aniversário de admissão que não ultrapassa a data de demissão."""
    inicio = admissao
    while add_anos(inicio, 1) <= demissao:
        inicio = add_anos(inicio, 1)
    return inicio


def avos_ferias(inicio: date, fim: date) -> int:
    """Avos de férias do período aquisitivo iniciado em `inicio` até `fim`."""
    avos = 0
    cursor = inicio
    while cursor < fim:
        # cada janela parte do fim da anterior (31/01 -> 03/03 -> 03/04)
        proximo = add_meses(cursor, 1)
        limite = min(proximo, fim)
        if diff_days(limite, cursor) >= DIAS_MINIMOS_AVO_FERIAS:
            avos += 1
        cursor = proximo

    log.debug(f"Avos férias de {inicio:%d/%m/%Y} a {fim:%d/%m/%Y}: {avos}")
    return min(avos, MAX_AVOS)


def avos_indenizados(avos_atuais: int, avos_projetados: int) -> int:
    """Avos ganhos com a projeção do aviso indenizado (nunca negativo)."""
    return max(0, avos_projetados - avos_atuais)
