# rescisao/calculo/datas.py

import calendar
from datetime import date, timedelta
from typing import List

from dateutil.relativedelta import relativedelta

# Mês comercial: todo mês tem 30 dias para fins de saldo de salário e avos.
DIAS_MES_COMERCIAL = 30


def diff_days(d1: date, d2: date) -> int:
    """Diferença absoluta em dias inteiros, independente da ordem."""
    return abs((d1 - d2).days)


def primeiro_dia_mes(d: date) -> date:
    return d.replace(day=1)


def ultimo_dia_mes(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def _avancar(d: date, delta: relativedelta) -> date:
    # relativedelta limita ao fim do mês; o dia excedente transborda para o mês seguinte
    destino = d + delta
    return destino + timedelta(days=d.day - destino.day)


def add_meses(d: date, meses: int) -> date:
    """Avança meses de calendário; dia inexistente no destino transborda (31/01 + 1 mês = 03/03)."""
    return _avancar(d, relativedelta(months=meses))


def add_anos(d: date, anos: int) -> date:
    # 29/02 + 1 ano -> 01/03
    return _avancar(d, relativedelta(years=anos))


def dia_comercial(dia: int) -> int:
    """Normaliza o dia 31 para 30 (mês comercial)."""
    return DIAS_MES_COMERCIAL if dia == 31 else dia


def competencias_entre(inicio: date, fim: date) -> List[str]:
    """
    Competências "YYYY-MM" do mês de `inicio` até o mês ANTERIOR ao de `fim`.
    O mês da rescisão fica de fora: o depósito dele entra como FGTS rescisório.
    """
    competencias = []
    atual = primeiro_dia_mes(inicio)
    limite = primeiro_dia_mes(fim)
    while atual < limite:
        competencias.append(atual.strftime("%Y-%m"))
        atual = add_meses(atual, 1)
    return competencias
