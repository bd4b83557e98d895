# rescisao/calculo/calculadora.py

"""
Orquestração do cálculo rescisório.

Recebe contrato, histórico de FGTS e ajustes manuais e devolve uma Rescisao
nova. Não guarda estado entre chamadas.
"""

from typing import Iterable, Optional

from rescisao.calculo import aviso_previo, fgts, impostos, proporcionalidade
from rescisao.calculo.datas import DIAS_MES_COMERCIAL, dia_comercial
from rescisao.calculo.modelos import Ajuste, Contrato, LedgerFGTS, Rescisao, TipoAjuste
from rescisao.logging_config import log

MESES_ANO = 12


def _terco(valor: float) -> float:
    return valor / 3


def calcular_rescisao(
    contrato: Contrato,
    ledger: Optional[LedgerFGTS] = None,
    ajustes: Iterable[Ajuste] = (),
) -> Rescisao:
    ledger = ledger or LedgerFGTS()
    ajustes = tuple(ajustes)

    log.info(
        f"Calculando rescisão ({contrato.motivo.value}, aviso {contrato.tipo_aviso.value}) "
        f"de {contrato.data_admissao:%d/%m/%Y} a {contrato.data_demissao:%d/%m/%Y}"
    )

    salario = contrato.salario_total
    admissao = contrato.data_admissao
    demissao = contrato.data_demissao
    avo = salario / MESES_ANO

    # 1. Aviso prévio
    aviso = aviso_previo.calcular_aviso(contrato)

    # 2. Saldo de salário
    dias_trabalhados = dia_comercial(demissao.day)
    saldo_salario = (salario / DIAS_MES_COMERCIAL) * dias_trabalhados

    # 3. 13º salário proporcional
    avos_13 = proporcionalidade.avos_13(admissao, demissao)
    valor_13 = avo * avos_13

    # 4. Férias vencidas (a cada 2 períodos vencidos, 1 é paga em dobro)
    ferias_vencidas = contrato.ferias_vencidas_qtd * salario
    qtd_ferias_dobro = contrato.ferias_vencidas_qtd // 2
    ferias_dobro = qtd_ferias_dobro * salario
    terco_ferias_vencidas = _terco(ferias_vencidas)
    terco_ferias_dobro = _terco(ferias_dobro)

    # 5. Férias proporcionais
    inicio_aquisitivo = proporcionalidade.inicio_periodo_aquisitivo(admissao, demissao)
    avos_ferias = proporcionalidade.avos_ferias(inicio_aquisitivo, demissao)
    ferias_proporcionais = avo * avos_ferias
    terco_ferias_proporcionais = _terco(ferias_proporcionais)

    # 6. Projeção do aviso indenizado (só na dispensa sem justa causa)
    valor_13_indenizado = 0.0
    ferias_indenizadas = 0.0
    terco_ferias_indenizadas = 0.0
    if aviso.projeta_indenizacao:
        avos_13_extra = proporcionalidade.avos_indenizados(
            avos_13, proporcionalidade.avos_13(admissao, aviso.projecao)
        )
        avos_ferias_extra = proporcionalidade.avos_indenizados(
            avos_ferias, proporcionalidade.avos_ferias(inicio_aquisitivo, aviso.projecao)
        )
        valor_13_indenizado = avo * avos_13_extra
        ferias_indenizadas = avo * avos_ferias_extra
        terco_ferias_indenizadas = _terco(ferias_indenizadas)
        log.debug(
            f"Projeção até {aviso.projecao:%d/%m/%Y}: +{avos_13_extra} avos de 13º, "
            f"+{avos_ferias_extra} avos de férias"
        )

    # 7. FGTS
    resultado_fgts = fgts.calcular_fgts(
        contrato,
        ledger,
        saldo_salario=saldo_salario,
        valor_13=valor_13,
        valor_aviso=aviso.valor_provento,
        valor_13_indenizado=valor_13_indenizado,
    )

    # 8. INSS e IRRF: salário e 13º são fatos geradores separados
    descontos_salario = impostos.calc_descontos(saldo_salario)
    descontos_13 = impostos.calc_descontos(valor_13 + valor_13_indenizado)
    desconto_inss = descontos_salario.inss + descontos_13.inss
    total_irrf = descontos_salario.irrf + descontos_13.irrf

    # 9. Totais
    total_proventos = (
        saldo_salario
        + aviso.valor_provento
        + valor_13
        + ferias_vencidas
        + terco_ferias_vencidas
        + ferias_dobro
        + terco_ferias_dobro
        + ferias_proporcionais
        + terco_ferias_proporcionais
        + valor_13_indenizado
        + ferias_indenizadas
        + terco_ferias_indenizadas
    )
    total_descontos = desconto_inss + total_irrf + aviso.valor_desconto

    # Ajustes manuais entram só no final: não alteram bases de INSS, IRRF ou FGTS
    total_ajustes_proventos = sum((a.valor for a in ajustes if a.tipo == TipoAjuste.PROVENTO), 0.0)
    total_ajustes_descontos = sum((a.valor for a in ajustes if a.tipo == TipoAjuste.DESCONTO), 0.0)

    rescisao_liquida = (total_proventos + total_ajustes_proventos) - (
        total_descontos + total_ajustes_descontos
    )
    total_geral = rescisao_liquida + resultado_fgts.total_conta

    log.success(
        f"Rescisão calculada: líquido R$ {rescisao_liquida:.2f}, FGTS R$ {resultado_fgts.total_conta:.2f}, "
        f"total geral R$ {total_geral:.2f}"
    )

    return Rescisao(
        motivo=contrato.motivo,
        tipo_aviso=contrato.tipo_aviso,
        salario_total=salario,
        dias_trabalhados=dias_trabalhados,
        saldo_salario=saldo_salario,
        dias_aviso=aviso.dias_aviso,
        dias_aviso_adicional=aviso.dias_adicionais,
        projecao_aviso=aviso.projecao,
        valor_aviso=aviso.valor_provento,
        valor_aviso_desconto=aviso.valor_desconto,
        avos_13=avos_13,
        valor_13=valor_13,
        valor_13_indenizado=valor_13_indenizado,
        ferias_vencidas=ferias_vencidas,
        terco_ferias_vencidas=terco_ferias_vencidas,
        qtd_ferias_dobro=qtd_ferias_dobro,
        ferias_dobro=ferias_dobro,
        terco_ferias_dobro=terco_ferias_dobro,
        avos_ferias=avos_ferias,
        ferias_proporcionais=ferias_proporcionais,
        terco_ferias_proporcionais=terco_ferias_proporcionais,
        ferias_indenizadas=ferias_indenizadas,
        terco_ferias_indenizadas=terco_ferias_indenizadas,
        inss_salario=descontos_salario.inss,
        inss_13=descontos_13.inss,
        desconto_inss=desconto_inss,
        irrf_salario=descontos_salario.irrf,
        irrf_13=descontos_13.irrf,
        total_irrf=total_irrf,
        saldo_fgts_base=resultado_fgts.saldo_base,
        fgts_rescisao=resultado_fgts.fgts_rescisao,
        fgts_aviso_indenizado=resultado_fgts.fgts_aviso_indenizado,
        base_multa_fgts=resultado_fgts.base_multa,
        multa_40=resultado_fgts.multa_40,
        total_fgts=resultado_fgts.total_conta,
        total_proventos=total_proventos,
        total_descontos=total_descontos,
        total_ajustes_proventos=total_ajustes_proventos,
        total_ajustes_descontos=total_ajustes_descontos,
        rescisao_liquida=rescisao_liquida,
        total_geral=total_geral,
        ajustes=ajustes,
    )
