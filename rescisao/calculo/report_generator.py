# rescisao/calculo/report_generator.py
"""
Módulo para gerar o demonstrativo de valores da rescisão (PDF e CSV).
"""

import pandas as pd
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Tuple
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.enums import TA_LEFT, TA_RIGHT, TA_CENTER

from rescisao.calculo.modelos import Contrato, Rescisao, TipoAjuste
from rescisao.config import settings
from rescisao.logging_config import log

COLUNAS_DEMONSTRATIVO = ["Rubrica", "Referência", "Proventos", "Descontos"]
MAX_LINHAS_ASSINATURA = 3


def formatar_valor(valor: float, com_sinal: bool = False, zero_vazio: bool = True) -> str:
    """Formata valor monetário no padrão brasileiro. Zero vira "" nas linhas de verba."""
    if pd.isna(valor):
        return ""
    valor = round(float(valor), 2)
    if valor == 0:
        if zero_vazio:
            return ""
        valor = 0.0

    sinal = ""
    if com_sinal and valor < 0:
        sinal = "-"
        valor = abs(valor)

    return f"{sinal}{valor:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def resumo_totais(rescisao: Rescisao) -> List[str]:
    """Linhas de fechamento do demonstrativo (FGTS, líquido e total geral), zeros inclusos."""
    linhas = []
    # FGTS só existe para saque na dispensa sem justa causa
    if not rescisao.is_pedido_demissao:
        linhas += [
            f"Base de Cálculo (Fins Rescisórios): R$ {formatar_valor(rescisao.base_multa_fgts, zero_vazio=False)}",
            f"Multa Rescisória (40%): R$ {formatar_valor(rescisao.multa_40, zero_vazio=False)}",
            f"Total FGTS a Depositar: R$ {formatar_valor(rescisao.total_fgts, zero_vazio=False)}",
        ]

    liquido = formatar_valor(rescisao.rescisao_liquida, com_sinal=True, zero_vazio=False)
    total = formatar_valor(rescisao.total_geral, com_sinal=True, zero_vazio=False)
    complemento = "" if rescisao.is_pedido_demissao else " (Rescisão Líquida + Total FGTS)"
    linhas += [
        f"Rescisão Líquida a Receber: R$ {liquido}",
        f"Total Geral a Receber{complemento}: R$ {total}",
    ]
    return linhas


def titulo_motivo(rescisao: Rescisao) -> str:
    return "Pedido de Demissão" if rescisao.is_pedido_demissao else "Dispensa sem Justa Causa"


def limitar_texto_assinatura(texto: str) -> str:
    """Mantém no máximo 3 linhas do texto exibido acima das assinaturas."""
    linhas = (texto or "").strip().splitlines()
    return "\n".join(linhas[:MAX_LINHAS_ASSINATURA])


def gerar_demonstrativo(rescisao: Rescisao) -> pd.DataFrame:
    """
    Monta as linhas do demonstrativo (Rubrica, Referência, Proventos, Descontos).

    Saldo de salário, 13º proporcional, férias proporcionais (+1/3) e INSS
    aparecem sempre; as demais rubricas só quando têm valor.
    """
    linhas: List[dict] = []

    def provento(rubrica: str, referencia: str, valor: float, opcional: bool = True):
        if opcional and valor <= 0:
            return
        linhas.append({"Rubrica": rubrica, "Referência": referencia, "Proventos": valor, "Descontos": 0.0})

    def desconto(rubrica: str, referencia: str, valor: float, opcional: bool = True):
        if opcional and valor <= 0:
            return
        linhas.append({"Rubrica": rubrica, "Referência": referencia, "Proventos": 0.0, "Descontos": valor})

    # Proventos
    provento("Saldo de Salário", f"{rescisao.dias_trabalhados}d", rescisao.saldo_salario, opcional=False)
    provento("Aviso Prévio Indenizado", f"{rescisao.dias_aviso}d", rescisao.valor_aviso)
    provento("13º Salário Proporcional", f"{rescisao.avos_13}/12", rescisao.valor_13, opcional=False)
    provento("13º Salário s/ Aviso Indenizado", "-", rescisao.valor_13_indenizado)
    provento("Férias Vencidas", "-", rescisao.ferias_vencidas)
    provento("1/3 Férias Vencidas", "1/3", rescisao.terco_ferias_vencidas)
    provento("Férias em Dobro", str(rescisao.qtd_ferias_dobro), rescisao.ferias_dobro)
    provento("1/3 s/ Férias em Dobro", "1/3", rescisao.terco_ferias_dobro)
    provento("Férias Proporcionais", f"{rescisao.avos_ferias}/12", rescisao.ferias_proporcionais, opcional=False)
    provento("1/3 Férias Proporcionais", "1/3", rescisao.terco_ferias_proporcionais, opcional=False)
    provento("Férias s/ Aviso Indenizado", "-", rescisao.ferias_indenizadas)
    provento("1/3 s/ Férias Indenizadas", "1/3", rescisao.terco_ferias_indenizadas)
    for ajuste in rescisao.ajustes:
        if ajuste.tipo == TipoAjuste.PROVENTO:
            provento(ajuste.descricao, "Manual", ajuste.valor)

    # Descontos
    desconto("INSS", "Desc.", rescisao.desconto_inss, opcional=False)
    desconto("IRRF (Tabela 2026)", "Desc.", rescisao.total_irrf)
    desconto("Aviso Prévio (Não Trabalhado)", "30d", rescisao.valor_aviso_desconto)
    for ajuste in rescisao.ajustes:
        if ajuste.tipo == TipoAjuste.DESCONTO:
            desconto(ajuste.descricao, "Manual", ajuste.valor)

    return pd.DataFrame(linhas, columns=COLUNAS_DEMONSTRATIVO)


def gerar_relatorio_rescisao(
    rescisao: Rescisao,
    contrato: Contrato,
    output_path: str = settings.REPORT_OUTPUT_DIR,
    incluir_assinaturas: bool = True,
    texto_assinatura: str = "",
) -> Tuple[Optional[str], Optional[str]]:
    """
    Gera o demonstrativo de valores da rescisão (PDF e CSV).

    Args:
        rescisao: Resultado do cálculo
        contrato: Contrato usado no cálculo (datas e remuneração do cabeçalho)
        output_path: Diretório de saída
        incluir_assinaturas: Inclui os campos de assinatura no PDF
        texto_assinatura: Texto opcional acima das assinaturas (máx. 3 linhas)

    Returns:
        Tupla (caminho_pdf, caminho_csv)
    """
    df_demonstrativo = gerar_demonstrativo(rescisao)

    # Cria diretório se não existir
    Path(output_path).mkdir(parents=True, exist_ok=True)

    hoje = date.today().strftime("%Y-%m-%d")
    nome_base = f"{output_path}/rescisao_{contrato.data_demissao:%Y%m%d}_{hoje}"

    caminho_pdf = _gerar_pdf(
        df_demonstrativo,
        rescisao,
        contrato,
        f"{nome_base}.pdf",
        incluir_assinaturas,
        limitar_texto_assinatura(texto_assinatura),
    )
    caminho_csv = _gerar_csv(df_demonstrativo, rescisao, f"{nome_base}.csv")

    return caminho_pdf, caminho_csv


def _gerar_pdf(
    df: pd.DataFrame,
    rescisao: Rescisao,
    contrato: Contrato,
    caminho: str,
    incluir_assinaturas: bool,
    texto_assinatura: str,
) -> Optional[str]:
    """Gera o PDF do demonstrativo."""
    try:
        doc = SimpleDocTemplate(
            caminho,
            pagesize=A4,
            rightMargin=1.5*cm,
            leftMargin=1.5*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
        )

        elementos = []
        styles = getSampleStyleSheet()

        titulo_style = ParagraphStyle(
            'CustomTitle',
            parent=styles['Heading1'],
            fontSize=14,
            textColor=colors.black,
            spaceAfter=6,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        )

        subtitulo_style = ParagraphStyle(
            'CustomSubtitle',
            parent=styles['Normal'],
            fontSize=9,
            textColor=colors.black,
            spaceAfter=3,
            alignment=TA_LEFT,
        )

        # Cabeçalho
        elementos.append(Paragraph("<b>Demonstrativo de Valores</b>", titulo_style))
        elementos.append(Paragraph(
            f"Cálculo Rescisório Trabalhista ({titulo_motivo(rescisao)})", subtitulo_style
        ))
        elementos.append(Paragraph(f"Data do Cálculo: {date.today():%d/%m/%Y}", subtitulo_style))
        elementos.append(Spacer(1, 0.3*cm))

        # Resumo do contrato
        resumo = (
            f"Admissão: {contrato.data_admissao:%d/%m/%Y} &nbsp;&nbsp; "
            f"Demissão: {contrato.data_demissao:%d/%m/%Y} &nbsp;&nbsp; "
            f"Aviso Prévio: {contrato.tipo_aviso.value.upper()} &nbsp;&nbsp; "
            f"Remuneração: R$ {formatar_valor(contrato.salario_total)}"
        )
        elementos.append(Paragraph(resumo, subtitulo_style))
        elementos.append(Spacer(1, 0.5*cm))

        # Tabela de verbas
        dados_tabela = [[
            Paragraph("<b>Rubrica</b>", styles['Normal']),
            Paragraph("<b>Ref.</b>", styles['Normal']),
            Paragraph("<b>Proventos</b>", styles['Normal']),
            Paragraph("<b>Descontos</b>", styles['Normal']),
        ]]
        for _, row in df.iterrows():
            dados_tabela.append([
                row["Rubrica"],
                row["Referência"],
                formatar_valor(row["Proventos"]),
                formatar_valor(row["Descontos"]),
            ])

        total_proventos = df["Proventos"].sum()
        total_descontos = df["Descontos"].sum()
        dados_tabela.append([
            Paragraph("<b>TOTAIS</b>", styles['Normal']),
            "",
            Paragraph(f"<b>{formatar_valor(total_proventos, zero_vazio=False)}</b>", styles['Normal']),
            Paragraph(f"<b>{formatar_valor(total_descontos, zero_vazio=False)}</b>", styles['Normal']),
        ])

        tabela = Table(dados_tabela, colWidths=[8.5*cm, 2.5*cm, 3*cm, 3*cm])
        tabela.setStyle(TableStyle([
            # Cabeçalho
            ('BACKGROUND', (0, 0), (-1, 0), colors.white),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.black),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 9),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
            ('TOPPADDING', (0, 0), (-1, 0), 8),
            ('LINEBELOW', (0, 0), (-1, 0), 1, colors.black),

            # Dados
            ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
            ('FONTSIZE', (0, 1), (-1, -1), 8),
            ('ALIGN', (0, 1), (0, -1), 'LEFT'),    # Rubrica
            ('ALIGN', (1, 1), (1, -1), 'CENTER'),  # Ref
            ('ALIGN', (2, 1), (3, -1), 'RIGHT'),   # Valores
            ('TEXTCOLOR', (3, 1), (3, -1), colors.darkred),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),

            # Totais
            ('LINEABOVE', (0, -1), (-1, -1), 1, colors.black),
            ('BACKGROUND', (0, -1), (-1, -1), colors.whitesmoke),
        ]))
        elementos.append(tabela)
        elementos.append(Spacer(1, 0.5*cm))

        # Fechamento: FGTS (só na dispensa), líquido e total geral
        if not rescisao.is_pedido_demissao:
            elementos.append(Paragraph("<b>Demonstrativo FGTS</b>", subtitulo_style))
        for linha in resumo_totais(rescisao):
            destaque = linha.startswith("Total")
            elementos.append(Paragraph(f"<b>{linha}</b>" if destaque else linha, subtitulo_style))
            if linha.startswith("Total FGTS"):
                elementos.append(Spacer(1, 0.5*cm))

        if incluir_assinaturas:
            elementos.append(Spacer(1, 1.5*cm))
            if texto_assinatura:
                elementos.append(Paragraph(texto_assinatura.replace("\n", "<br/>"), subtitulo_style))
                elementos.append(Spacer(1, 1*cm))
            assinaturas = Table(
                [["Assinatura do Empregador", "Assinatura do Empregado"]],
                colWidths=[8*cm, 8*cm],
            )
            assinaturas.setStyle(TableStyle([
                ('LINEABOVE', (0, 0), (0, 0), 0.5, colors.grey),
                ('LINEABOVE', (1, 0), (1, 0), 0.5, colors.grey),
                ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
                ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
                ('FONTSIZE', (0, 0), (-1, -1), 8),
            ]))
            elementos.append(assinaturas)

        # Rodapé
        elementos.append(Spacer(1, 0.5*cm))
        elementos.append(Paragraph(
            f"<i>Gerado em {datetime.now().strftime('%d/%m/%Y às %H:%M:%S')} - {settings.APP_NAME}</i>",
            ParagraphStyle(
                'Footer',
                parent=styles['Normal'],
                fontSize=7,
                textColor=colors.grey,
                alignment=TA_RIGHT
            )
        ))

        doc.build(elementos)

        log.success(f"Relatório PDF gerado: {caminho}")
        return caminho

    except Exception as e:
        log.error(f"Erro ao gerar PDF: {e}")
        return None


def _gerar_csv(df: pd.DataFrame, rescisao: Rescisao, caminho: str) -> Optional[str]:
    """Gera o CSV do demonstrativo, com as linhas de totais ao final."""
    try:
        df_csv = df.copy()
        df_csv["Tipo"] = ["DESCONTO" if d > 0 else "PROVENTO" for d in df_csv["Descontos"]]

        totais = [
            {"Rubrica": "Rescisão Líquida", "Referência": "", "Proventos": rescisao.rescisao_liquida,
             "Descontos": 0.0, "Tipo": "LIQUIDO"},
        ]
        if not rescisao.is_pedido_demissao:
            totais.append({"Rubrica": "Total FGTS", "Referência": "", "Proventos": rescisao.total_fgts,
                           "Descontos": 0.0, "Tipo": "FGTS"})
        totais.append({"Rubrica": "Total Geral", "Referência": "", "Proventos": rescisao.total_geral,
                       "Descontos": 0.0, "Tipo": "TOTAL"})

        df_csv = pd.concat([df_csv, pd.DataFrame(totais)], ignore_index=True)
        df_csv[["Proventos", "Descontos"]] = df_csv[["Proventos", "Descontos"]].round(2)
        df_csv.to_csv(caminho, index=False, sep=";", decimal=",", encoding="utf-8-sig")

        log.success(f"Relatório CSV gerado: {caminho}")
        return caminho

    except Exception as e:
        log.error(f"Erro ao gerar CSV: {e}")
        return None
